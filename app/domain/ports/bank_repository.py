# app/domain/ports/bank_repository.py
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.bank import Bank


class BankRepository(ABC):
    """Contrato para el catálogo de bancos."""

    @abstractmethod
    def list_all(self) -> List[Bank]:
        """Retorna todos los bancos, activos primero y luego por nombre."""
        pass

    @abstractmethod
    def find_by_id(self, bank_id: int) -> Optional[Bank]:
        pass

    @abstractmethod
    def create(self, nombre: str) -> Bank:
        """
        Crea un banco activo. Lanza ConflictError si el nombre ya existe,
        sin importar si el existente está activo o no.
        """
        pass

    @abstractmethod
    def update_name(self, bank_id: int, nombre: str) -> Optional[Bank]:
        """Retorna None si el banco no existe; ConflictError si el nombre está tomado."""
        pass

    @abstractmethod
    def set_active(self, bank_id: int, activo: bool) -> Optional[Bank]:
        pass
