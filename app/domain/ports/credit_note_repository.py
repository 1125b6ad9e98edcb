# app/domain/ports/credit_note_repository.py
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.domain.models.credit_note import CreditNote, CreditNoteData, CreditNoteFilters
from app.domain.models.form_configuration import ConfigSnapshot


class CreditNoteRepository(ABC):

    @abstractmethod
    def save(self, data: CreditNoteData, snapshot: ConfigSnapshot) -> int:
        """Guarda la nota con su snapshot y retorna el ID generado."""
        pass

    @abstractmethod
    def find_by_id(self, note_id: int) -> Optional[CreditNote]:
        pass

    @abstractmethod
    def update(self, note_id: int, data: CreditNoteData) -> Optional[CreditNote]:
        """Actualiza los campos editables; el snapshot original no se toca."""
        pass

    @abstractmethod
    def delete(self, note_id: int) -> bool:
        pass

    @abstractmethod
    def search(self, filters: CreditNoteFilters, offset: int, limit: int) -> Tuple[List[CreditNote], int]:
        """
        Retorna la página pedida (más recientes primero) y el total de
        registros que cumplen los filtros.
        """
        pass
