# app/application/use_cases/manage_banks.py
import logging
from typing import Any, List

from app.application.validators import reject, require_text
from app.domain.exceptions import NotFoundError
from app.domain.models.bank import Bank
from app.domain.ports.bank_repository import BankRepository

logger = logging.getLogger(__name__)

NOMBRE_REQUERIDO = "El nombre del banco es requerido"
BANCO_NO_ENCONTRADO = "Banco no encontrado"


class ManageBanksUseCase:
    def __init__(self, bank_repo: BankRepository):
        self.bank_repo = bank_repo

    def list_banks(self) -> List[Bank]:
        return self.bank_repo.list_all()

    def create_bank(self, nombre: Any) -> Bank:
        nombre = require_text(nombre, NOMBRE_REQUERIDO)
        banco = self.bank_repo.create(nombre)
        logger.info(f"Banco creado: {banco.id} - {banco.nombre}")
        return banco

    def update_bank(self, bank_id: int, nombre: Any) -> Bank:
        nombre = require_text(nombre, NOMBRE_REQUERIDO)
        banco = self.bank_repo.update_name(bank_id, nombre)
        if not banco:
            raise NotFoundError(BANCO_NO_ENCONTRADO)
        logger.info(f"Banco {bank_id} renombrado a {banco.nombre}")
        return banco

    def set_bank_active(self, bank_id: int, activo: Any) -> Bank:
        if not isinstance(activo, bool):
            reject("El campo activo debe ser un booleano")
        banco = self.bank_repo.set_active(bank_id, activo)
        if not banco:
            raise NotFoundError(BANCO_NO_ENCONTRADO)
        logger.info(f"Banco {bank_id} {'activado' if activo else 'desactivado'}")
        return banco

    def delete_bank(self, bank_id: int) -> Bank:
        """Eliminación lógica: el banco queda inactivo y deja de ofrecerse."""
        banco = self.bank_repo.set_active(bank_id, False)
        if not banco:
            raise NotFoundError(BANCO_NO_ENCONTRADO)
        logger.info(f"Banco {bank_id} eliminado (desactivado)")
        return banco
