# app/application/use_cases/manage_credit_notes.py
import logging
from typing import Any, Mapping

from app.application.credit_note_validator import (
    CreditNoteValidator, tipo_from_comprobante, tipo_from_persona,
)
from app.domain.exceptions import NotFoundError
from app.domain.models.credit_note import CreditNote
from app.domain.ports.credit_note_repository import CreditNoteRepository

logger = logging.getLogger(__name__)

NOTA_NO_ENCONTRADA = "Nota de crédito no encontrada"


class ManageCreditNotesUseCase:
    """Consulta, edición y eliminación desde el panel administrativo."""

    def __init__(self, note_repo: CreditNoteRepository, validator: CreditNoteValidator):
        self.note_repo = note_repo
        self.validator = validator

    def get_credit_note(self, note_id: int) -> CreditNote:
        nota = self.note_repo.find_by_id(note_id)
        if not nota:
            raise NotFoundError(NOTA_NO_ENCONTRADA)
        return nota

    def update_credit_note(self, note_id: int, payload: Mapping[str, Any]) -> CreditNote:
        """
        Vuelve a validar la nota completa y recalcula el monto en letras.
        El snapshot de configuración capturado al crearla se conserva.
        """
        if payload.get("tipo") is None and payload.get("tipo_comprobante") is not None:
            tipo = tipo_from_comprobante(payload.get("tipo_comprobante"))
        else:
            tipo = tipo_from_persona(payload.get("tipo"))
        data = self.validator.build(tipo, payload)

        nota = self.note_repo.update(note_id, data)
        if not nota:
            raise NotFoundError(NOTA_NO_ENCONTRADA)
        logger.info(f"[{note_id}] Nota de crédito actualizada.")
        return nota

    def delete_credit_note(self, note_id: int) -> None:
        if not self.note_repo.delete(note_id):
            raise NotFoundError(NOTA_NO_ENCONTRADA)
        logger.info(f"[{note_id}] Nota de crédito eliminada.")
