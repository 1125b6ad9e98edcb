# app/application/use_cases/export_credit_note_pdf.py
import logging

from app.domain.exceptions import NotFoundError
from app.domain.ports.credit_note_renderer import CreditNoteRenderer
from app.domain.ports.credit_note_repository import CreditNoteRepository

logger = logging.getLogger(__name__)


class ExportCreditNotePdfUseCase:
    def __init__(self, note_repo: CreditNoteRepository, renderer: CreditNoteRenderer):
        self.note_repo = note_repo
        self.renderer = renderer

    def execute(self, note_id: int) -> bytes:
        nota = self.note_repo.find_by_id(note_id)
        if not nota:
            raise NotFoundError("Nota de crédito no encontrada")
        contenido = self.renderer.render(nota)
        logger.info(f"[{note_id}] PDF generado ({len(contenido)} bytes).")
        return contenido
