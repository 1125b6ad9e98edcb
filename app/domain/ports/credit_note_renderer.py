# app/domain/ports/credit_note_renderer.py
from abc import ABC, abstractmethod

from app.domain.models.credit_note import CreditNote


class CreditNoteRenderer(ABC):
    """Puerto para generar el documento imprimible de una nota de crédito."""
    @abstractmethod
    def render(self, note: CreditNote) -> bytes:
        """Retorna el contenido del PDF."""
        pass
