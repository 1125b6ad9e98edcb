# app/application/use_cases/list_credit_notes.py
import math
from typing import Optional

from app.application.validators import clean_text, reject
from app.domain.models.credit_note import CreditNoteFilters, CreditNotePage, TipoPersona
from app.domain.ports.credit_note_repository import CreditNoteRepository

# El panel filtra por "factura"/"boleta"; también se acepta el tipo interno
TIPOS_FILTRO = {
    "factura": TipoPersona.JURIDICA,
    "juridica": TipoPersona.JURIDICA,
    "boleta": TipoPersona.NATURAL,
    "natural": TipoPersona.NATURAL,
}


class ListCreditNotesUseCase:
    def __init__(self, note_repo: CreditNoteRepository):
        self.note_repo = note_repo

    def execute(
        self,
        page: int = 1,
        limit: int = 10,
        tipo: Optional[str] = None,
        nombre: Optional[str] = None,
        documento: Optional[str] = None,
    ) -> CreditNotePage:
        if page < 1 or limit < 1:
            reject("Parámetros de paginación inválidos")

        tipo_filtro = None
        if clean_text(tipo):
            tipo_filtro = TIPOS_FILTRO.get(clean_text(tipo).lower())
            if tipo_filtro is None:
                reject("Tipo de filtro inválido")

        filters = CreditNoteFilters(tipo=tipo_filtro, nombre=clean_text(nombre), documento=clean_text(documento))
        items, total = self.note_repo.search(filters, offset=(page - 1) * limit, limit=limit)
        return CreditNotePage(
            items=items,
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit),
        )
