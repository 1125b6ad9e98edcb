# app/infrastructure/api/routers/credit_notes_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.application.use_cases.export_credit_note_pdf import ExportCreditNotePdfUseCase
from app.application.use_cases.list_credit_notes import ListCreditNotesUseCase
from app.application.use_cases.manage_credit_notes import ManageCreditNotesUseCase
from app.application.use_cases.submit_credit_note import SubmitCreditNoteUseCase
from app.infrastructure.api.dependencies import (
    get_export_pdf_use_case, get_list_use_case, get_manage_credit_notes_use_case, get_submit_use_case,
)
from app.infrastructure.api.schemas import CreditNoteListResponse, CreditNotePayload, CreditNoteResponse

router = APIRouter(prefix="/credit-notes", tags=["Notas de crédito"])


@router.post("", status_code=201, summary="Registrar una solicitud de nota de crédito")
def submit_credit_note(
    payload: CreditNotePayload, use_case: SubmitCreditNoteUseCase = Depends(get_submit_use_case)
):
    """
    Formulario público. Valida la solicitud, calcula el monto en letras y
    guarda una copia de la configuración activa junto con la nota.
    """
    note_id = use_case.execute(payload.model_dump())
    return {"success": True, "message": "Nota de crédito creada exitosamente", "id": note_id}


@router.get("", response_model=CreditNoteListResponse, summary="Listar notas de crédito recibidas")
def list_credit_notes(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    tipo: Optional[str] = Query(None, description="factura | boleta"),
    nombre: Optional[str] = Query(None),
    documento: Optional[str] = Query(None, description="Parte del DNI o RUC"),
    use_case: ListCreditNotesUseCase = Depends(get_list_use_case),
):
    resultado = use_case.execute(page=page, limit=limit, tipo=tipo, nombre=nombre, documento=documento)
    return CreditNoteListResponse.from_domain(resultado)


@router.get("/{note_id}", response_model=CreditNoteResponse, summary="Obtener una nota de crédito")
def get_credit_note(note_id: int, use_case: ManageCreditNotesUseCase = Depends(get_manage_credit_notes_use_case)):
    return CreditNoteResponse.from_domain(use_case.get_credit_note(note_id))


@router.put("/{note_id}", summary="Editar una nota de crédito")
def update_credit_note(
    note_id: int,
    payload: CreditNotePayload,
    use_case: ManageCreditNotesUseCase = Depends(get_manage_credit_notes_use_case),
):
    nota = use_case.update_credit_note(note_id, payload.model_dump())
    return {
        "success": True,
        "message": "Nota de crédito actualizada exitosamente",
        "nota": CreditNoteResponse.from_domain(nota),
    }


@router.delete("/{note_id}", summary="Eliminar una nota de crédito")
def delete_credit_note(
    note_id: int, use_case: ManageCreditNotesUseCase = Depends(get_manage_credit_notes_use_case)
):
    use_case.delete_credit_note(note_id)
    return {"success": True, "message": "Nota de crédito eliminada exitosamente"}


@router.get("/{note_id}/pdf", summary="Descargar la nota de crédito en PDF")
def export_credit_note_pdf(
    note_id: int, use_case: ExportCreditNotePdfUseCase = Depends(get_export_pdf_use_case)
):
    contenido = use_case.execute(note_id)
    return Response(
        content=contenido,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="nota-credito-{note_id}.pdf"'},
    )
