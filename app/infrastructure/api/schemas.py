# app/infrastructure/api/schemas.py
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from app.domain.models.bank import BankRef
from app.domain.models.credit_note import CreditNote, CreditNotePage
from app.domain.models.form_configuration import ConfigSnapshot

# Los cuerpos de entrada aceptan cualquier valor: la validación de negocio
# vive en los casos de uso y responde con el primer error encontrado.


class BankPayload(BaseModel):
    nombre: Any = None


class BankStatusPayload(BaseModel):
    activo: Any = None


class FormConfigurationPayload(BaseModel):
    dependencia_solicitante: Any = None
    persona_contacto: Any = None
    responsable_unidad: Any = None
    anexo: Any = None


class CreditNotePayload(BaseModel):
    tipo_comprobante: Any = Field(None, description="FACTURA o BOLETA")
    tipo: Any = Field(None, description="NATURAL o JURIDICA (solo edición)")
    nombre_completo: Any = None
    dni: Any = None
    ruc: Any = None
    monto_pagar: Any = None
    monto_letras: Any = Field(None, description="Se ignora: el servidor lo calcula a partir del monto")
    numero_documento_origen: Any = None
    concepto_nota: Any = None
    fecha_caducidad: Any = None
    responsable_unidad: Any = None
    banco_id: Any = None
    numero_cuenta: Any = None
    cci: Any = None
    documentos_adjuntos: Any = Field(None, description="Referencia a los documentos que sustentan la solicitud")


class LoginPayload(BaseModel):
    usuario: Any = None
    contrasenna: Any = None


class RegisterPayload(BaseModel):
    nombres: Any = None
    usuario: Any = None
    email: Any = None
    contrasenna: Any = None


class CreditNoteResponse(BaseModel):
    id: int
    tipo: str
    nombre_completo: str
    dni: Optional[str] = None
    ruc: Optional[str] = None
    monto_pagar: float
    monto_letras: str
    numero_documento_origen: str
    concepto_nota: str
    fecha_caducidad: date
    responsable_unidad: str
    banco_id: Optional[int] = None
    banco: Optional[BankRef] = None
    numero_cuenta: Optional[str] = None
    cci: Optional[str] = None
    documentos_adjuntos: Optional[str] = None
    datos_estaticos: ConfigSnapshot
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, note: CreditNote) -> "CreditNoteResponse":
        return cls(
            id=note.id,
            tipo=note.tipo.value,
            nombre_completo=note.nombre_completo,
            dni=note.dni,
            ruc=note.ruc,
            monto_pagar=float(note.monto_pagar),
            monto_letras=note.monto_letras,
            numero_documento_origen=note.numero_documento_origen,
            concepto_nota=note.concepto_nota,
            fecha_caducidad=note.fecha_caducidad,
            responsable_unidad=note.responsable_unidad,
            banco_id=note.banco_id,
            banco=note.banco,
            numero_cuenta=note.numero_cuenta,
            cci=note.cci,
            documentos_adjuntos=note.documentos_adjuntos,
            datos_estaticos=note.datos_estaticos,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class CreditNoteListResponse(BaseModel):
    notas: List[CreditNoteResponse]
    pagination: Pagination

    @classmethod
    def from_domain(cls, page: CreditNotePage) -> "CreditNoteListResponse":
        return cls(
            notas=[CreditNoteResponse.from_domain(item) for item in page.items],
            pagination=Pagination(page=page.page, limit=page.limit, total=page.total, pages=page.pages),
        )
