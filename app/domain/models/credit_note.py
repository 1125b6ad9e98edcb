# app/domain/models/credit_note.py
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.domain.models.bank import BankRef
from app.domain.models.form_configuration import ConfigSnapshot


class TipoPersona(str, Enum):
    NATURAL = "NATURAL"
    JURIDICA = "JURIDICA"


class TipoComprobante(str, Enum):
    FACTURA = "FACTURA"
    BOLETA = "BOLETA"


# FACTURA se emite a una persona jurídica (RUC), BOLETA a una natural (DNI)
TIPO_POR_COMPROBANTE = {
    TipoComprobante.FACTURA: TipoPersona.JURIDICA,
    TipoComprobante.BOLETA: TipoPersona.NATURAL,
}


class Dni(BaseModel):
    kind: Literal["DNI"] = "DNI"
    numero: str = Field(pattern=r"^[0-9]{8}$")

    model_config = ConfigDict(frozen=True)


class Ruc(BaseModel):
    kind: Literal["RUC"] = "RUC"
    numero: str = Field(pattern=r"^[0-9]{11}$")

    model_config = ConfigDict(frozen=True)


# Una nota lleva exactamente un documento de identidad: nunca ambos, nunca ninguno
DocumentIdentity = Annotated[Union[Dni, Ruc], Field(discriminator="kind")]


class CreditNoteData(BaseModel):
    """
    Campos editables de una nota de crédito, ya validados. El tipo de
    persona y los campos dni/ruc se derivan de `identidad`.
    """
    identidad: DocumentIdentity
    nombre_completo: str
    monto_pagar: Decimal
    monto_letras: str
    numero_documento_origen: str
    concepto_nota: str
    fecha_caducidad: date
    responsable_unidad: str
    banco_id: Optional[int] = None
    numero_cuenta: Optional[str] = None
    cci: Optional[str] = None
    documentos_adjuntos: Optional[str] = None

    @property
    def tipo(self) -> TipoPersona:
        return TipoPersona.JURIDICA if isinstance(self.identidad, Ruc) else TipoPersona.NATURAL

    @property
    def dni(self) -> Optional[str]:
        return self.identidad.numero if isinstance(self.identidad, Dni) else None

    @property
    def ruc(self) -> Optional[str]:
        return self.identidad.numero if isinstance(self.identidad, Ruc) else None


class CreditNote(CreditNoteData):
    id: int
    datos_estaticos: ConfigSnapshot
    banco: Optional[BankRef] = None
    created_at: datetime
    updated_at: datetime


class CreditNoteFilters(BaseModel):
    tipo: Optional[TipoPersona] = None
    nombre: Optional[str] = None
    documento: Optional[str] = None


class CreditNotePage(BaseModel):
    items: List[CreditNote]
    page: int
    limit: int
    total: int
    pages: int
