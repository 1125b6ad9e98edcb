# app/infrastructure/persistence/credit_note_repository_adapter.py
import logging
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.models.bank import BankRef
from app.domain.models.credit_note import (
    CreditNote, CreditNoteData, CreditNoteFilters, Dni, Ruc, TipoPersona,
)
from app.domain.models.form_configuration import ConfigSnapshot
from app.domain.ports.credit_note_repository import CreditNoteRepository
from .models import NotaCredito
from .transaction import commit_or_raise

logger = logging.getLogger(__name__)


def _columnas(data: CreditNoteData) -> dict:
    """Aplana la identidad tipada a las columnas tipo/dni/ruc."""
    return {
        "tipo": data.tipo.value,
        "nombre_completo": data.nombre_completo,
        "dni": data.dni,
        "ruc": data.ruc,
        "monto_pagar": data.monto_pagar,
        "monto_letras": data.monto_letras,
        "numero_documento_origen": data.numero_documento_origen,
        "concepto_nota": data.concepto_nota,
        "fecha_caducidad": data.fecha_caducidad,
        "responsable_unidad": data.responsable_unidad,
        "banco_id": data.banco_id,
        "numero_cuenta": data.numero_cuenta,
        "cci": data.cci,
        "documentos_adjuntos": data.documentos_adjuntos,
    }


def _to_domain(nota: NotaCredito) -> CreditNote:
    if nota.tipo == TipoPersona.JURIDICA.value:
        identidad = Ruc(numero=nota.ruc)
    else:
        identidad = Dni(numero=nota.dni)
    return CreditNote(
        id=nota.id,
        identidad=identidad,
        nombre_completo=nota.nombre_completo,
        monto_pagar=nota.monto_pagar,
        monto_letras=nota.monto_letras,
        numero_documento_origen=nota.numero_documento_origen,
        concepto_nota=nota.concepto_nota,
        fecha_caducidad=nota.fecha_caducidad,
        responsable_unidad=nota.responsable_unidad,
        banco_id=nota.banco_id,
        numero_cuenta=nota.numero_cuenta,
        cci=nota.cci,
        documentos_adjuntos=nota.documentos_adjuntos,
        datos_estaticos=ConfigSnapshot(**nota.datos_estaticos),
        banco=BankRef.model_validate(nota.banco) if nota.banco else None,
        created_at=nota.created_at,
        updated_at=nota.updated_at,
    )


class SQLAlchemyCreditNoteRepository(CreditNoteRepository):
    def __init__(self, db: Session):
        self.db = db

    def save(self, data: CreditNoteData, snapshot: ConfigSnapshot) -> int:
        nota = NotaCredito(**_columnas(data), datos_estaticos=snapshot.model_dump())
        self.db.add(nota)
        commit_or_raise(self.db, "La nota de crédito no pudo registrarse")
        logger.info(f"Nota de crédito {nota.id} registrada ({nota.tipo}).")
        return nota.id

    def find_by_id(self, note_id: int) -> Optional[CreditNote]:
        nota = self.db.get(NotaCredito, note_id)
        return _to_domain(nota) if nota else None

    def update(self, note_id: int, data: CreditNoteData) -> Optional[CreditNote]:
        nota = self.db.get(NotaCredito, note_id)
        if not nota:
            return None
        # datos_estaticos queda fuera a propósito: es el snapshot original
        for campo, valor in _columnas(data).items():
            setattr(nota, campo, valor)
        commit_or_raise(self.db, "La nota de crédito no pudo actualizarse")
        return _to_domain(nota)

    def delete(self, note_id: int) -> bool:
        nota = self.db.get(NotaCredito, note_id)
        if not nota:
            return False
        self.db.delete(nota)
        commit_or_raise(self.db, "La nota de crédito no pudo eliminarse")
        return True

    def search(self, filters: CreditNoteFilters, offset: int, limit: int) -> Tuple[List[CreditNote], int]:
        query = self.db.query(NotaCredito)
        if filters.tipo:
            query = query.filter(NotaCredito.tipo == filters.tipo.value)
        if filters.nombre:
            query = query.filter(NotaCredito.nombre_completo.icontains(filters.nombre, autoescape=True))
        if filters.documento:
            query = query.filter(or_(
                NotaCredito.dni.icontains(filters.documento, autoescape=True),
                NotaCredito.ruc.icontains(filters.documento, autoescape=True),
            ))

        total = query.count()
        notas = (
            query.order_by(NotaCredito.created_at.desc(), NotaCredito.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return [_to_domain(nota) for nota in notas], total
