# app/application/credit_note_validator.py
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

import config
from app.application.validators import clean_text, reject, require_text
from app.domain.models.credit_note import (
    TIPO_POR_COMPROBANTE, CreditNoteData, Dni, DocumentIdentity, Ruc, TipoComprobante, TipoPersona,
)
from app.domain.ports.amount_transcriber import AmountTranscriber
from app.domain.ports.bank_repository import BankRepository

RUC_PATTERN = re.compile(r"[0-9]{11}")
DNI_PATTERN = re.compile(r"[0-9]{8}")
ID_PATTERN = re.compile(r"[0-9]+")

MONTO_INVALIDO = "Monto inválido - debe ser mayor a 0 y menor o igual a 999,999.99"


def tipo_from_comprobante(value: Any) -> TipoPersona:
    """FACTURA -> JURIDICA, BOLETA -> NATURAL."""
    try:
        comprobante = TipoComprobante(clean_text(value))
    except ValueError:
        reject("Tipo de comprobante inválido")
    return TIPO_POR_COMPROBANTE[comprobante]


def tipo_from_persona(value: Any) -> TipoPersona:
    try:
        return TipoPersona(clean_text(value))
    except ValueError:
        reject("Tipo inválido")


def parse_monto(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        reject(MONTO_INVALIDO)
    try:
        monto = Decimal(str(value).strip())
    except InvalidOperation:
        reject(MONTO_INVALIDO)
    if not monto.is_finite() or monto <= 0 or monto > config.MONTO_MAXIMO:
        reject(MONTO_INVALIDO)
    if monto != monto.quantize(Decimal("0.01")):
        reject("Monto inválido - admite como máximo dos decimales")
    return monto.quantize(Decimal("0.01"))


def parse_fecha(value: Any) -> date:
    texto = require_text(value, "La fecha de caducidad es requerida")
    try:
        return date.fromisoformat(texto)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(texto.replace("Z", "+00:00")).date()
    except ValueError:
        reject("La fecha de caducidad no tiene un formato válido (AAAA-MM-DD)")


class CreditNoteValidator:
    """
    Reglas estructurales compartidas por el envío público y la edición
    administrativa. Se detiene en la primera regla incumplida.
    """

    def __init__(self, transcriber: AmountTranscriber, bank_repo: BankRepository):
        self.transcriber = transcriber
        self.bank_repo = bank_repo

    def _identidad(self, tipo: TipoPersona, payload: Mapping[str, Any]) -> DocumentIdentity:
        # El tipo decide qué documento se lee; el otro se descarta
        if tipo == TipoPersona.JURIDICA:
            ruc = clean_text(payload.get("ruc"))
            if not ruc or not RUC_PATTERN.fullmatch(ruc):
                reject("RUC inválido - debe tener exactamente 11 dígitos")
            return Ruc(numero=ruc)
        dni = clean_text(payload.get("dni"))
        if not dni or not DNI_PATTERN.fullmatch(dni):
            reject("DNI inválido - debe tener exactamente 8 dígitos")
        return Dni(numero=dni)

    def _banco_id(self, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        # Solo enteros o cadenas de dígitos: un 1.9 no se trunca a 1
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            reject("Banco inválido")
        texto = str(value).strip()
        if not ID_PATTERN.fullmatch(texto):
            reject("Banco inválido")
        banco_id = int(texto)
        if not self.bank_repo.find_by_id(banco_id):
            reject("Banco no encontrado")
        return banco_id

    def build(self, tipo: TipoPersona, payload: Mapping[str, Any]) -> CreditNoteData:
        nombre_completo = require_text(payload.get("nombre_completo"), "El nombre completo es requerido")
        identidad = self._identidad(tipo, payload)
        monto = parse_monto(payload.get("monto_pagar"))
        numero_documento_origen = require_text(
            payload.get("numero_documento_origen"), "El número de documento de origen es requerido"
        )
        concepto_nota = require_text(payload.get("concepto_nota"), "El concepto de la nota es requerido")
        fecha_caducidad = parse_fecha(payload.get("fecha_caducidad"))
        responsable_unidad = require_text(
            payload.get("responsable_unidad"), "El responsable de la unidad es requerido"
        )

        return CreditNoteData(
            identidad=identidad,
            nombre_completo=nombre_completo,
            monto_pagar=monto,
            monto_letras=self.transcriber.to_words(monto),
            numero_documento_origen=numero_documento_origen,
            concepto_nota=concepto_nota,
            fecha_caducidad=fecha_caducidad,
            responsable_unidad=responsable_unidad,
            banco_id=self._banco_id(payload.get("banco_id")),
            numero_cuenta=clean_text(payload.get("numero_cuenta")),
            cci=clean_text(payload.get("cci")),
            documentos_adjuntos=clean_text(payload.get("documentos_adjuntos")),
        )
