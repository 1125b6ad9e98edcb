# app/infrastructure/external/num2words_adapter.py
import re
from decimal import Decimal

from num2words import num2words

from app.domain.ports.amount_transcriber import AmountTranscriber

# num2words escribe la moneda por defecto del idioma (euros); se normaliza a soles
_MONEDAS = [
    (re.compile(r"\b(euros|pesos|soles)\b", re.IGNORECASE), "Soles"),
    (re.compile(r"\b(euro|peso|sol)\b", re.IGNORECASE), "Sol"),
]


class Num2WordsTranscriber(AmountTranscriber):
    """
    Transcribe montos en castellano, p. ej. 100.50 ->
    "Cien Soles con cincuenta céntimos".
    """

    def __init__(self, lang: str = "es"):
        self.lang = lang

    def to_words(self, amount: Decimal) -> str:
        # Con enteros num2words asume céntimos; siempre se le entrega un Decimal
        monto = Decimal(str(amount)).quantize(Decimal("0.01"))
        letras = num2words(monto, lang=self.lang, to="currency")
        for patron, reemplazo in _MONEDAS:
            letras = patron.sub(reemplazo, letras)
        return letras[:1].upper() + letras[1:]
