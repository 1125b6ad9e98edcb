"""
Monto en letras: determinista y siempre en soles.
"""

import re
from decimal import Decimal

import pytest

from app.infrastructure.external.num2words_adapter import Num2WordsTranscriber

MONTOS = ["0.01", "1.00", "1.50", "21.00", "100.50", "1000.00", "250999.09", "999999.99"]


@pytest.fixture
def transcriber():
    return Num2WordsTranscriber()


@pytest.mark.parametrize("monto", MONTOS)
def test_amount_in_words_is_deterministic_and_in_soles(transcriber, monto):
    primera = transcriber.to_words(Decimal(monto))
    segunda = transcriber.to_words(Decimal(monto))

    assert primera == segunda
    assert re.search(r"\bSol(es)?\b", primera)
    assert not re.search(r"peso|euro", primera, re.IGNORECASE)


def test_plural_currency_noun(transcriber):
    assert "Soles" in transcriber.to_words(Decimal("100.50"))


def test_singular_currency_noun(transcriber):
    letras = transcriber.to_words(Decimal("1.00"))
    assert re.search(r"\bSol\b", letras)
    assert "Soles" not in letras


def test_starts_with_capital_letter(transcriber):
    assert transcriber.to_words(Decimal("100.50"))[0].isupper()


def test_float_and_decimal_inputs_agree(transcriber):
    assert transcriber.to_words(Decimal("100.5")) == transcriber.to_words(Decimal("100.50"))
