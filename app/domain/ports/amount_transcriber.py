# app/domain/ports/amount_transcriber.py
from abc import ABC, abstractmethod
from decimal import Decimal


class AmountTranscriber(ABC):
    """Puerto para convertir un monto en soles a su texto en letras."""
    @abstractmethod
    def to_words(self, amount: Decimal) -> str:
        pass
