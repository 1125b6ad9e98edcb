# app/domain/models/bank.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class Bank(BaseModel):
    """Banco destino de las transferencias. Se desactiva en lugar de borrarse."""
    id: int
    nombre: str
    activo: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class BankRef(BaseModel):
    """Referencia resuelta al banco que se incluye en cada nota de crédito."""
    id: int
    nombre: str

    model_config = ConfigDict(from_attributes=True)
