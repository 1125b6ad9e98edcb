# app/infrastructure/persistence/bank_repository_adapter.py
from typing import List, Optional

from sqlalchemy.orm import Session

from app.domain.models.bank import Bank
from app.domain.ports.bank_repository import BankRepository
from .models import Banco
from .transaction import commit_or_raise


class SQLAlchemyBankRepository(BankRepository):
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Bank]:
        bancos = self.db.query(Banco).order_by(Banco.activo.desc(), Banco.nombre.asc()).all()
        return [Bank.model_validate(banco) for banco in bancos]

    def find_by_id(self, bank_id: int) -> Optional[Bank]:
        banco = self.db.get(Banco, bank_id)
        return Bank.model_validate(banco) if banco else None

    def create(self, nombre: str) -> Bank:
        banco = Banco(nombre=nombre, activo=True)
        self.db.add(banco)
        commit_or_raise(self.db, "El banco ya existe")
        return Bank.model_validate(banco)

    def update_name(self, bank_id: int, nombre: str) -> Optional[Bank]:
        banco = self.db.get(Banco, bank_id)
        if not banco:
            return None
        banco.nombre = nombre
        commit_or_raise(self.db, "Ya existe un banco con ese nombre")
        return Bank.model_validate(banco)

    def set_active(self, bank_id: int, activo: bool) -> Optional[Bank]:
        banco = self.db.get(Banco, bank_id)
        if not banco:
            return None
        banco.activo = activo
        commit_or_raise(self.db, "No se pudo actualizar el banco")
        return Bank.model_validate(banco)
