# app/infrastructure/persistence/user_repository_adapter.py
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.models.user import User, UserRole
from app.domain.ports.user_repository import UserRepository
from .models import Usuario
from .transaction import commit_or_raise


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_active_by_login(self, login: str) -> Optional[User]:
        login = login.lower()
        usuario = (
            self.db.query(Usuario)
            .filter(or_(Usuario.usuario == login, Usuario.email == login))
            .filter(Usuario.is_active.is_(True))
            .first()
        )
        return User.model_validate(usuario) if usuario else None

    def exists(self, usuario: str, email: str) -> bool:
        return self.db.query(Usuario.id).filter(
            or_(Usuario.usuario == usuario.lower(), Usuario.email == email.lower())
        ).first() is not None

    def create(self, nombres: str, usuario: str, email: str, password_hash: str, role: UserRole) -> User:
        nuevo = Usuario(
            nombres=nombres,
            usuario=usuario.lower(),
            email=email.lower(),
            password_hash=password_hash,
            role=role.value,
            is_active=True,
        )
        self.db.add(nuevo)
        commit_or_raise(self.db, "El usuario o email ya están registrados")
        return User.model_validate(nuevo)
