# app/domain/ports/user_repository.py
from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.user import User, UserRole


class UserRepository(ABC):

    @abstractmethod
    def find_active_by_login(self, login: str) -> Optional[User]:
        """Busca un usuario activo por nombre de usuario o email."""
        pass

    @abstractmethod
    def exists(self, usuario: str, email: str) -> bool:
        pass

    @abstractmethod
    def create(self, nombres: str, usuario: str, email: str, password_hash: str, role: UserRole) -> User:
        pass
