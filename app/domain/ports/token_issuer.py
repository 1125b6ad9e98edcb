# app/domain/ports/token_issuer.py
from abc import ABC, abstractmethod

from app.domain.models.user import User


class TokenIssuer(ABC):
    """Puerto para emitir los tokens de sesión del panel administrativo."""
    @abstractmethod
    def issue_access_token(self, user: User) -> str:
        pass

    @abstractmethod
    def issue_refresh_token(self, user: User) -> str:
        pass
