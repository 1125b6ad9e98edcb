# app/infrastructure/external/credentials_adapter.py
from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

import config
from app.domain.models.user import User
from app.domain.ports.password_hasher import PasswordHasher
from app.domain.ports.token_issuer import TokenIssuer


class PasslibPasswordHasher(PasswordHasher):
    def __init__(self, schemes=("pbkdf2_sha256",)):
        self.context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        return self.context.verify(password, password_hash)


class JWTTokenIssuer(TokenIssuer):
    """Tokens firmados con PyJWT. Para el cliente son opacos."""

    def __init__(self, secret_key: str = None, algorithm: str = None, expiry_days: int = None):
        self.secret_key = secret_key or config.JWT_SECRET_KEY
        self.algorithm = algorithm or config.JWT_ALGORITHM
        self.expiry_days = expiry_days or config.TOKEN_EXPIRY_DAYS

    def _encode(self, user: User, token_type: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "usuario": user.usuario,
            "role": user.role.value,
            "type": token_type,
            "iat": now,
            "exp": now + timedelta(days=self.expiry_days),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def issue_access_token(self, user: User) -> str:
        return self._encode(user, "access")

    def issue_refresh_token(self, user: User) -> str:
        return self._encode(user, "refresh")
