# app/application/use_cases/authenticate_user.py
import logging
import re
from typing import Any, Dict

from app.application.validators import clean_text, reject
from app.domain.exceptions import AuthenticationError, ConflictError
from app.domain.models.user import User, UserRole
from app.domain.ports.password_hasher import PasswordHasher
from app.domain.ports.token_issuer import TokenIssuer
from app.domain.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
LONGITUD_MINIMA_CONTRASENNA = 6


class AuthenticateUserUseCase:
    """Registro e inicio de sesión mínimos para el panel administrativo."""

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher, token_issuer: TokenIssuer):
        self.user_repo = user_repo
        self.hasher = hasher
        self.token_issuer = token_issuer

    def register(self, nombres: Any, usuario: Any, email: Any, contrasenna: Any) -> User:
        nombres, usuario, email = clean_text(nombres), clean_text(usuario), clean_text(email)
        if not (nombres and usuario and email and isinstance(contrasenna, str) and contrasenna):
            reject("Todos los campos son requeridos")
        if not EMAIL_PATTERN.fullmatch(email):
            reject("El email no es válido")
        if len(contrasenna) < LONGITUD_MINIMA_CONTRASENNA:
            reject(f"La contraseña debe tener al menos {LONGITUD_MINIMA_CONTRASENNA} caracteres")
        if self.user_repo.exists(usuario, email):
            raise ConflictError("El usuario o email ya están registrados")

        user = self.user_repo.create(
            nombres=nombres,
            usuario=usuario,
            email=email,
            password_hash=self.hasher.hash(contrasenna),
            role=UserRole.USER,
        )
        logger.info(f"Usuario registrado: {user.usuario}")
        return user

    def login(self, usuario: Any, contrasenna: Any) -> Dict[str, Any]:
        usuario = clean_text(usuario)
        if not usuario or not isinstance(contrasenna, str) or not contrasenna:
            reject("Usuario y contraseña son requeridos")

        user = self.user_repo.find_active_by_login(usuario)
        if not user:
            logger.warning(f"Intento de acceso con usuario inexistente: {usuario}")
            raise AuthenticationError("Usuario no encontrado")
        if not self.hasher.verify(contrasenna, user.password_hash):
            logger.warning(f"Contraseña incorrecta para {user.usuario}")
            raise AuthenticationError("Contraseña incorrecta")

        logger.info(f"Inicio de sesión: {user.usuario}")
        return {
            "token": self.token_issuer.issue_access_token(user),
            "refreshToken": self.token_issuer.issue_refresh_token(user),
            "usuario": user.profile(),
        }
