# app/domain/models/user.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    VIEWER = "viewer"


class User(BaseModel):
    id: int
    nombres: str
    usuario: str
    email: str
    role: UserRole = UserRole.USER
    is_active: bool = True
    # Nunca se serializa hacia el cliente
    password_hash: str = Field(exclude=True, repr=False)

    model_config = ConfigDict(from_attributes=True)

    def profile(self) -> dict:
        return {
            "id": str(self.id),
            "nombres": self.nombres,
            "usuario": self.usuario,
            "email": self.email,
            "role": self.role.value,
        }
