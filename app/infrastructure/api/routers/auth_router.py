# app/infrastructure/api/routers/auth_router.py
from fastapi import APIRouter, Depends

from app.application.use_cases.authenticate_user import AuthenticateUserUseCase
from app.infrastructure.api.dependencies import get_auth_use_case
from app.infrastructure.api.schemas import LoginPayload, RegisterPayload

router = APIRouter(prefix="/auth", tags=["Autenticación"])


@router.post("/register", status_code=201, summary="Registrar un usuario del panel")
def register(payload: RegisterPayload, use_case: AuthenticateUserUseCase = Depends(get_auth_use_case)):
    user = use_case.register(payload.nombres, payload.usuario, payload.email, payload.contrasenna)
    return {"message": "Usuario registrado exitosamente", "usuario": user.profile()}


@router.post("/login", summary="Iniciar sesión")
def login(payload: LoginPayload, use_case: AuthenticateUserUseCase = Depends(get_auth_use_case)):
    return use_case.login(payload.usuario, payload.contrasenna)
