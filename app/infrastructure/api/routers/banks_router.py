# app/infrastructure/api/routers/banks_router.py
from typing import List

from fastapi import APIRouter, Depends

from app.application.use_cases.manage_banks import ManageBanksUseCase
from app.domain.models.bank import Bank
from app.infrastructure.api.dependencies import get_bank_use_case
from app.infrastructure.api.schemas import BankPayload, BankStatusPayload

router = APIRouter(prefix="/banks", tags=["Bancos"])


@router.get("", response_model=List[Bank], summary="Listar bancos (activos primero)")
def list_banks(use_case: ManageBanksUseCase = Depends(get_bank_use_case)):
    return use_case.list_banks()


@router.post("", response_model=Bank, status_code=201, summary="Crear un banco")
def create_bank(payload: BankPayload, use_case: ManageBanksUseCase = Depends(get_bank_use_case)):
    return use_case.create_bank(payload.nombre)


@router.put("/{bank_id}", response_model=Bank, summary="Renombrar un banco")
def update_bank(bank_id: int, payload: BankPayload, use_case: ManageBanksUseCase = Depends(get_bank_use_case)):
    return use_case.update_bank(bank_id, payload.nombre)


@router.delete("/{bank_id}", summary="Eliminar (desactivar) un banco")
def delete_bank(bank_id: int, use_case: ManageBanksUseCase = Depends(get_bank_use_case)):
    use_case.delete_bank(bank_id)
    return {"message": "Banco eliminado exitosamente"}


@router.put("/{bank_id}/status", response_model=Bank, summary="Activar o desactivar un banco")
def set_bank_status(
    bank_id: int, payload: BankStatusPayload, use_case: ManageBanksUseCase = Depends(get_bank_use_case)
):
    return use_case.set_bank_active(bank_id, payload.activo)
