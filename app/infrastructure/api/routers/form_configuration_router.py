# app/infrastructure/api/routers/form_configuration_router.py
from fastapi import APIRouter, Depends

from app.application.use_cases.manage_form_configuration import ManageFormConfigurationUseCase
from app.domain.models.form_configuration import FormConfiguration
from app.infrastructure.api.dependencies import get_form_configuration_use_case
from app.infrastructure.api.schemas import FormConfigurationPayload

router = APIRouter(prefix="/form-configuracion", tags=["Configuración del formulario"])


@router.get("", response_model=FormConfiguration, summary="Obtener la configuración activa")
def get_configuration(use_case: ManageFormConfigurationUseCase = Depends(get_form_configuration_use_case)):
    return use_case.get_active_configuration()


@router.post("", response_model=FormConfiguration, status_code=201, summary="Crear y activar una configuración")
def create_configuration(
    payload: FormConfigurationPayload,
    use_case: ManageFormConfigurationUseCase = Depends(get_form_configuration_use_case),
):
    return use_case.create_configuration(payload.model_dump())


@router.put("", response_model=FormConfiguration, summary="Reemplazar la configuración activa")
def update_configuration(
    payload: FormConfigurationPayload,
    use_case: ManageFormConfigurationUseCase = Depends(get_form_configuration_use_case),
):
    return use_case.update_configuration(payload.model_dump())
