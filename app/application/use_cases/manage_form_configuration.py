# app/application/use_cases/manage_form_configuration.py
import logging
from typing import Any, Mapping

from app.application.validators import clean_text, reject
from app.domain.exceptions import NotFoundError
from app.domain.models.form_configuration import FormConfiguration, FormConfigurationFields
from app.domain.ports.form_configuration_repository import FormConfigurationRepository

logger = logging.getLogger(__name__)

CAMPOS = ("dependencia_solicitante", "persona_contacto", "responsable_unidad", "anexo")


class ManageFormConfigurationUseCase:
    """
    Administra los datos estáticos del formulario. Siempre hay a lo sumo una
    configuración activa; crear una nueva desactiva las anteriores.
    """

    def __init__(self, config_repo: FormConfigurationRepository):
        self.config_repo = config_repo

    def _validate(self, payload: Mapping[str, Any]) -> FormConfigurationFields:
        valores = {campo: clean_text(payload.get(campo)) for campo in CAMPOS}
        if not all(valores.values()):
            reject("Todos los campos son requeridos")
        return FormConfigurationFields(**valores)

    def get_active_configuration(self) -> FormConfiguration:
        configuracion = self.config_repo.get_active()
        if not configuracion:
            raise NotFoundError("Configuración no encontrada")
        return configuracion

    def create_configuration(self, payload: Mapping[str, Any]) -> FormConfiguration:
        fields = self._validate(payload)
        configuracion = self.config_repo.create_active(fields)
        logger.info(f"Configuración {configuracion.id} creada y activada.")
        return configuracion

    def update_configuration(self, payload: Mapping[str, Any]) -> FormConfiguration:
        fields = self._validate(payload)
        configuracion = self.config_repo.replace_active(fields)
        if configuracion:
            logger.info(f"Configuración activa {configuracion.id} actualizada.")
            return configuracion
        configuracion = self.config_repo.create_active(fields)
        logger.info(f"No había configuración activa; se creó la {configuracion.id}.")
        return configuracion
