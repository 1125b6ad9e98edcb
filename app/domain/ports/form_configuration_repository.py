# app/domain/ports/form_configuration_repository.py
from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.form_configuration import FormConfiguration, FormConfigurationFields


class ConfigurationProvider(ABC):
    """Fuente de la configuración vigente para el flujo de envío."""

    @abstractmethod
    def get_active(self) -> Optional[FormConfiguration]:
        pass


class FormConfigurationRepository(ConfigurationProvider):
    """
    Contrato para la configuración estática del formulario. Las
    implementaciones garantizan que nunca haya dos registros activos.
    """

    @abstractmethod
    def create_active(self, fields: FormConfigurationFields) -> FormConfiguration:
        """
        Inserta un registro activo y desactiva los demás dentro de la misma
        transacción.
        """
        pass

    @abstractmethod
    def replace_active(self, fields: FormConfigurationFields) -> Optional[FormConfiguration]:
        """
        Reemplaza los cuatro campos del registro activo en una sola sentencia.
        Retorna None si no hay registro activo.
        """
        pass
