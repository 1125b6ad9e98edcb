# app/domain/models/form_configuration.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict


class FormConfigurationFields(BaseModel):
    """Los cuatro datos estáticos del formulario, ya validados y sin espacios."""
    dependencia_solicitante: str
    persona_contacto: str
    responsable_unidad: str
    anexo: str


class FormConfiguration(FormConfigurationFields):
    id: int
    activo: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConfigSnapshot(BaseModel):
    """
    Copia congelada de la configuración activa que se incrusta en cada
    nota de crédito al momento de crearla. Ediciones posteriores de la
    configuración no la alteran.
    """
    dependencia_solicitante: str
    persona_contacto: str
    anexo: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_configuration(cls, configuration: FormConfiguration) -> "ConfigSnapshot":
        return cls(
            dependencia_solicitante=configuration.dependencia_solicitante,
            persona_contacto=configuration.persona_contacto,
            anexo=configuration.anexo,
        )
