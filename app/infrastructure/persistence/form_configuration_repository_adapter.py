# app/infrastructure/persistence/form_configuration_repository_adapter.py
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.domain.models.form_configuration import FormConfiguration, FormConfigurationFields
from app.domain.ports.form_configuration_repository import FormConfigurationRepository
from .models import FormConfiguracion
from .transaction import commit_or_raise

CONFLICTO_ACTIVA = "Otra configuración se guardó al mismo tiempo, intente nuevamente"


class SQLAlchemyFormConfigurationRepository(FormConfigurationRepository):
    """
    La unicidad de la configuración activa la respalda el índice parcial
    `uq_form_configuracion_activa`: si dos escrituras concurrentes intentan
    dejar dos registros activos, la segunda falla al confirmar.
    """

    def __init__(self, db: Session):
        self.db = db

    def _activas(self):
        return self.db.query(FormConfiguracion).filter(FormConfiguracion.activo.is_(True))

    def get_active(self) -> Optional[FormConfiguration]:
        configuracion = self._activas().first()
        return FormConfiguration.model_validate(configuracion) if configuracion else None

    def create_active(self, fields: FormConfigurationFields) -> FormConfiguration:
        # Desactivar e insertar viajan en la misma transacción
        self._activas().update({FormConfiguracion.activo: False}, synchronize_session=False)
        configuracion = FormConfiguracion(**fields.model_dump(), activo=True)
        self.db.add(configuracion)
        commit_or_raise(self.db, CONFLICTO_ACTIVA)
        return FormConfiguration.model_validate(configuracion)

    def replace_active(self, fields: FormConfigurationFields) -> Optional[FormConfiguration]:
        valores = {getattr(FormConfiguracion, campo): valor for campo, valor in fields.model_dump().items()}
        valores[FormConfiguracion.updated_at] = datetime.now(timezone.utc)
        actualizados = self._activas().update(valores, synchronize_session=False)
        if not actualizados:
            self.db.rollback()
            return None
        commit_or_raise(self.db, CONFLICTO_ACTIVA)
        return self.get_active()
