# app/application/use_cases/submit_credit_note.py
import logging
from typing import Any, Mapping

from app.application.credit_note_validator import CreditNoteValidator, tipo_from_comprobante
from app.domain.exceptions import ConfigurationMissingError
from app.domain.models.form_configuration import ConfigSnapshot
from app.domain.ports.credit_note_repository import CreditNoteRepository
from app.domain.ports.form_configuration_repository import ConfigurationProvider

logger = logging.getLogger(__name__)


class SubmitCreditNoteUseCase:
    """
    Flujo del formulario público: valida la solicitud, toma un snapshot de
    la configuración activa en ese instante y registra la nota de crédito.
    """

    def __init__(
        self,
        note_repo: CreditNoteRepository,
        config_provider: ConfigurationProvider,
        validator: CreditNoteValidator,
    ):
        self.note_repo = note_repo
        self.config_provider = config_provider
        self.validator = validator

    def execute(self, payload: Mapping[str, Any]) -> int:
        tipo = tipo_from_comprobante(payload.get("tipo_comprobante"))
        data = self.validator.build(tipo, payload)

        configuracion = self.config_provider.get_active()
        if not configuracion:
            logger.error("No existe configuración activa; no se puede registrar la nota de crédito.")
            raise ConfigurationMissingError("Configuración del formulario no encontrada")

        note_id = self.note_repo.save(data, ConfigSnapshot.from_configuration(configuracion))
        logger.info(f"[{note_id}] Nota de crédito recibida con snapshot de la configuración {configuracion.id}.")
        return note_id
