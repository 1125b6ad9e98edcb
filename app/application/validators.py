# app/application/validators.py
import logging
from typing import Any, Optional

from app.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def clean_text(value: Any) -> Optional[str]:
    """Quita espacios; retorna None si el valor no es texto o queda vacío."""
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def require_text(value: Any, message: str) -> str:
    cleaned = clean_text(value)
    if cleaned is None:
        reject(message)
    return cleaned


def reject(message: str):
    logger.warning(f"Validación rechazada: {message}")
    raise ValidationError(message)
