# app/infrastructure/persistence/transaction.py
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.exceptions import ConflictError, InternalError

logger = logging.getLogger(__name__)


def commit_or_raise(db: Session, conflict_message: str) -> None:
    """
    Confirma la transacción en curso. Una violación de restricción única se
    traduce a ConflictError; cualquier otra falla del motor queda en el log
    y se presenta como InternalError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Restricción de integridad violada: {e.orig}")
        raise ConflictError(conflict_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Falla inesperada al confirmar la transacción.", exc_info=True)
        raise InternalError() from e
