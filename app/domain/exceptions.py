# app/domain/exceptions.py


class NotaCreditoError(Exception):
    """
    Error base del dominio. Cada subclase define el código HTTP con el que
    la capa de API lo presenta al cliente.
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(NotaCreditoError):
    """Dato de entrada faltante o inválido."""
    status_code = 400


class AuthenticationError(NotaCreditoError):
    status_code = 401


class NotFoundError(NotaCreditoError):
    """Id desconocido o ninguna configuración activa."""
    status_code = 404


class ConflictError(NotaCreditoError):
    """Violación de un campo único o de la configuración activa única."""
    status_code = 409


class ConfigurationMissingError(NotaCreditoError):
    """No existe configuración activa de la cual tomar el snapshot."""
    status_code = 500


class InternalError(NotaCreditoError):
    """Falla inesperada del almacenamiento; el detalle solo va al log."""
    status_code = 500

    def __init__(self, message: str = "Error interno del servidor"):
        super().__init__(message)
