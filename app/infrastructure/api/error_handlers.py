# app/infrastructure/api/error_handlers.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import NotaCreditoError

logger = logging.getLogger(__name__)

MENSAJE_INTERNO = "Error interno del servidor"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def domain_error_handler(request: Request, exc: NotaCreditoError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Igual que en la capa de negocio, solo se informa el primer problema
    primero = exc.errors()[0] if exc.errors() else {}
    campo = ".".join(str(parte) for parte in primero.get("loc", ()) if parte not in ("body", "query", "path"))
    detalle = primero.get("msg", "Solicitud inválida")
    return _error(400, f"{campo}: {detalle}" if campo else detalle)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Error no controlado en {request.method} {request.url.path}", exc_info=exc)
    return _error(500, MENSAJE_INTERNO)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotaCreditoError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
