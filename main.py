# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

# Importamos los routers de la capa de infraestructura
from app.infrastructure.api.error_handlers import register_error_handlers  # noqa: E402
from app.infrastructure.api.routers import (  # noqa: E402
    auth_router, banks_router, credit_notes_router, form_configuration_router,
)
from app.infrastructure.persistence import models  # noqa: E402,F401
from app.infrastructure.persistence.database import Base, engine  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas verificadas; API lista.")
    yield


app = FastAPI(
    title="API de Notas de Crédito",
    description="Recepción y administración de solicitudes de emisión de notas de crédito.",
    version="1.0.0",
    lifespan=lifespan,
)

# Configuración de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(banks_router.router)
app.include_router(form_configuration_router.router)
app.include_router(credit_notes_router.router)
app.include_router(auth_router.router)


@app.get("/", tags=["Health Check"])
def read_root():
    return {"status": "ok", "message": "API de Notas de Crédito operativa"}
