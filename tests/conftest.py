"""
Fixtures compartidas: base SQLite en memoria y cliente HTTP de la API.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "clave-de-pruebas")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.infrastructure.persistence import models  # noqa: E402,F401
from app.infrastructure.persistence.database import Base, get_db  # noqa: E402
from main import app  # noqa: E402

CONFIGURACION = {
    "dependencia_solicitante": "X",
    "persona_contacto": "Y",
    "responsable_unidad": "Z",
    "anexo": "123",
}


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def configuracion(client):
    response = client.post("/form-configuracion", json=CONFIGURACION)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def boleta():
    """Fábrica de cuerpos válidos para una BOLETA."""
    def _build(**overrides):
        payload = {
            "tipo_comprobante": "BOLETA",
            "nombre_completo": "María Quispe Huamán",
            "dni": "12345678",
            "monto_pagar": "100.50",
            "numero_documento_origen": "B001-000123",
            "concepto_nota": "Devolución por pago duplicado de matrícula",
            "fecha_caducidad": "2026-12-31",
            "responsable_unidad": "Z",
        }
        payload.update(overrides)
        return payload
    return _build


@pytest.fixture
def factura():
    """Fábrica de cuerpos válidos para una FACTURA."""
    def _build(**overrides):
        payload = {
            "tipo_comprobante": "FACTURA",
            "nombre_completo": "Servicios Educativos del Sur S.A.C.",
            "ruc": "20123456789",
            "monto_pagar": 2500,
            "numero_documento_origen": "F001-000045",
            "concepto_nota": "Anulación de servicio de capacitación",
            "fecha_caducidad": "2026-06-30",
            "responsable_unidad": "Z",
        }
        payload.update(overrides)
        return payload
    return _build
