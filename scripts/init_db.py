#!/usr/bin/env python3
"""
Crea las tablas y carga datos iniciales: usuarios de prueba, la
configuración del formulario y el catálogo de bancos.

Usage:
    python scripts/init_db.py [--reset-users]
"""

import argparse
import logging
import sys
from pathlib import Path

# Permite ejecutar el script directamente desde la raíz del repositorio
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(REPO_ROOT))

import config  # noqa: E402
from app.domain.exceptions import ConflictError  # noqa: E402
from app.domain.models.form_configuration import FormConfigurationFields  # noqa: E402
from app.domain.models.user import UserRole  # noqa: E402
from app.infrastructure.external.credentials_adapter import PasslibPasswordHasher  # noqa: E402
from app.infrastructure.persistence import models  # noqa: E402
from app.infrastructure.persistence.bank_repository_adapter import SQLAlchemyBankRepository  # noqa: E402
from app.infrastructure.persistence.database import Base, SessionLocal, engine  # noqa: E402
from app.infrastructure.persistence.form_configuration_repository_adapter import (  # noqa: E402
    SQLAlchemyFormConfigurationRepository,
)
from app.infrastructure.persistence.user_repository_adapter import SQLAlchemyUserRepository  # noqa: E402

logger = logging.getLogger("init_db")

USUARIOS = [
    ("Administrador del Sistema", "admin", "admin@gestordocumentos.com", "admin123", UserRole.ADMIN),
    ("Usuario Regular", "user", "user@gestordocumentos.com", "user123", UserRole.USER),
    ("Usuario Solo Lectura", "viewer", "viewer@gestordocumentos.com", "viewer123", UserRole.VIEWER),
]

CONFIGURACION = FormConfigurationFields(
    dependencia_solicitante="ESCUELA DE POSGRADO",
    persona_contacto="YVONNE MACHICADO ZUÑIGA",
    responsable_unidad="DIRECCIÓN DE ADMINISTRACIÓN",
    anexo="210204",
)

BANCOS = [
    "BANCO DE CRÉDITO DEL PERÚ",
    "BANCO CONTINENTAL",
    "BANCO PICHINCHA",
    "BANCO INTERBANK",
    "BANCO DE LA NACIÓN",
    "BANCO SCOTIABANK",
]


def init_database(reset_users: bool) -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if reset_users:
            logger.info("Eliminando usuarios existentes...")
            db.query(models.Usuario).delete()
            db.commit()

        user_repo = SQLAlchemyUserRepository(db)
        hasher = PasslibPasswordHasher()
        for nombres, usuario, email, contrasenna, role in USUARIOS:
            if user_repo.exists(usuario, email):
                logger.info(f"Usuario {usuario} ya existe, se omite.")
                continue
            user_repo.create(nombres, usuario, email, hasher.hash(contrasenna), role)
            logger.info(f"Usuario creado: {usuario}")

        config_repo = SQLAlchemyFormConfigurationRepository(db)
        if config_repo.get_active():
            logger.info("Ya existe una configuración activa, se conserva.")
        else:
            config_repo.create_active(CONFIGURACION)
            logger.info("Configuración del formulario creada.")

        bank_repo = SQLAlchemyBankRepository(db)
        creados = 0
        for nombre in BANCOS:
            try:
                bank_repo.create(nombre)
                creados += 1
            except ConflictError:
                logger.info(f"Banco {nombre} ya existe, se omite.")
        logger.info(f"{creados} bancos creados.")
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--reset-users", action="store_true", help="Borra los usuarios antes de sembrarlos")
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info(f"Inicializando base de datos en {engine.url.render_as_string(hide_password=True)}")
    init_database(args.reset_users)
    logger.info("Base de datos inicializada correctamente.")


if __name__ == "__main__":
    main()
