# app/infrastructure/persistence/models.py
from datetime import datetime, timezone

from sqlalchemy import (
    JSON, Boolean, CheckConstraint, Column, Date, DateTime, ForeignKey, Index,
    Integer, Numeric, String, Text, text,
)
from sqlalchemy.orm import relationship

from .database import Base


def _ahora():
    return datetime.now(timezone.utc)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=_ahora)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_ahora, onupdate=_ahora)


# Los textos que escribe el usuario no tienen tope de longitud; solo los
# documentos y códigos de formato fijo usan String(n)


class Banco(TimestampMixin, Base):
    __tablename__ = "bancos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(Text, nullable=False, unique=True)
    activo = Column(Boolean, nullable=False, default=True)


class FormConfiguracion(TimestampMixin, Base):
    __tablename__ = "form_configuracion"
    __table_args__ = (
        # Solo puede haber una configuración activa
        Index(
            "uq_form_configuracion_activa", "activo", unique=True,
            postgresql_where=text("activo"), sqlite_where=text("activo"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    dependencia_solicitante = Column(Text, nullable=False)
    persona_contacto = Column(Text, nullable=False)
    responsable_unidad = Column(Text, nullable=False)
    anexo = Column(Text, nullable=False)
    activo = Column(Boolean, nullable=False, default=True)


class NotaCredito(TimestampMixin, Base):
    __tablename__ = "notas_credito"
    __table_args__ = (
        CheckConstraint(
            "(tipo = 'JURIDICA' AND ruc IS NOT NULL AND dni IS NULL) OR "
            "(tipo = 'NATURAL' AND dni IS NOT NULL AND ruc IS NULL)",
            name="ck_notas_credito_documento_identidad",
        ),
        CheckConstraint("monto_pagar > 0", name="ck_notas_credito_monto_positivo"),
        Index("ix_notas_credito_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    tipo = Column(String(10), nullable=False, index=True)
    nombre_completo = Column(Text, nullable=False)
    dni = Column(String(8), nullable=True)
    ruc = Column(String(11), nullable=True)
    monto_pagar = Column(Numeric(12, 2), nullable=False)
    monto_letras = Column(Text, nullable=False)
    numero_documento_origen = Column(Text, nullable=False)
    concepto_nota = Column(Text, nullable=False)
    fecha_caducidad = Column(Date, nullable=False)
    responsable_unidad = Column(Text, nullable=False)
    documentos_adjuntos = Column(Text, nullable=True)

    # Transferencia
    banco_id = Column(Integer, ForeignKey("bancos.id", ondelete="SET NULL"), nullable=True)
    numero_cuenta = Column(Text, nullable=True)
    cci = Column(Text, nullable=True)

    # Snapshot de la configuración activa al momento del envío
    datos_estaticos = Column(JSON, nullable=False)

    banco = relationship("Banco", lazy="joined")


class Usuario(TimestampMixin, Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombres = Column(Text, nullable=False)
    usuario = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(10), nullable=False, default="user")
    is_active = Column(Boolean, nullable=False, default=True)
