"""
Configuración del formulario: una sola activa en todo momento.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from app.domain.exceptions import ConflictError
from app.domain.models.form_configuration import FormConfigurationFields
from app.infrastructure.persistence.form_configuration_repository_adapter import (
    CONFLICTO_ACTIVA, SQLAlchemyFormConfigurationRepository,
)
from app.infrastructure.persistence.models import FormConfiguracion
from conftest import CONFIGURACION


def _activas(db_session):
    db_session.expire_all()
    return db_session.query(FormConfiguracion).filter(FormConfiguracion.activo.is_(True)).all()


def test_get_without_configuration_is_404(client):
    response = client.get("/form-configuracion")

    assert response.status_code == 404
    assert response.json() == {"error": "Configuración no encontrada"}


def test_create_and_get_active(client):
    creada = client.post("/form-configuracion", json=CONFIGURACION)

    assert creada.status_code == 201
    activa = client.get("/form-configuracion").json()
    assert activa["id"] == creada.json()["id"]
    assert activa["responsable_unidad"] == "Z"
    assert activa["activo"] is True


def test_fields_are_trimmed(client):
    response = client.post("/form-configuracion", json=dict(CONFIGURACION, persona_contacto="  Ana Ruiz  "))

    assert response.json()["persona_contacto"] == "Ana Ruiz"


@pytest.mark.parametrize("campo", list(CONFIGURACION))
def test_every_field_is_required(client, campo):
    for valor in (None, "  "):
        response = client.post("/form-configuracion", json=dict(CONFIGURACION, **{campo: valor}))
        assert response.status_code == 400
        assert response.json() == {"error": "Todos los campos son requeridos"}


def test_creating_deactivates_previous(client, db_session):
    client.post("/form-configuracion", json=CONFIGURACION)
    segunda = client.post("/form-configuracion", json=dict(CONFIGURACION, anexo="999")).json()

    activas = _activas(db_session)
    assert [c.id for c in activas] == [segunda["id"]]
    assert db_session.query(FormConfiguracion).count() == 2


def test_update_twice_leaves_one_active_with_latest_values(client, db_session):
    client.post("/form-configuracion", json=CONFIGURACION)

    client.put("/form-configuracion", json=dict(CONFIGURACION, dependencia_solicitante="Primera"))
    response = client.put(
        "/form-configuracion",
        json={
            "dependencia_solicitante": "Segunda",
            "persona_contacto": "P2",
            "responsable_unidad": "R2",
            "anexo": "222",
        },
    )

    assert response.status_code == 200
    activas = _activas(db_session)
    assert len(activas) == 1
    assert activas[0].dependencia_solicitante == "Segunda"
    assert activas[0].persona_contacto == "P2"
    assert activas[0].responsable_unidad == "R2"
    assert activas[0].anexo == "222"


def test_update_without_active_creates_one(client, db_session):
    response = client.put("/form-configuracion", json=CONFIGURACION)

    assert response.status_code == 200
    assert response.json()["activo"] is True
    assert len(_activas(db_session)) == 1


def test_update_requires_all_fields(client, configuracion):
    response = client.put("/form-configuracion", json={"dependencia_solicitante": "Solo uno"})

    assert response.status_code == 400
    assert client.get("/form-configuracion").json()["dependencia_solicitante"] == "X"


def test_database_rejects_second_active_row(db_session):
    db_session.add(FormConfiguracion(**CONFIGURACION, activo=True))
    db_session.commit()

    db_session.add(FormConfiguracion(**CONFIGURACION, activo=True))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()

    db_session.add(FormConfiguracion(**CONFIGURACION, activo=False))
    db_session.commit()
    assert db_session.query(FormConfiguracion).count() == 2


def _desactivacion_ciega(self):
    # La desactivación no alcanza a ver la fila activa que otra escritura ya confirmó
    return self.db.query(FormConfiguracion).filter(FormConfiguracion.id.is_(None))


def test_concurrent_activation_becomes_conflict(db_session, monkeypatch):
    primera = SQLAlchemyFormConfigurationRepository(db_session).create_active(
        FormConfigurationFields(**CONFIGURACION)
    )
    monkeypatch.setattr(SQLAlchemyFormConfigurationRepository, "_activas", _desactivacion_ciega)

    with pytest.raises(ConflictError) as excinfo:
        SQLAlchemyFormConfigurationRepository(db_session).create_active(
            FormConfigurationFields(**dict(CONFIGURACION, anexo="999"))
        )

    assert excinfo.value.status_code == 409
    assert [c.id for c in _activas(db_session)] == [primera.id]


def test_concurrent_activation_is_a_409_over_http(client, configuracion, monkeypatch):
    monkeypatch.setattr(SQLAlchemyFormConfigurationRepository, "_activas", _desactivacion_ciega)

    response = client.post("/form-configuracion", json=dict(CONFIGURACION, anexo="999"))

    assert response.status_code == 409
    assert response.json() == {"error": CONFLICTO_ACTIVA}
    monkeypatch.undo()
    assert client.get("/form-configuracion").json()["id"] == configuracion["id"]
