"""
Esquema de tablas: los textos que escribe el usuario no tienen tope de longitud.
"""

import pytest
from sqlalchemy import String

from app.infrastructure.persistence.models import Banco, FormConfiguracion, NotaCredito, Usuario

TEXTOS_LIBRES = [
    (Banco, "nombre"),
    (FormConfiguracion, "dependencia_solicitante"),
    (FormConfiguracion, "persona_contacto"),
    (FormConfiguracion, "responsable_unidad"),
    (FormConfiguracion, "anexo"),
    (NotaCredito, "nombre_completo"),
    (NotaCredito, "monto_letras"),
    (NotaCredito, "numero_documento_origen"),
    (NotaCredito, "concepto_nota"),
    (NotaCredito, "responsable_unidad"),
    (NotaCredito, "documentos_adjuntos"),
    (NotaCredito, "numero_cuenta"),
    (NotaCredito, "cci"),
    (Usuario, "nombres"),
    (Usuario, "usuario"),
    (Usuario, "email"),
]


@pytest.mark.parametrize("modelo,campo", TEXTOS_LIBRES)
def test_user_text_columns_have_no_length_cap(modelo, campo):
    columna = modelo.__table__.c[campo]

    assert isinstance(columna.type, String)
    assert columna.type.length is None


def test_fixed_format_columns_keep_their_width():
    assert NotaCredito.__table__.c.dni.type.length == 8
    assert NotaCredito.__table__.c.ruc.type.length == 11


def test_long_bank_name_round_trips(client):
    nombre = "BANCO " + "INTERNACIONAL " * 40

    response = client.post("/banks", json={"nombre": nombre})

    assert response.status_code == 201
    assert response.json()["nombre"] == nombre.strip()
