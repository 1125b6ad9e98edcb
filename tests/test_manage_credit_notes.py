"""
Edición, eliminación y exportación a PDF desde el panel.
"""


def _editar(boleta, **overrides):
    payload = boleta(**overrides)
    payload.pop("tipo_comprobante")
    payload.setdefault("tipo", "NATURAL")
    return payload


def test_update_recomputes_amount_in_words(client, configuracion, boleta):
    note_id = client.post("/credit-notes", json=boleta()).json()["id"]

    response = client.put(f"/credit-notes/{note_id}", json=_editar(boleta, monto_pagar="1.00"))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["nota"]["monto_pagar"] == 1.0
    assert "Soles" not in body["nota"]["monto_letras"]
    assert "Sol" in body["nota"]["monto_letras"]


def test_update_can_switch_to_juridica(client, configuracion, boleta):
    note_id = client.post("/credit-notes", json=boleta()).json()["id"]

    response = client.put(
        f"/credit-notes/{note_id}", json=_editar(boleta, tipo="JURIDICA", ruc="20601234567")
    )

    nota = response.json()["nota"]
    assert nota["tipo"] == "JURIDICA"
    assert nota["ruc"] == "20601234567"
    assert nota["dni"] is None


def test_update_accepts_comprobante_type(client, configuracion, boleta):
    note_id = client.post("/credit-notes", json=boleta()).json()["id"]

    response = client.put(
        f"/credit-notes/{note_id}", json=boleta(tipo_comprobante="FACTURA", ruc="20601234567")
    )

    assert response.json()["nota"]["tipo"] == "JURIDICA"


def test_update_keeps_original_snapshot(client, configuracion, boleta):
    note_id = client.post("/credit-notes", json=boleta()).json()["id"]
    client.put(
        "/form-configuracion",
        json={
            "dependencia_solicitante": "CAMBIADA",
            "persona_contacto": "CAMBIADO",
            "responsable_unidad": "CAMBIADO",
            "anexo": "555",
        },
    )

    response = client.put(f"/credit-notes/{note_id}", json=_editar(boleta, concepto_nota="Nuevo concepto"))

    nota = response.json()["nota"]
    assert nota["concepto_nota"] == "Nuevo concepto"
    assert nota["datos_estaticos"] == {"dependencia_solicitante": "X", "persona_contacto": "Y", "anexo": "123"}


def test_update_validates_structure(client, configuracion, boleta):
    note_id = client.post("/credit-notes", json=boleta()).json()["id"]

    sin_tipo = client.put(f"/credit-notes/{note_id}", json=_editar(boleta, tipo="OTRO"))
    ruc_corto = client.put(f"/credit-notes/{note_id}", json=_editar(boleta, tipo="JURIDICA", ruc="123"))
    monto = client.put(f"/credit-notes/{note_id}", json=_editar(boleta, monto_pagar="1000000"))

    assert sin_tipo.json() == {"error": "Tipo inválido"}
    assert ruc_corto.json() == {"error": "RUC inválido - debe tener exactamente 11 dígitos"}
    assert monto.status_code == 400
    assert client.get(f"/credit-notes/{note_id}").json()["monto_pagar"] == 100.5


def test_update_unknown_note(client, configuracion, boleta):
    response = client.put("/credit-notes/999", json=_editar(boleta))

    assert response.status_code == 404
    assert response.json() == {"error": "Nota de crédito no encontrada"}


def test_get_unknown_note(client):
    assert client.get("/credit-notes/999").status_code == 404


def test_delete_note(client, configuracion, boleta):
    note_id = client.post("/credit-notes", json=boleta()).json()["id"]

    response = client.delete(f"/credit-notes/{note_id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Nota de crédito eliminada exitosamente"}
    assert client.get(f"/credit-notes/{note_id}").status_code == 404
    assert client.delete(f"/credit-notes/{note_id}").status_code == 404


def test_export_pdf(client, configuracion, factura):
    banco = client.post("/banks", json={"nombre": "BANCO <INTERBANK> & CIA"}).json()
    note_id = client.post("/credit-notes", json=factura(banco_id=banco["id"])).json()["id"]

    response = client.get(f"/credit-notes/{note_id}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")


def test_export_pdf_unknown_note(client):
    response = client.get("/credit-notes/999/pdf")

    assert response.status_code == 404
    assert response.json() == {"error": "Nota de crédito no encontrada"}
