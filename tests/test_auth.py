"""
Registro e inicio de sesión.
"""

import jwt
import pytest

import config

USUARIO = {
    "nombres": "Rosa Salazar",
    "usuario": "RSalazar",
    "email": "Rosa.Salazar@upch.pe",
    "contrasenna": "secreta123",
}


def test_register_returns_profile_without_password(client):
    response = client.post("/auth/register", json=USUARIO)

    assert response.status_code == 201
    perfil = response.json()["usuario"]
    assert perfil["usuario"] == "rsalazar"
    assert perfil["email"] == "rosa.salazar@upch.pe"
    assert perfil["role"] == "user"
    assert "password" not in str(response.json())


def test_register_duplicate(client):
    client.post("/auth/register", json=USUARIO)

    response = client.post("/auth/register", json=dict(USUARIO, email="otro@upch.pe"))

    assert response.status_code == 409
    assert response.json() == {"error": "El usuario o email ya están registrados"}


@pytest.mark.parametrize(
    "cambios, mensaje",
    [
        ({"nombres": ""}, "Todos los campos son requeridos"),
        ({"email": "no-es-email"}, "El email no es válido"),
        ({"contrasenna": "123"}, "La contraseña debe tener al menos 6 caracteres"),
    ],
)
def test_register_validation(client, cambios, mensaje):
    response = client.post("/auth/register", json=dict(USUARIO, **cambios))

    assert response.status_code == 400
    assert response.json() == {"error": mensaje}


@pytest.mark.parametrize("login", ["rsalazar", "RSALAZAR", "rosa.salazar@upch.pe"])
def test_login_by_user_or_email(client, login):
    client.post("/auth/register", json=USUARIO)

    response = client.post("/auth/login", json={"usuario": login, "contrasenna": "secreta123"})

    assert response.status_code == 200
    body = response.json()
    assert body["usuario"]["usuario"] == "rsalazar"
    payload = jwt.decode(body["token"], config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])
    assert payload["sub"] == body["usuario"]["id"]
    assert payload["type"] == "access"
    assert body["refreshToken"] != body["token"]


def test_login_wrong_password(client):
    client.post("/auth/register", json=USUARIO)

    response = client.post("/auth/login", json={"usuario": "rsalazar", "contrasenna": "incorrecta"})

    assert response.status_code == 401
    assert response.json() == {"error": "Contraseña incorrecta"}


def test_login_unknown_user(client):
    response = client.post("/auth/login", json={"usuario": "nadie", "contrasenna": "secreta123"})

    assert response.status_code == 401
    assert response.json() == {"error": "Usuario no encontrado"}


def test_login_requires_credentials(client):
    response = client.post("/auth/login", json={"usuario": "rsalazar"})

    assert response.status_code == 400
    assert response.json() == {"error": "Usuario y contraseña son requeridos"}
