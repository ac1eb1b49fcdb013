"""
API tests for registration, login and token handling
"""
from datetime import timedelta

from devconnector.core.security import create_access_token
from devconnector.models.user import User


def test_register_returns_token(client, db):
    response = client.post(
        "/api/users",
        json={"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"},
    )

    assert response.status_code == 200
    assert response.json()["token"]

    user = db.query(User).filter(User.email == "jane@example.com").first()
    assert user is not None
    assert user.hashed_password != "secret123"
    assert user.avatar.startswith("https://www.gravatar.com/avatar/")


def test_register_rejects_existing_email(client, register):
    register(email="jane@example.com")

    response = client.post(
        "/api/users",
        json={"name": "Other Jane", "email": "jane@example.com", "password": "another1"},
    )

    assert response.status_code == 400
    assert response.json() == {"errors": [{"msg": "User already exists"}]}


def test_register_reports_every_invalid_field(client):
    response = client.post("/api/users", json={"name": "", "email": "not-an-email", "password": "123"})

    assert response.status_code == 400
    errors = {error["param"]: error["msg"] for error in response.json()["errors"]}
    assert errors == {
        "name": "Name is required",
        "email": "Please include a valid email",
        "password": "Please enter a password with 6 or more characters",
    }


def test_login_with_valid_credentials(client, register):
    register(email="jane@example.com", password="secret123")

    response = client.post("/api/auth", json={"email": "jane@example.com", "password": "secret123"})

    assert response.status_code == 200
    assert "token" in response.json()


def test_login_with_wrong_password(client, register):
    register(email="jane@example.com", password="secret123")

    response = client.post("/api/auth", json={"email": "jane@example.com", "password": "wrong-password"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["msg"] == "Invalid Credentials"


def test_login_requires_password(client):
    response = client.post("/api/auth", json={"email": "jane@example.com"})

    assert response.status_code == 400
    assert response.json()["errors"] == [
        {"msg": "Password is required", "param": "password", "location": "body"}
    ]


def test_current_user_with_bearer_token(client, register):
    headers = register(name="Jane Doe", email="jane@example.com")

    response = client.get("/api/auth", headers=headers)

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Jane Doe"
    assert data["email"] == "jane@example.com"
    assert "hashed_password" not in data
    assert "password" not in data


def test_current_user_with_x_auth_token_header(client, register):
    token = register()["Authorization"].split(" ")[1]

    response = client.get("/api/auth", headers={"x-auth-token": token})

    assert response.status_code == 200


def test_missing_token_is_rejected(client):
    response = client.get("/api/auth")

    assert response.status_code == 401
    assert response.json() == {"msg": "No token, authorization denied"}


def test_invalid_token_is_rejected(client):
    response = client.get("/api/auth", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json() == {"msg": "Token is not valid"}


def test_expired_token_is_rejected(client, db, register):
    register(email="jane@example.com")
    user = db.query(User).filter(User.email == "jane@example.com").first()
    token = create_access_token(user.id, expires_delta=timedelta(minutes=-5))

    response = client.get("/api/auth", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_deleted_user_is_rejected(client):
    token = create_access_token("0" * 32)

    response = client.get("/api/auth", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"msg": "Token is not valid"}
