"""Shared fixtures for the DevConnector API test suite."""

import os

# Settings are read at import time: point them at an in-memory database first
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import devconnector.models  # noqa: F401
from devconnector.db.database import Base, SessionLocal, engine, get_db
from devconnector.main import app


@pytest.fixture(scope="function")
def db() -> Session:
    """Create a database session on a fresh schema."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Test client whose requests share the test session."""

    def get_db_override():
        yield db

    app.dependency_overrides[get_db] = get_db_override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user through the API and return auth headers for them."""

    def _register(name="Jane Doe", email="jane@example.com", password="secret123"):
        response = client.post("/api/users", json={"name": name, "email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


@pytest.fixture
def alice(register):
    return register("Alice", "alice@example.com")


@pytest.fixture
def bob(register):
    return register("Bob", "bob@example.com")
