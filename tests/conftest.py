"""Shared fixtures: a throwaway SQLite database and an application client."""

from __future__ import annotations

import os
import tempfile
from datetime import date
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "notification_feed_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["ADMIN_EMAILS"] = '["admin@example.com"]'
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fastapi.testclient import TestClient  # noqa: E402

from app.domain.entities import User, UserRole  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.repositories import UserRepository  # noqa: E402
from main import create_app  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
DEFAULT_PASSWORD = "secret1"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_user(db_session):
    """Insert users directly, skipping the (slow) password hashing."""

    def _make_user(email: str = "user@example.com", name: str = "Test User") -> User:
        return UserRepository(db_session).create(
            User(
                id=None,
                name=name,
                email=email,
                password="not-a-real-hash",
                birth_date=date(1990, 1, 1),
                role=UserRole.BACKEND,
            )
        )

    return _make_user


def register(client: TestClient, email: str, password: str = DEFAULT_PASSWORD, **extra):
    payload = {
        "name": extra.pop("name", "Test User"),
        "email": email,
        "password": password,
        "birthDate": extra.pop("birthDate", "1990-05-17"),
        "role": extra.pop("role", "backend"),
        **extra,
    }
    return client.post("/auth/register", json=payload)


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user_headers(client):
    response = register(client, "user@example.com")
    assert response.status_code == 201
    return auth_headers(response.json()["access_token"])


@pytest.fixture()
def admin_headers(client):
    response = register(client, ADMIN_EMAIL, name="Admin")
    assert response.status_code == 201
    return auth_headers(response.json()["access_token"])


@pytest.fixture()
def guest_headers(client):
    response = client.post("/auth/guest", json={"name": "Bob"})
    assert response.status_code == 201
    return auth_headers(response.json()["access_token"])
