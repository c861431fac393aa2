"""Unit tests for the administrator allow-list and error mapping."""

from __future__ import annotations

import pytest

from app.application.use_cases.auth import ensure_admin, is_admin_email
from app.config import Settings
from app.domain.entities import Principal, PrincipalKind
from app.domain.exceptions import (
    EmailAlreadyRegisteredError,
    ForbiddenError,
    InvalidCredentialsError,
    NotificationNotFoundError,
    NotificationStorageError,
    ValidationError,
)
from app.interfaces.api.routes_helpers import status_code_for

ADMINS = ["admin@example.com"]


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("admin@example.com", True),
        (" ADMIN@example.com ", True),
        ("user@example.com", False),
        ("", False),
        (None, False),
    ],
)
def test_is_admin_email(email, expected) -> None:
    assert is_admin_email(email, ADMINS) is expected


def test_ensure_admin_accepts_listed_user() -> None:
    principal = Principal(PrincipalKind.USER, 1, email="admin@example.com")

    assert ensure_admin(principal, ADMINS) is principal


@pytest.mark.parametrize(
    "principal",
    [
        Principal(PrincipalKind.GUEST, 1, session_id="abc"),
        Principal(PrincipalKind.USER, 1, email=None),
        Principal(PrincipalKind.USER, 1, email="user@example.com"),
    ],
)
def test_ensure_admin_rejects(principal) -> None:
    with pytest.raises(ForbiddenError):
        ensure_admin(principal, ADMINS)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (InvalidCredentialsError(), 401),
        (ForbiddenError(), 403),
        (NotificationNotFoundError(1), 404),
        (EmailAlreadyRegisteredError(), 409),
        (ValidationError(), 400),
        (NotificationStorageError(), 500),
    ],
)
def test_status_code_for(error, status_code) -> None:
    assert status_code_for(error) == status_code


def test_admin_emails_are_normalized() -> None:
    settings = Settings(
        secret_key="x",
        admin_emails=[" Admin@Example.com", "admin@example.com", ""],
    )

    assert settings.admin_emails == ["admin@example.com"]


def test_admin_emails_reject_invalid_entries() -> None:
    with pytest.raises(ValueError):
        Settings(secret_key="x", admin_emails=["not-an-email"])
