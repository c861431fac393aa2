"""Use case for registering a new user."""

import logging
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import User, UserRole
from app.domain.exceptions import EmailAlreadyRegisteredError
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash

from .validators import normalize_email, normalize_name

logger = logging.getLogger(__name__)


def register_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    birth_date: date,
    role: UserRole = UserRole.FRONTEND,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    normalized_email = normalize_email(email)

    if repository.get_by_email(normalized_email):
        raise EmailAlreadyRegisteredError()

    user = User(
        id=None,
        name=normalize_name(name),
        email=normalized_email,
        password=get_password_hash(password),
        birth_date=birth_date,
        role=UserRole(role),
    )
    try:
        created = repository.create(user)
    except IntegrityError as exc:
        session.rollback()
        raise EmailAlreadyRegisteredError() from exc
    logger.info("Usuario registrado: %s (ID: %s)", created.email, created.id)
    return created
