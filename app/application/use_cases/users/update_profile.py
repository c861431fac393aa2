"""Use case for updating the profile of the authenticated user."""

import logging
from dataclasses import replace
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.domain.entities import User, UserRole
from app.domain.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import get_password_hash, verify_password

from .validators import normalize_email, normalize_name

logger = logging.getLogger(__name__)


def update_profile(
    session: Session,
    *,
    user_id: int,
    name: str,
    email: str,
    birth_date: date,
    role: UserRole,
    current_password: str | None = None,
    new_password: str | None = None,
) -> User:
    """Replace the profile fields and optionally change the password.

    Changing the password requires both ``current_password`` and ``new_password``;
    the current one must match the stored hash.
    """

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise UserNotFoundError()

    new_email = normalize_email(email)
    if new_email != current_user.email:
        existing_with_email = repository.get_by_email(new_email)
        if existing_with_email and existing_with_email.id != user_id:
            raise EmailAlreadyRegisteredError(
                "El correo electrónico ya está en uso por otro usuario"
            )

    if bool(current_password) != bool(new_password):
        raise ValidationError(
            "Para cambiar la contraseña se requieren la contraseña actual y la nueva"
        )

    updated_user = replace(
        current_user,
        name=normalize_name(name),
        email=new_email,
        birth_date=birth_date,
        role=UserRole(role),
    )

    if current_password and new_password:
        if not verify_password(current_password, current_user.password):
            raise InvalidCredentialsError("La contraseña actual es incorrecta")
        updated_user = replace(updated_user, password=get_password_hash(new_password))

    try:
        saved = repository.update(updated_user)
    except IntegrityError as exc:
        session.rollback()
        raise EmailAlreadyRegisteredError(
            "El correo electrónico ya está en uso por otro usuario"
        ) from exc
    logger.info("Perfil del usuario %s actualizado", user_id)
    return saved
