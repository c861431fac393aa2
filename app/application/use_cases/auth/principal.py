"""Resolve session claims into principals and apply the administrator policy."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import Principal, PrincipalKind
from app.domain.exceptions import ForbiddenError, InvalidTokenError
from app.infrastructure.repositories import GuestRepository, UserRepository

logger = logging.getLogger(__name__)


def resolve_principal(session: Session, claims: Mapping[str, Any]) -> Principal:
    """Turn verified token claims into a :class:`Principal`.

    A valid signature is not enough: user claims must match an existing user and
    guest claims must carry a session id that still belongs to a guest record.
    """

    try:
        kind = PrincipalKind(claims.get("type"))
    except ValueError as exc:
        raise InvalidTokenError() from exc

    subject_id = claims.get("sub")
    if not isinstance(subject_id, int):
        raise InvalidTokenError()

    if kind is PrincipalKind.USER:
        user = UserRepository(session).get(subject_id)
        if user is None:
            raise InvalidTokenError("Usuario no encontrado")
        return Principal(kind=kind, subject_id=user.id, email=user.email)

    session_id = claims.get("sessionId")
    if not session_id:
        raise InvalidTokenError("El identificador de sesión es obligatorio para invitados")
    guest = GuestRepository(session).get_by_session_id(str(session_id))
    if guest is None or guest.id != subject_id:
        raise InvalidTokenError()
    return Principal(kind=kind, subject_id=guest.id, session_id=guest.session_id)


def is_admin_email(email: str | None, admin_emails: Iterable[str]) -> bool:
    """Return ``True`` when ``email`` belongs to the configured allow-list."""

    if not email:
        return False
    normalized = email.strip().lower()
    return any(normalized == candidate.strip().lower() for candidate in admin_emails)


def ensure_admin(principal: Principal, admin_emails: Iterable[str]) -> Principal:
    """Return ``principal`` when it may use the administration routes."""

    if not principal.is_user:
        raise ForbiddenError(
            "Solo usuarios registrados pueden acceder al área administrativa"
        )
    if not principal.email:
        raise ForbiddenError("El correo del usuario no se encuentra en el token")
    if not is_admin_email(principal.email, admin_emails):
        logger.warning(
            "Acceso administrativo denegado para el usuario %s", principal.subject_id
        )
        raise ForbiddenError("Acceso restringido a administradores")
    return principal
