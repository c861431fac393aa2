"""Use case for opening a guest session."""

import logging

from sqlalchemy.orm import Session

from app.domain.entities import Guest
from app.infrastructure.repositories import GuestRepository
from app.infrastructure.security import generate_session_id

from .validators import normalize_name

logger = logging.getLogger(__name__)


def create_guest(session: Session, *, name: str) -> Guest:
    """Persist a guest with a freshly generated session id."""

    guest = GuestRepository(session).create(
        Guest(id=None, name=normalize_name(name), session_id=generate_session_id())
    )
    logger.info("Acceso de invitado creado (ID: %s)", guest.id)
    return guest
