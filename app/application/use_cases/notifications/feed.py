"""Use cases computing the notification feed of a registered user."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import VisibleNotification
from app.domain.exceptions import NotificationStorageError
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def list_visible_notifications(session: Session, user_id: int) -> list[VisibleNotification]:
    """Return the feed of ``user_id``; storage failures surface as errors."""

    try:
        return NotificationRepository(session).list_visible_for_user(user_id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al buscar notificaciones para el usuario %s", user_id)
        raise NotificationStorageError("Error al buscar notificaciones") from exc


def count_unread_notifications(session: Session, user_id: int) -> int:
    """Return how many feed entries ``user_id`` has not read.

    Unlike the feed itself, a storage failure here is logged and reported as zero so
    the unread badge never breaks the client.
    """

    try:
        return NotificationRepository(session).count_unread_for_user(user_id)
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Error al contar notificaciones para el usuario %s", user_id)
        return 0
