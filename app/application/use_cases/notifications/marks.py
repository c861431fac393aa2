"""Use cases recording read and dismiss marks."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import MarkField
from app.domain.exceptions import NotificationNotFoundError, NotificationStorageError
from app.infrastructure.repositories import (
    NotificationMarkRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


def _unique_ids(notification_ids: Iterable[int]) -> list[int]:
    unique: list[int] = []
    seen: set[int] = set()
    for notification_id in notification_ids:
        if notification_id in seen:
            continue
        seen.add(notification_id)
        unique.append(notification_id)
    return unique


def mark_notifications_as_read(
    session: Session, user_id: int, notification_ids: Iterable[int]
) -> int:
    """Mark each notification as read for ``user_id`` and return how many were marked.

    Ids are processed one at a time and every mark is committed on its own: when an
    id is unknown or the database fails, marks already recorded for earlier ids stay.
    """

    notifications = NotificationRepository(session)
    marks = NotificationMarkRepository(session)
    ids = _unique_ids(notification_ids)

    try:
        for notification_id in ids:
            if not notifications.exists(notification_id):
                raise NotificationNotFoundError(notification_id)
            marks.set_mark(user_id, notification_id, MarkField.IS_READ)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Error al marcar notificaciones como leídas para el usuario %s", user_id
        )
        raise NotificationStorageError(
            "Error al marcar notificaciones como leídas"
        ) from exc

    logger.info("Usuario %s marcó %s notificaciones como leídas", user_id, len(ids))
    return len(ids)


def dismiss_notification(session: Session, user_id: int, notification_id: int) -> None:
    """Hide ``notification_id`` from the feed of ``user_id``."""

    try:
        if not NotificationRepository(session).exists(notification_id):
            raise NotificationNotFoundError(notification_id)
        NotificationMarkRepository(session).set_mark(
            user_id, notification_id, MarkField.IS_DISMISSED
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(
            "Error al dispensar la notificación %s para el usuario %s",
            notification_id,
            user_id,
        )
        raise NotificationStorageError("Error al dispensar notificación") from exc

    logger.info("Usuario %s dispensó la notificación %s", user_id, notification_id)
