"""Administrative use cases for creating and maintaining notifications."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import (
    Notification,
    NotificationPriority,
    NotificationStats,
    NotificationType,
)
from app.domain.exceptions import (
    NotificationNotFoundError,
    NotificationStorageError,
    ValidationError,
)
from app.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "message",
        "type",
        "priority",
        "is_active",
        "expires_at",
        "action_url",
        "action_text",
    }
)


def create_notification(
    session: Session,
    *,
    title: str,
    message: str,
    type: NotificationType = NotificationType.ANNOUNCEMENT,
    priority: NotificationPriority = NotificationPriority.MEDIUM,
    is_active: bool = True,
    expires_at: datetime | None = None,
    action_url: str | None = None,
    action_text: str | None = None,
) -> Notification:
    """Persist a new notification visible to every registered user."""

    notification = Notification(
        id=None,
        title=_require_text(title, "El título es obligatorio"),
        message=_require_text(message, "El mensaje es obligatorio"),
        type=NotificationType(type),
        priority=NotificationPriority(priority),
        is_active=is_active,
        expires_at=expires_at,
        action_url=action_url,
        action_text=action_text,
    )
    try:
        saved = NotificationRepository(session).create(notification)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al crear notificación")
        raise NotificationStorageError("Error al crear notificación") from exc

    logger.info("Notificación creada: %s (ID: %s)", saved.title, saved.id)
    return saved


def list_notifications(session: Session) -> Sequence[Notification]:
    """Return every notification, newest first."""

    try:
        notifications = NotificationRepository(session).list()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al buscar todas las notificaciones")
        raise NotificationStorageError("Error al buscar notificaciones") from exc

    logger.info("Buscadas %s notificaciones (admin)", len(notifications))
    return notifications


def get_notification(session: Session, notification_id: int) -> Notification:
    """Return the notification or raise ``NotificationNotFoundError``."""

    try:
        notification = NotificationRepository(session).get(notification_id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al buscar la notificación %s", notification_id)
        raise NotificationStorageError("Error al buscar notificación") from exc

    if notification is None:
        raise NotificationNotFoundError(notification_id)
    return notification


def update_notification(
    session: Session, notification_id: int, changes: Mapping[str, Any]
) -> Notification:
    """Apply ``changes`` to the notification.

    Only keys present in ``changes`` are modified. ``expires_at`` set to ``None``
    removes the expiry.
    """

    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValidationError(f"Campos no permitidos: {', '.join(sorted(unknown))}")

    current = get_notification(session, notification_id)
    values = dict(changes)
    if "title" in values:
        values["title"] = _require_text(values["title"], "El título es obligatorio")
    if "message" in values:
        values["message"] = _require_text(values["message"], "El mensaje es obligatorio")
    if values.get("type") is not None:
        values["type"] = NotificationType(values["type"])
    if values.get("priority") is not None:
        values["priority"] = NotificationPriority(values["priority"])
    for required in ("type", "priority", "is_active"):
        if required in values and values[required] is None:
            values.pop(required)

    try:
        updated = NotificationRepository(session).update(replace(current, **values))
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al actualizar la notificación %s", notification_id)
        raise NotificationStorageError("Error al actualizar notificación") from exc

    logger.info("Notificación %s actualizada", notification_id)
    return updated


def set_notification_active(
    session: Session, notification_id: int, *, is_active: bool
) -> Notification:
    """Activate or deactivate a notification without deleting it."""

    notification = update_notification(
        session, notification_id, {"is_active": is_active}
    )
    logger.info(
        "Notificación %s %s", notification_id, "activada" if is_active else "desactivada"
    )
    return notification


def delete_notification(session: Session, notification_id: int) -> None:
    """Remove a notification and every read/dismiss mark recorded for it."""

    get_notification(session, notification_id)
    try:
        NotificationRepository(session).delete(notification_id)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al remover la notificación %s", notification_id)
        raise NotificationStorageError("Error al remover notificación") from exc

    logger.info("Notificación %s removida", notification_id)


def get_notification_stats(session: Session) -> NotificationStats:
    """Return the dashboard counters for all notifications."""

    try:
        return NotificationRepository(session).stats()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Error al calcular estadísticas de notificaciones")
        raise NotificationStorageError("Error al buscar notificaciones") from exc


def _require_text(value: str | None, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()
