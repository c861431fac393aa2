"""Persistence helpers for notification entities and the per user feed."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from sqlalchemy import and_, case, false, func, or_
from sqlalchemy.orm import Session

from app.domain.entities import (
    PRIORITY_RANKS,
    Notification,
    NotificationPriority,
    NotificationStats,
    NotificationType,
    VisibleNotification,
)
from app.infrastructure.models import NotificationMarkModel, NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

RECENT_WINDOW = timedelta(days=7)

# Severity rank: low < medium < high < urgent.
_PRIORITY_RANK = case(
    {priority.value: rank for priority, rank in PRIORITY_RANKS.items()},
    value=NotificationModel.priority,
    else_=0,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # ---- per user feed ----

    def list_visible_for_user(
        self, user_id: int, *, now: datetime | None = None
    ) -> list[VisibleNotification]:
        """Return the active, unexpired, undismissed notifications for ``user_id``.

        Each entry carries the user's read/dismiss flags, defaulting to ``False`` when
        the user never marked the notification. Results are ordered by severity, then
        newest first.
        """

        is_read = func.coalesce(NotificationMarkModel.is_read, false()).label("is_read")
        is_dismissed = func.coalesce(
            NotificationMarkModel.is_dismissed, false()
        ).label("is_dismissed")
        query = (
            self.session.query(NotificationModel, is_read, is_dismissed)
            .outerjoin(NotificationMarkModel, self._mark_join_condition(user_id))
            .filter(*self._visibility_filters(now))
            .order_by(
                _PRIORITY_RANK.desc(),
                NotificationModel.created_at.desc(),
                NotificationModel.id.desc(),
            )
        )
        return [
            self._to_visible_entity(model, read=bool(read), dismissed=bool(dismissed))
            for model, read, dismissed in query.all()
        ]

    def count_unread_for_user(self, user_id: int, *, now: datetime | None = None) -> int:
        """Count the notifications of the feed that ``user_id`` has not read yet."""

        query = (
            self.session.query(func.count(NotificationModel.id))
            .select_from(NotificationModel)
            .outerjoin(NotificationMarkModel, self._mark_join_condition(user_id))
            .filter(*self._visibility_filters(now))
            .filter(
                or_(
                    NotificationMarkModel.is_read.is_(None),
                    NotificationMarkModel.is_read.is_(False),
                )
            )
        )
        return int(query.scalar() or 0)

    @staticmethod
    def _mark_join_condition(user_id: int):
        return and_(
            NotificationMarkModel.notification_id == NotificationModel.id,
            NotificationMarkModel.user_id == user_id,
        )

    @staticmethod
    def _visibility_filters(now: datetime | None) -> tuple:
        reference = ensure_app_naive_datetime(now or now_in_app_timezone())
        return (
            NotificationModel.is_active.is_(True),
            or_(
                NotificationModel.expires_at.is_(None),
                NotificationModel.expires_at > reference,
            ),
            or_(
                NotificationMarkModel.is_dismissed.is_(None),
                NotificationMarkModel.is_dismissed.is_(False),
            ),
        )

    # ---- administration ----

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def exists(self, notification_id: int) -> bool:
        query = self.session.query(NotificationModel.id).filter(
            NotificationModel.id == notification_id
        )
        return bool(self.session.query(query.exists()).scalar())

    def list(self) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        if notification.created_at is not None:
            model.created_at = ensure_app_naive_datetime(notification.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, notification: Notification) -> Notification:
        if notification.id is None:
            raise ValueError("Notification id is required for updates")
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            msg = f"Notification with id {notification.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, notification_id: int) -> None:
        """Delete the notification together with every mark recorded for it."""

        self.session.query(NotificationMarkModel).filter(
            NotificationMarkModel.notification_id == notification_id
        ).delete(synchronize_session=False)
        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id
        ).delete(synchronize_session=False)
        self.session.commit()

    def stats(self, *, now: datetime | None = None) -> NotificationStats:
        reference = ensure_app_naive_datetime(now or now_in_app_timezone())
        total = self.session.query(func.count(NotificationModel.id)).scalar() or 0
        active = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.is_active.is_(True))
            .scalar()
            or 0
        )
        by_type = dict(
            self.session.query(NotificationModel.type, func.count(NotificationModel.id))
            .group_by(NotificationModel.type)
            .all()
        )
        by_priority = dict(
            self.session.query(
                NotificationModel.priority, func.count(NotificationModel.id)
            )
            .group_by(NotificationModel.priority)
            .all()
        )
        recent = (
            self.session.query(func.count(NotificationModel.id))
            .filter(NotificationModel.created_at > reference - RECENT_WINDOW)
            .scalar()
            or 0
        )
        return NotificationStats(
            total=int(total),
            active=int(active),
            inactive=int(total) - int(active),
            by_type={key: int(value) for key, value in by_type.items()},
            by_priority={key: int(value) for key, value in by_priority.items()},
            recent=int(recent),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.title = notification.title
        model.message = notification.message
        model.type = NotificationType(notification.type).value
        model.priority = NotificationPriority(notification.priority).value
        model.is_active = notification.is_active
        model.expires_at = ensure_app_naive_datetime(notification.expires_at)
        model.action_url = notification.action_url
        model.action_text = notification.action_text

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            message=model.message,
            type=NotificationType(model.type),
            priority=NotificationPriority(model.priority),
            is_active=bool(model.is_active),
            expires_at=ensure_app_timezone(model.expires_at),
            action_url=model.action_url,
            action_text=model.action_text,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _to_visible_entity(
        model: NotificationModel, *, read: bool, dismissed: bool
    ) -> VisibleNotification:
        return VisibleNotification(
            id=model.id,
            title=model.title,
            message=model.message,
            type=NotificationType(model.type),
            priority=NotificationPriority(model.priority),
            action_url=model.action_url,
            action_text=model.action_text,
            created_at=ensure_app_timezone(model.created_at),
            is_read=read,
            is_dismissed=dismissed,
        )


__all__ = ["NotificationRepository", "RECENT_WINDOW"]
