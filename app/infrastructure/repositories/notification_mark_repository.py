"""Persistence helpers for per user read/dismiss marks."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.orm import Session

from app.domain.entities import MarkField, NotificationMark
from app.infrastructure.models import NotificationMarkModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone

_CONFLICT_COLUMNS = ("user_id", "notification_id")


class NotificationMarkRepository:
    """Record read/dismiss marks with the database's insert-or-update primitive."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int, notification_id: int) -> NotificationMark | None:
        model = (
            self.session.query(NotificationMarkModel)
            .filter(
                NotificationMarkModel.user_id == user_id,
                NotificationMarkModel.notification_id == notification_id,
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> list[NotificationMark]:
        """Return every mark row recorded by ``user_id``, ordered by notification id."""

        query = (
            self.session.query(NotificationMarkModel)
            .filter(NotificationMarkModel.user_id == user_id)
            .order_by(NotificationMarkModel.notification_id)
        )
        return [self._to_entity(model) for model in query.all()]

    def set_mark(
        self,
        user_id: int,
        notification_id: int,
        field: MarkField,
        value: bool = True,
    ) -> None:
        """Insert the mark row or update ``field`` on the existing one, then commit.

        The other flag of an existing row is left untouched and ``read_at`` keeps the
        timestamp of the first read, so repeating the call changes nothing.
        """

        field = MarkField(field)
        insert_values: dict[str, Any] = {
            "user_id": user_id,
            "notification_id": notification_id,
            field.value: value,
        }
        update_values: dict[str, Any] = {field.value: value}
        if field is MarkField.IS_READ and value:
            now = ensure_app_naive_datetime(now_in_app_timezone())
            insert_values["read_at"] = now
            update_values["read_at"] = func.coalesce(NotificationMarkModel.read_at, now)

        statement = self._build_upsert(insert_values, update_values)
        self.session.execute(statement)
        self.session.commit()

    def _build_upsert(
        self, insert_values: dict[str, Any], update_values: dict[str, Any]
    ):
        dialect_name = self.session.get_bind().dialect.name
        table = NotificationMarkModel.__table__

        if dialect_name == "sqlite":
            statement = sqlite.insert(table).values(**insert_values)
            return statement.on_conflict_do_update(
                index_elements=list(_CONFLICT_COLUMNS), set_=update_values
            )
        if dialect_name == "postgresql":
            statement = postgresql.insert(table).values(**insert_values)
            return statement.on_conflict_do_update(
                index_elements=list(_CONFLICT_COLUMNS), set_=update_values
            )
        if dialect_name in {"mysql", "mariadb"}:
            statement = mysql.insert(table).values(**insert_values)
            return statement.on_duplicate_key_update(**update_values)

        msg = f"Notification marks require an upsert capable database, got '{dialect_name}'"
        raise RuntimeError(msg)

    @staticmethod
    def _to_entity(model: NotificationMarkModel) -> NotificationMark:
        return NotificationMark(
            id=model.id,
            user_id=model.user_id,
            notification_id=model.notification_id,
            is_read=bool(model.is_read),
            is_dismissed=bool(model.is_dismissed),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationMarkRepository"]
