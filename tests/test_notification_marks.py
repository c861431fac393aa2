"""Tests for the read/dismiss upsert and the batch mark use cases."""

from __future__ import annotations

import pytest

from app.application.use_cases.notifications import (
    dismiss_notification,
    list_visible_notifications,
    mark_notifications_as_read,
)
from app.domain.entities import MarkField, Notification
from app.domain.exceptions import NotificationNotFoundError
from app.infrastructure.models import NotificationMarkModel
from app.infrastructure.repositories import (
    NotificationMarkRepository,
    NotificationRepository,
)


@pytest.fixture()
def notification(db_session) -> Notification:
    return NotificationRepository(db_session).create(
        Notification(id=None, title="T", message="Body")
    )


def _rows(db_session, user_id: int, notification_id: int) -> list[NotificationMarkModel]:
    db_session.expire_all()
    return (
        db_session.query(NotificationMarkModel)
        .filter_by(user_id=user_id, notification_id=notification_id)
        .all()
    )


def test_marking_read_twice_keeps_a_single_identical_row(
    db_session, make_user, notification
) -> None:
    user = make_user()
    marks = NotificationMarkRepository(db_session)

    marks.set_mark(user.id, notification.id, MarkField.IS_READ)
    first = marks.get(user.id, notification.id)
    marks.set_mark(user.id, notification.id, MarkField.IS_READ)
    second = marks.get(user.id, notification.id)

    assert len(_rows(db_session, user.id, notification.id)) == 1
    assert first == second
    assert second.is_read is True
    assert second.is_dismissed is False
    assert second.read_at is not None


def test_reading_does_not_touch_dismissed_flag_and_vice_versa(
    db_session, make_user, notification
) -> None:
    user = make_user()
    marks = NotificationMarkRepository(db_session)

    marks.set_mark(user.id, notification.id, MarkField.IS_DISMISSED)
    marks.set_mark(user.id, notification.id, MarkField.IS_READ)
    after_read = marks.get(user.id, notification.id)

    assert after_read.is_dismissed is True
    assert after_read.is_read is True

    other = make_user("other@example.com")
    marks.set_mark(other.id, notification.id, MarkField.IS_READ)
    marks.set_mark(other.id, notification.id, MarkField.IS_DISMISSED)
    other_mark = marks.get(other.id, notification.id)

    assert other_mark.is_read is True
    assert other_mark.is_dismissed is True


def test_dismiss_only_mark_has_no_read_timestamp(db_session, make_user, notification) -> None:
    user = make_user()
    dismiss_notification(db_session, user.id, notification.id)

    mark = NotificationMarkRepository(db_session).get(user.id, notification.id)

    assert mark.is_dismissed is True
    assert mark.is_read is False
    assert mark.read_at is None


def test_batch_mark_deduplicates_ids(db_session, make_user, notification) -> None:
    user = make_user()

    marked = mark_notifications_as_read(
        db_session, user.id, [notification.id, notification.id]
    )

    assert marked == 1
    assert len(_rows(db_session, user.id, notification.id)) == 1


def test_batch_mark_keeps_earlier_marks_when_an_id_is_unknown(
    db_session, make_user, notification
) -> None:
    user = make_user()

    with pytest.raises(NotificationNotFoundError):
        mark_notifications_as_read(db_session, user.id, [notification.id, 9999])

    mark = NotificationMarkRepository(db_session).get(user.id, notification.id)
    assert mark is not None and mark.is_read is True


def test_dismissing_unknown_notification_raises(db_session, make_user) -> None:
    user = make_user()

    with pytest.raises(NotificationNotFoundError):
        dismiss_notification(db_session, user.id, 12345)


def test_read_then_dismiss_flow_updates_the_feed(db_session, make_user, notification) -> None:
    user = make_user()

    mark_notifications_as_read(db_session, user.id, [notification.id])
    (item,) = list_visible_notifications(db_session, user.id)
    assert item.is_read is True

    dismiss_notification(db_session, user.id, notification.id)
    assert list_visible_notifications(db_session, user.id) == []
