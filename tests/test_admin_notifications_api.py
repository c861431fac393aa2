"""Integration tests for the notification routes, user and admin side."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from conftest import auth_headers, register

from app.domain.entities import Notification, NotificationPriority, NotificationType
from app.infrastructure.models import NotificationMarkModel
from app.infrastructure.repositories import NotificationRepository
from app.infrastructure.repositories.notification_repository import RECENT_WINDOW
from app.utils import now_in_app_timezone


def _create(client, headers, **overrides):
    payload = {"title": "T", "message": "Body", "priority": "high", "isActive": True}
    payload.update(overrides)
    response = client.post("/notifications/admin", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_admin_publishes_and_user_reads_then_dismisses(
    client, admin_headers, user_headers
) -> None:
    created = _create(client, admin_headers)
    assert created["createdBy"] == "admin@example.com"
    assert created["type"] == "announcement"
    assert created["expiresAt"] is None

    feed = client.get("/notifications", headers=user_headers).json()
    assert [(item["title"], item["isRead"], item["isDismissed"]) for item in feed] == [
        ("T", False, False)
    ]
    assert client.get("/notifications/unread-count", headers=user_headers).json() == {
        "count": 1
    }

    response = client.post(
        "/notifications/mark-read",
        json={"notificationIds": [created["id"]]},
        headers=user_headers,
    )
    assert response.status_code == 200
    feed = client.get("/notifications", headers=user_headers).json()
    assert feed[0]["isRead"] is True
    assert client.get("/notifications/unread-count", headers=user_headers).json() == {
        "count": 0
    }

    response = client.post(f"/notifications/{created['id']}/dismiss", headers=user_headers)
    assert response.status_code == 200
    assert client.get("/notifications", headers=user_headers).json() == []


def test_non_admin_is_forbidden_and_anonymous_is_not_authenticated(
    client, user_headers
) -> None:
    forbidden = client.get("/notifications/admin/all", headers=user_headers)
    anonymous = client.get("/notifications/admin/all")

    assert forbidden.status_code == 403
    assert forbidden.json()["detail"] == "Acceso restringido a administradores"
    assert anonymous.status_code == 401


def test_guest_is_forbidden_on_admin_routes(client, guest_headers) -> None:
    response = client.post(
        "/notifications/admin", json={"title": "T", "message": "M"}, headers=guest_headers
    )

    assert response.status_code == 403


def test_admin_check(client, admin_headers) -> None:
    response = client.get("/notifications/admin/check", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["isAdmin"] is True
    assert response.json()["email"] == "admin@example.com"


def test_admin_crud_lifecycle(client, admin_headers) -> None:
    created = _create(
        client,
        admin_headers,
        type="maintenance",
        actionUrl="https://example.com/status",
        actionText="Ver estado",
    )
    notification_id = created["id"]

    detail = client.get(f"/notifications/admin/{notification_id}", headers=admin_headers)
    assert detail.status_code == 200
    assert detail.json()["actionUrl"] == "https://example.com/status"

    updated = client.patch(
        f"/notifications/admin/{notification_id}",
        json={"title": "New title", "priority": "urgent"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["title"] == "New title"
    assert updated.json()["priority"] == "urgent"
    assert updated.json()["type"] == "maintenance"
    assert updated.json()["updatedBy"] == "admin@example.com"

    listed = client.get("/notifications/admin/all", headers=admin_headers).json()
    assert [item["id"] for item in listed] == [notification_id]

    deleted = client.delete(f"/notifications/admin/{notification_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json()["deletedBy"] == "admin@example.com"

    missing = client.get(f"/notifications/admin/{notification_id}", headers=admin_headers)
    assert missing.status_code == 404


def test_update_clears_expiry_with_empty_string(client, admin_headers) -> None:
    expires = (datetime.now(timezone.utc) + timedelta(days=2)).isoformat()
    created = _create(client, admin_headers, expiresAt=expires)
    assert created["expiresAt"] is not None

    response = client.patch(
        f"/notifications/admin/{created['id']}",
        json={"expiresAt": ""},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["expiresAt"] is None


def test_update_rejects_unknown_fields(client, admin_headers) -> None:
    created = _create(client, admin_headers)

    response = client.patch(
        f"/notifications/admin/{created['id']}",
        json={"color": "red"},
        headers=admin_headers,
    )

    assert response.status_code == 422


def test_create_validates_payload(client, admin_headers) -> None:
    response = client.post(
        "/notifications/admin",
        json={"title": "", "message": "M", "priority": "critical", "actionUrl": "nope"},
        headers=admin_headers,
    )

    assert response.status_code == 422
    fields = {error["loc"][-1] for error in response.json()["detail"]}
    assert {"title", "priority", "actionUrl"} <= fields


def test_deactivate_hides_and_activate_restores(
    client, admin_headers, user_headers
) -> None:
    created = _create(client, admin_headers)

    response = client.patch(
        f"/notifications/admin/{created['id']}/deactivate", headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["isActive"] is False
    assert response.json()["deactivatedBy"] == "admin@example.com"
    assert client.get("/notifications", headers=user_headers).json() == []

    response = client.patch(
        f"/notifications/admin/{created['id']}/activate", headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["isActive"] is True
    assert len(client.get("/notifications", headers=user_headers).json()) == 1


def test_deactivate_unknown_notification_is_not_found(client, admin_headers) -> None:
    response = client.patch("/notifications/admin/404/deactivate", headers=admin_headers)

    assert response.status_code == 404


def test_broadcast_creates_visible_notification(client, admin_headers, user_headers) -> None:
    response = client.post(
        "/notifications/admin/broadcast",
        json={"title": "Hello", "message": "Everyone"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["broadcastBy"] == "admin@example.com"
    assert response.json()["message"] == "Everyone"
    assert [item["title"] for item in client.get("/notifications", headers=user_headers).json()] == [
        "Hello"
    ]


def test_stats(client, admin_headers) -> None:
    _create(client, admin_headers, type="update", priority="low")
    _create(client, admin_headers, type="update", priority="high")
    inactive = _create(client, admin_headers, type="feature", priority="high")
    client.patch(f"/notifications/admin/{inactive['id']}/deactivate", headers=admin_headers)

    response = client.get("/notifications/admin/stats", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "total": 3,
        "active": 2,
        "inactive": 1,
        "byType": {"update": 2, "feature": 1},
        "byPriority": {"low": 1, "high": 2},
        "recent": 3,
    }


def test_delete_removes_marks(client, admin_headers, user_headers, db_session) -> None:
    created = _create(client, admin_headers)
    client.post(
        "/notifications/mark-read",
        json={"notificationIds": [created["id"]]},
        headers=user_headers,
    )

    client.delete(f"/notifications/admin/{created['id']}", headers=admin_headers)

    remaining = (
        db_session.query(NotificationMarkModel)
        .filter_by(notification_id=created["id"])
        .count()
    )
    assert remaining == 0


def test_mark_read_requires_ids_and_known_notifications(client, user_headers) -> None:
    empty = client.post(
        "/notifications/mark-read", json={"notificationIds": []}, headers=user_headers
    )
    unknown = client.post(
        "/notifications/mark-read", json={"notificationIds": [77]}, headers=user_headers
    )

    assert empty.status_code == 422
    assert unknown.status_code == 404


def test_admin_list_is_case_insensitive(client) -> None:
    response = register(client, "Admin@Example.com", name="Admin")

    headers = auth_headers(response.json()["access_token"])
    assert client.get("/notifications/admin/check", headers=headers).status_code == 200


def _insert_created_at(session, title: str, created_at: datetime) -> None:
    NotificationRepository(session).create(
        Notification(
            id=None,
            title=title,
            message=f"{title} body",
            type=NotificationType.UPDATE,
            priority=NotificationPriority.LOW,
            created_at=created_at,
        )
    )


def test_stats_recent_only_counts_the_last_seven_days(
    client, admin_headers, db_session
) -> None:
    now = now_in_app_timezone()
    _insert_created_at(db_session, "old", now - timedelta(days=8))
    _insert_created_at(db_session, "fresh", now - timedelta(days=7) + timedelta(hours=1))

    body = client.get("/notifications/admin/stats", headers=admin_headers).json()

    assert body["total"] == 2
    assert body["recent"] == 1


def test_stats_recent_window_excludes_its_lower_bound(db_session) -> None:
    reference = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
    _insert_created_at(db_session, "on the bound", reference - RECENT_WINDOW)
    _insert_created_at(
        db_session, "just inside", reference - RECENT_WINDOW + timedelta(seconds=1)
    )

    stats = NotificationRepository(db_session).stats(now=reference)

    assert (stats.total, stats.recent) == (2, 1)
