"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import AnyHttpUrl, ConfigDict, Field, field_validator

from app.domain.entities import NotificationPriority, NotificationType

from .base import ApiModel


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class NotificationCreate(ApiModel):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.ANNOUNCEMENT
    priority: NotificationPriority = NotificationPriority.MEDIUM
    is_active: bool = True
    expires_at: datetime | None = None
    action_url: AnyHttpUrl | None = None
    action_text: str | None = Field(default=None, max_length=50)

    @field_validator("expires_at", "action_url", "action_text", mode="before")
    @classmethod
    def _empty_strings_are_missing(cls, value):
        return _blank_to_none(value)


class NotificationUpdate(ApiModel):
    """Partial update; ``expiresAt`` sent as ``null`` or ``""`` clears the expiry."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    message: str | None = Field(default=None, min_length=1)
    type: NotificationType | None = None
    priority: NotificationPriority | None = None
    is_active: bool | None = None
    expires_at: datetime | None = None
    action_url: AnyHttpUrl | None = None
    action_text: str | None = Field(default=None, max_length=50)

    model_config = ConfigDict(extra="forbid")

    @field_validator("expires_at", "action_url", "action_text", mode="before")
    @classmethod
    def _empty_strings_are_missing(cls, value):
        return _blank_to_none(value)


class NotificationRead(ApiModel):
    """Representation of a notification for administrators."""

    id: int
    title: str
    message: str
    type: NotificationType
    priority: NotificationPriority
    is_active: bool
    expires_at: datetime | None = None
    action_url: str | None = None
    action_text: str | None = None
    created_at: datetime
    updated_at: datetime | None = None


class VisibleNotificationRead(ApiModel):
    """Feed entry annotated with the caller's read/dismiss state."""

    id: int
    title: str
    message: str
    type: NotificationType
    priority: NotificationPriority
    action_url: str | None = None
    action_text: str | None = None
    created_at: datetime
    is_read: bool
    is_dismissed: bool


class NotificationMarkReadRequest(ApiModel):
    """Payload used to mark a batch of notifications as read."""

    notification_ids: list[int] = Field(
        ..., min_length=1, description="Identificadores de notificaciones"
    )


class UnreadCountRead(ApiModel):
    count: int


class MessageResponse(ApiModel):
    message: str


class AdminCheckRead(ApiModel):
    is_admin: bool
    email: str | None
    message: str


class NotificationCreatedRead(NotificationRead):
    created_by: str | None = None


class NotificationUpdatedRead(NotificationRead):
    updated_by: str | None = None


class NotificationActivatedRead(NotificationRead):
    activated_by: str | None = None
    status_message: str


class NotificationDeactivatedRead(NotificationRead):
    deactivated_by: str | None = None
    status_message: str


class NotificationBroadcastRead(NotificationRead):
    broadcast_by: str | None = None
    broadcast_at: datetime
    status_message: str


class NotificationDeletedRead(ApiModel):
    message: str
    deleted_by: str | None = None
    deleted_at: datetime


class NotificationStatsRead(ApiModel):
    total: int
    active: int
    inactive: int
    by_type: dict[str, int]
    by_priority: dict[str, int]
    recent: int


__all__ = [
    "AdminCheckRead",
    "MessageResponse",
    "NotificationActivatedRead",
    "NotificationBroadcastRead",
    "NotificationCreate",
    "NotificationCreatedRead",
    "NotificationDeactivatedRead",
    "NotificationDeletedRead",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotificationStatsRead",
    "NotificationUpdate",
    "NotificationUpdatedRead",
    "UnreadCountRead",
    "VisibleNotificationRead",
]
