"""Domain entities describing admin curated notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Final


class NotificationType(str, Enum):
    """Category shown next to a notification in the client."""

    UPDATE = "update"
    ANNOUNCEMENT = "announcement"
    WARNING = "warning"
    MAINTENANCE = "maintenance"
    FEATURE = "feature"


class NotificationPriority(str, Enum):
    """Severity label of a notification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


PRIORITY_RANKS: Final[dict[NotificationPriority, int]] = {
    NotificationPriority.LOW: 1,
    NotificationPriority.MEDIUM: 2,
    NotificationPriority.HIGH: 3,
    NotificationPriority.URGENT: 4,
}


@dataclass
class Notification:
    """Message published by an administrator for every registered user."""

    id: int | None
    title: str
    message: str
    type: NotificationType = NotificationType.ANNOUNCEMENT
    priority: NotificationPriority = NotificationPriority.MEDIUM
    is_active: bool = True
    expires_at: datetime | None = None
    action_url: str | None = None
    action_text: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class VisibleNotification:
    """Notification as it appears in a user's feed, annotated with their mark."""

    id: int
    title: str
    message: str
    type: NotificationType
    priority: NotificationPriority
    action_url: str | None
    action_text: str | None
    created_at: datetime
    is_read: bool = False
    is_dismissed: bool = False


@dataclass(frozen=True)
class NotificationStats:
    """Aggregated counters shown on the administration dashboard."""

    total: int
    active: int
    inactive: int
    by_type: dict[str, int]
    by_priority: dict[str, int]
    recent: int


__all__ = [
    "Notification",
    "NotificationPriority",
    "NotificationStats",
    "NotificationType",
    "PRIORITY_RANKS",
    "VisibleNotification",
]
