"""Domain entity for the per user read/dismiss state of a notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class MarkField(str, Enum):
    """Flag of a mark row that can be switched by an upsert."""

    IS_READ = "is_read"
    IS_DISMISSED = "is_dismissed"


@dataclass
class NotificationMark:
    """State recorded the first time a user reads or dismisses a notification."""

    id: int | None
    user_id: int
    notification_id: int
    is_read: bool = False
    is_dismissed: bool = False
    read_at: datetime | None = None


__all__ = ["MarkField", "NotificationMark"]
