"""Domain entities exposed by the application."""

from .guest import Guest
from .notification import (
    PRIORITY_RANKS,
    Notification,
    NotificationPriority,
    NotificationStats,
    NotificationType,
    VisibleNotification,
)
from .notification_mark import MarkField, NotificationMark
from .principal import Principal, PrincipalKind
from .user import User, UserRole

__all__ = [
    "Guest",
    "MarkField",
    "Notification",
    "NotificationMark",
    "NotificationPriority",
    "NotificationStats",
    "NotificationType",
    "PRIORITY_RANKS",
    "Principal",
    "PrincipalKind",
    "User",
    "UserRole",
    "VisibleNotification",
]
