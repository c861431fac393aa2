"""Use cases for the notification feed and its administration."""

from .feed import count_unread_notifications, list_visible_notifications
from .management import (
    create_notification,
    delete_notification,
    get_notification,
    get_notification_stats,
    list_notifications,
    set_notification_active,
    update_notification,
)
from .marks import dismiss_notification, mark_notifications_as_read

__all__ = [
    "count_unread_notifications",
    "create_notification",
    "delete_notification",
    "dismiss_notification",
    "get_notification",
    "get_notification_stats",
    "list_notifications",
    "list_visible_notifications",
    "mark_notifications_as_read",
    "set_notification_active",
    "update_notification",
]
