"""ORM models used by the application infrastructure."""

from .guest import GuestModel
from .notification import NotificationModel
from .notification_mark import NotificationMarkModel
from .user import UserModel

__all__ = [
    "GuestModel",
    "NotificationModel",
    "NotificationMarkModel",
    "UserModel",
]
