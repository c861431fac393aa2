"""Repository implementations for infrastructure layer."""

from .guest_repository import GuestRepository
from .notification_mark_repository import NotificationMarkRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "GuestRepository",
    "NotificationMarkRepository",
    "NotificationRepository",
    "UserRepository",
]
