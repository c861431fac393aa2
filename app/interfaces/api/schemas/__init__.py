from .auth import (
    GuestAccessRequest,
    GuestToken,
    LoginRequest,
    RegisterRequest,
    Token,
    UserToken,
)
from .notification import (
    AdminCheckRead,
    MessageResponse,
    NotificationActivatedRead,
    NotificationBroadcastRead,
    NotificationCreate,
    NotificationCreatedRead,
    NotificationDeactivatedRead,
    NotificationDeletedRead,
    NotificationMarkReadRequest,
    NotificationRead,
    NotificationStatsRead,
    NotificationUpdate,
    NotificationUpdatedRead,
    UnreadCountRead,
    VisibleNotificationRead,
)
from .user import GuestRead, ProfileUpdate, UserRead

__all__ = [
    "AdminCheckRead",
    "GuestAccessRequest",
    "GuestRead",
    "GuestToken",
    "LoginRequest",
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
    "ProfileUpdate",
    "RegisterRequest",
    "Token",
    "UnreadCountRead",
    "UserRead",
    "UserToken",
    "VisibleNotificationRead",
]
