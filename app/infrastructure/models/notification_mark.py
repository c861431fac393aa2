"""SQLAlchemy model for per user notification marks."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
)
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class NotificationMarkModel(Base):
    """Read/dismiss state of one notification for one user.

    A missing row means the notification is unread and not dismissed.
    """

    __tablename__ = "user_notifications"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "notification_id", name="uq_user_notifications_user_notification"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    notification_id = Column(
        Integer,
        ForeignKey("notifications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    is_dismissed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    read_at = Column(DateTime, nullable=True)


__all__ = ["NotificationMarkModel"]
