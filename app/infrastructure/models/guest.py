"""SQLAlchemy model for guest sessions."""

from sqlalchemy import Column, DateTime, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class GuestModel(Base):
    """Database representation of a guest session."""

    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    session_id = Column(String(100), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["GuestModel"]
