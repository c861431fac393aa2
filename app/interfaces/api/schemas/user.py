"""User and guest schemas."""

from datetime import date, datetime

from pydantic import ConfigDict, EmailStr, Field

from app.domain.entities import UserRole

from .base import ApiModel


class UserRead(ApiModel):
    id: int
    name: str
    email: EmailStr
    birth_date: date
    role: UserRole
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GuestRead(ApiModel):
    id: int
    name: str
    session_id: str


class ProfileUpdate(ApiModel):
    """Full replacement of the profile fields with an optional password change."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    birth_date: date
    role: UserRole
    current_password: str | None = Field(default=None, min_length=6)
    new_password: str | None = Field(default=None, min_length=6)

    model_config = ConfigDict(extra="forbid")


__all__ = ["GuestRead", "ProfileUpdate", "UserRead"]
