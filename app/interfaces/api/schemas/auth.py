"""Authentication related schemas."""

from datetime import date

from pydantic import EmailStr, Field

from app.domain.entities import PrincipalKind, UserRole

from .base import ApiModel
from .user import GuestRead, UserRead


class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Al menos 6 caracteres")
    birth_date: date
    role: UserRole = UserRole.FRONTEND


class GuestAccessRequest(ApiModel):
    name: str = Field(..., min_length=1, max_length=100)


class Token(ApiModel):
    access_token: str = Field(..., alias="access_token")
    token_type: str = Field(default="bearer", alias="token_type")
    type: PrincipalKind


class UserToken(Token):
    type: PrincipalKind = PrincipalKind.USER
    user: UserRead


class GuestToken(Token):
    type: PrincipalKind = PrincipalKind.GUEST
    guest: GuestRead


__all__ = [
    "GuestAccessRequest",
    "GuestToken",
    "LoginRequest",
    "RegisterRequest",
    "Token",
    "UserToken",
]
