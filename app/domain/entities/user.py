"""Domain entity representing a registered user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class UserRole(str, Enum):
    """Job categories a registered user can pick for their profile."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    MOBILE = "mobile"
    DEVOPS = "devops"
    UI_UX = "ui-ux"
    DATA = "data"
    QA = "qa"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str
    email: str
    password: str
    birth_date: date
    role: UserRole = UserRole.FRONTEND
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["User", "UserRole"]
