"""Domain entity representing an anonymous guest session."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Guest:
    """Visitor identified only by a display name and a server issued session id."""

    id: int | None
    name: str
    session_id: str
    created_at: datetime | None = None


__all__ = ["Guest"]
