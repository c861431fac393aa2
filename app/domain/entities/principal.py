"""Authenticated caller context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrincipalKind(str, Enum):
    """Kind of subject a session token was issued for."""

    USER = "user"
    GUEST = "guest"


@dataclass(frozen=True)
class Principal:
    """Caller resolved from a verified session token.

    ``subject_id`` is the user id for registered users and the guest id for guests.
    """

    kind: PrincipalKind
    subject_id: int
    email: str | None = None
    session_id: str | None = None

    @property
    def is_guest(self) -> bool:
        return self.kind is PrincipalKind.GUEST

    @property
    def is_user(self) -> bool:
        return self.kind is PrincipalKind.USER


__all__ = ["Principal", "PrincipalKind"]
