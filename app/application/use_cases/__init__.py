"""Aggregate application use cases."""

from .auth import resolve_principal
from .users import authenticate_user, create_guest, register_user

__all__ = [
    "authenticate_user",
    "create_guest",
    "register_user",
    "resolve_principal",
]
