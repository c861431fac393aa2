"""Use cases for managing users and guests."""

from .authenticate_user import authenticate_user
from .create_guest import create_guest
from .get_user import get_user
from .register_user import register_user
from .update_profile import update_profile

__all__ = [
    "authenticate_user",
    "create_guest",
    "get_user",
    "register_user",
    "update_profile",
]
