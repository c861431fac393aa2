"""Use cases for session principals and the access policy."""

from .principal import ensure_admin, is_admin_email, resolve_principal

__all__ = ["ensure_admin", "is_admin_email", "resolve_principal"]
