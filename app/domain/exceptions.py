"""Application specific exceptions.

Every error derives from :class:`ApplicationError`, which is a ``ValueError`` so the
use cases keep raising value errors for invalid input. The API layer maps each class
to an HTTP status in ``app.interfaces.api.routes_helpers``.
"""

from __future__ import annotations


class ApplicationError(ValueError):
    """Base exception for every error raised by the use cases."""

    default_message = "Error en la solicitud"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAuthenticatedError(ApplicationError):
    """Raised when the caller did not present a usable session."""

    default_message = "Usuario no autenticado"


class InvalidTokenError(NotAuthenticatedError):
    """Raised when a session token cannot be verified."""

    default_message = "Credenciales inválidas"


class InvalidCredentialsError(NotAuthenticatedError):
    """Raised when an email/password pair does not match."""

    default_message = "Credenciales inválidas"


class ForbiddenError(ApplicationError):
    """Raised when an authenticated caller lacks the required privileges."""

    default_message = "No autorizado"


class NotFoundError(ApplicationError):
    """Raised when a requested entity does not exist."""

    default_message = "Recurso no encontrado"


class UserNotFoundError(NotFoundError):
    default_message = "Usuario no encontrado"


class NotificationNotFoundError(NotFoundError):
    """Raised when a notification id does not exist."""

    default_message = "Notificación no encontrada"

    def __init__(self, notification_id: int | None = None) -> None:
        self.notification_id = notification_id
        super().__init__()


class ConflictError(ApplicationError):
    """Raised when a write would break a uniqueness rule."""

    default_message = "El recurso ya existe"


class EmailAlreadyRegisteredError(ConflictError):
    default_message = "El correo electrónico ya está registrado"


class ValidationError(ApplicationError):
    """Raised when a request is well formed but semantically invalid."""

    default_message = "Datos inválidos"


class NotificationStorageError(ApplicationError):
    """Raised when the database fails while handling notifications.

    The message is meant for clients and never includes driver details.
    """

    default_message = "Error interno al procesar las notificaciones"


__all__ = [
    "ApplicationError",
    "ConflictError",
    "EmailAlreadyRegisteredError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotAuthenticatedError",
    "NotFoundError",
    "NotificationNotFoundError",
    "NotificationStorageError",
    "UserNotFoundError",
    "ValidationError",
]
