"""Helper utilities shared across API route handlers."""

from typing import NoReturn

from fastapi import HTTPException, status

from app.domain.exceptions import (
    ApplicationError,
    ConflictError,
    ForbiddenError,
    NotAuthenticatedError,
    NotFoundError,
    NotificationStorageError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[ApplicationError], int], ...] = (
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotificationStorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(exc: ApplicationError) -> int:
    """Return the HTTP status matching the class of ``exc``."""

    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def raise_http_error(exc: ApplicationError) -> NoReturn:
    """Translate an application error into the ``HTTPException`` sent to clients."""

    status_code = status_code_for(exc)
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    raise HTTPException(status_code=status_code, detail=exc.message, headers=headers) from exc
