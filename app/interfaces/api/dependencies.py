"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.application.use_cases.auth import ensure_admin, resolve_principal
from app.config import Settings, get_settings
from app.domain.entities import Principal
from app.domain.exceptions import ApplicationError, ForbiddenError
from app.infrastructure.database import get_db
from app.infrastructure.security import decode_session_token
from app.interfaces.api.routes_helpers import raise_http_error

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> Principal:
    """Return the user or guest behind the bearer token."""

    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Usuario no autenticado",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = decode_session_token(credentials.credentials)
        return resolve_principal(db, claims)
    except ApplicationError as exc:
        raise_http_error(exc)


def require_registered_user(
    principal: Principal = Depends(get_current_principal),
) -> Principal:
    """Reject guests on routes reserved to registered users."""

    if not principal.is_user:
        raise_http_error(
            ForbiddenError("Esta operación está disponible solo para usuarios registrados")
        )
    return principal


def require_admin(
    principal: Principal = Depends(get_current_principal),
    settings: Settings = Depends(get_settings),
) -> Principal:
    """Ensure the caller is a registered user listed as administrator."""

    try:
        return ensure_admin(principal, settings.admin_emails)
    except ApplicationError as exc:
        raise_http_error(exc)
