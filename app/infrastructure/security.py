"""Security helpers for hashing passwords and signing session tokens."""

from datetime import datetime, timedelta, timezone
from typing import Any
import uuid

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.domain.entities import PrincipalKind
from app.domain.exceptions import InvalidTokenError

ALGORITHM = "HS256"

# ---- Password hashing (passlib) ----
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# ---- JWT ----


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise InvalidTokenError() from exc


def issue_session_token(
    kind: PrincipalKind,
    subject_id: int,
    extra: dict[str, Any] | None = None,
    *,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a session claim for a user or a guest.

    ``sub`` is encoded as a string because JOSE rejects non-string subjects.
    """

    claims: dict[str, Any] = {"sub": str(subject_id), "type": kind.value}
    for key, value in (extra or {}).items():
        if value is not None:
            claims[key] = value
    return create_access_token(claims, expires_delta=expires_delta)


def decode_session_token(token: str) -> dict[str, Any]:
    """Return the verified claims of ``token`` with ``sub`` converted to ``int``."""

    claims = decode_access_token(token)
    try:
        claims["sub"] = int(claims["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTokenError() from exc
    return claims


def generate_session_id() -> str:
    """Return an opaque identifier for a new guest session."""

    return str(uuid.uuid4())
