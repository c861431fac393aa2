"""Timestamp helpers bound to the ``APP_TIMEZONE`` setting.

Columns are stored as naive ``DATETIME`` values in the application timezone and
handed back to callers as aware datetimes.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from app.config import get_settings


@lru_cache(maxsize=1)
def get_app_timezone() -> ZoneInfo:
    """Return the IANA zone configured through ``APP_TIMEZONE``."""

    return ZoneInfo(get_settings().app_timezone)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current wall-clock time in the app timezone, as stored in the database."""

    return datetime.now(tz=get_app_timezone()).replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the app timezone.

    Naive values are read from the database and are already app-local.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Convert ``value`` to the naive app-local form used for columns and filters."""

    localized = ensure_app_timezone(value)
    return localized.replace(tzinfo=None) if localized is not None else None
