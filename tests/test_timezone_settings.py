"""Tests for the application timezone setting and timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.config import Settings
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
)


def test_app_timezone_accepts_iana_names() -> None:
    assert Settings(secret_key="x", app_timezone=" America/Lima ").app_timezone == (
        "America/Lima"
    )
    assert Settings(secret_key="x", app_timezone="").app_timezone == "UTC"


@pytest.mark.parametrize("value", ["Mars/Olympus", "UTC-05:00"])
def test_app_timezone_rejects_unknown_zones(value) -> None:
    with pytest.raises(ValueError):
        Settings(secret_key="x", app_timezone=value)


def test_naive_values_are_read_as_app_local() -> None:
    stored = datetime(2024, 5, 1, 12, 0)

    aware = ensure_app_timezone(stored)

    assert aware.tzinfo is get_app_timezone()
    assert aware.replace(tzinfo=None) == stored


def test_aware_values_are_stored_in_app_time() -> None:
    lima = timezone(timedelta(hours=-5))

    stored = ensure_app_naive_datetime(datetime(2024, 5, 1, 7, 0, tzinfo=lima))

    assert stored == datetime(2024, 5, 1, 12, 0)
    assert ensure_app_naive_datetime(None) is None
    assert now_in_app_naive_datetime().tzinfo is None
