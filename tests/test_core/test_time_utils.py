from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfoNotFoundError

import pytest

from chronokit.core.errors import DateTimeArithmeticException, IllegalTimeZoneException
from chronokit.core.time_utils import local_date, now_utc, require_aware, shift_instant, timezone_of


def test_timezone_of_defaults_to_utc() -> None:
    assert timezone_of() is timezone.utc
    assert timezone_of("UTC") is timezone.utc


def test_timezone_of_passes_tzinfo_through() -> None:
    tz = timezone(timedelta(hours=3))
    assert timezone_of(tz) is tz


def test_timezone_of_should_resolve_iana_names() -> None:
    tz = timezone_of("Europe/Berlin")
    assert datetime(2024, 7, 1, tzinfo=tz).utcoffset() == timedelta(hours=2)


def test_timezone_of_should_raise_for_unknown_identifier() -> None:
    with pytest.raises(IllegalTimeZoneException) as excinfo:
        timezone_of("Mars/Olympus_Mons")
    assert "Mars/Olympus_Mons" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, ZoneInfoNotFoundError)


def test_require_aware_should_reject_naive_datetimes() -> None:
    with pytest.raises(ValueError):
        require_aware(datetime(2024, 1, 1))
    assert now_utc().tzinfo is timezone.utc


def test_local_date_depends_on_zone() -> None:
    instant = datetime(2024, 1, 1, 23, 30, tzinfo=timezone.utc)
    assert local_date(instant) == date(2024, 1, 1)
    assert local_date(instant, "Asia/Tokyo") == date(2024, 1, 2)
    assert local_date(instant, "America/New_York") == date(2024, 1, 1)


def test_shift_instant_adds_delta() -> None:
    instant = datetime(2024, 2, 28, 23, 30, tzinfo=timezone.utc)
    assert shift_instant(instant, timedelta(hours=1)) == datetime(2024, 2, 29, 0, 30, tzinfo=timezone.utc)
    assert shift_instant(instant, -timedelta(days=1)) == datetime(2024, 2, 27, 23, 30, tzinfo=timezone.utc)


def test_shift_instant_should_raise_arithmetic_exception_on_overflow() -> None:
    instant = datetime(1, 1, 1, tzinfo=timezone.utc)
    with pytest.raises(DateTimeArithmeticException) as excinfo:
        shift_instant(instant, -timedelta(seconds=1))
    assert isinstance(excinfo.value.cause, OverflowError)
    assert "0001-01-01" in str(excinfo.value)
