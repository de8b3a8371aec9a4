"""Utilities for dealing with timezones and aware instants.

``zoneinfo`` is the timezone-rule provider; this module is the single place
where identifiers are resolved so that unknown names surface as
``IllegalTimeZoneException`` instead of a ``zoneinfo`` specific error.
"""
from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import DateTimeArithmeticException, IllegalTimeZoneException
from .types import Duration, Instant, TimeZoneLike

DEFAULT_TZ_NAME = "UTC"


def timezone_of(tz: TimeZoneLike | None = None) -> tzinfo:
    """Return the tzinfo for ``tz`` (an IANA name or a tzinfo), UTC when omitted."""

    if isinstance(tz, tzinfo):
        return tz
    target_name = tz or DEFAULT_TZ_NAME
    if target_name.upper() in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(target_name)
    except ZoneInfoNotFoundError as exc:
        raise IllegalTimeZoneException(f"Unknown timezone identifier: {target_name!r}", exc) from exc
    except ValueError as exc:
        # malformed keys such as absolute paths
        raise IllegalTimeZoneException(f"Invalid timezone identifier: {target_name!r}", exc) from exc


def now_utc() -> datetime:
    """Return the current UTC datetime with tzinfo."""

    return datetime.now(timezone.utc)


def require_aware(instant: Instant) -> Instant:
    """Reject naive datetimes; instants must carry an offset."""

    if not isinstance(instant, datetime):
        raise TypeError(f"Instant must be a datetime, got {type(instant).__name__}")
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError("Datetime must be timezone-aware to be used as an instant")
    return instant


def local_date(instant: Instant, tz: TimeZoneLike | None = None) -> date:
    """Calendar date of ``instant`` as observed in ``tz``."""

    return require_aware(instant).astimezone(timezone_of(tz)).date()


def shift_instant(instant: Instant, delta: Duration) -> Instant:
    """``instant + delta``, raising ``DateTimeArithmeticException`` past the datetime range."""

    try:
        return instant + delta
    except OverflowError as exc:
        raise DateTimeArithmeticException(f"Shifting {instant.isoformat()} by {delta} overflows", exc) from exc
