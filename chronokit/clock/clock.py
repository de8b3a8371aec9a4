"""Clock implementations: the system clock and deterministic test clocks.

Domain code asks an injected :class:`Clock` for the current instant instead
of calling ``datetime.now()`` directly, so tests can substitute a fixed or
manually advanced clock without touching process-wide state.
"""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING

from chronokit.core.time_utils import local_date, require_aware, shift_instant
from chronokit.core.types import Duration, Instant, TimeZoneLike

if TYPE_CHECKING:
    from .time_source import ClockTimeSource


class Clock(ABC):
    """Source of the current instant.

    ``now()`` must be safe to call concurrently from several threads without
    external locking.
    """

    @abstractmethod
    def now(self) -> Instant:
        """Return the current instant as an aware datetime."""

    def as_time_source(self) -> "ClockTimeSource":
        """Expose this clock as a time source for elapsed-time measurement."""

        from .time_source import ClockTimeSource

        return ClockTimeSource(self)

    def today_in(self, tz: TimeZoneLike | None = None) -> date:
        """Calendar date of ``now()`` in ``tz`` (UTC when omitted)."""

        return local_date(self.now(), tz)


class SystemClock(Clock):
    """Clock reading the platform wall time."""

    def now(self) -> Instant:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


SYSTEM_CLOCK = SystemClock()


class FixedClock(Clock):
    """Clock that always returns the same instant."""

    def __init__(self, instant: Instant) -> None:
        self._instant = require_aware(instant)

    def now(self) -> Instant:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


class ManualClock(Clock):
    """Test clock that only moves when told to.

    ``now()`` returns the same value on repeated calls until :meth:`advance`
    or :meth:`set` is called.
    """

    def __init__(self, instant: Instant | None = None) -> None:
        self._instant = require_aware(instant or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))
        self._lock = threading.Lock()

    def now(self) -> Instant:
        with self._lock:
            return self._instant

    def set(self, instant: Instant) -> None:
        require_aware(instant)
        with self._lock:
            self._instant = instant

    def advance(self, delta: Duration) -> Instant:
        """Move the clock by ``delta`` (may be negative) and return the new instant."""

        with self._lock:
            self._instant = shift_instant(self._instant, delta)
            return self._instant

    def __iadd__(self, delta: Duration) -> "ManualClock":
        self.advance(delta)
        return self

    def __isub__(self, delta: Duration) -> "ManualClock":
        self.advance(-delta)
        return self


class OffsetClock(Clock):
    """Another clock shifted by a constant offset."""

    def __init__(self, base: Clock, offset: Duration = timedelta(0)) -> None:
        self.base = base
        self.offset = offset

    def now(self) -> Instant:
        return shift_instant(self.base.now(), self.offset)

    def __repr__(self) -> str:
        return f"OffsetClock({self.base!r}, {self.offset!r})"
