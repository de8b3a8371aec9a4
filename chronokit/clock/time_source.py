"""Monotonic-measurement view over clocks.

A :class:`TimeMark` pairs a captured instant with the clock that produced
it. Elapsed time is always measured by re-querying that same clock, so marks
taken from clocks with different epochs or skews are never mixed.
"""
from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from chronokit.core.time_utils import require_aware, shift_instant
from chronokit.core.types import Duration, Instant

from .clock import Clock, ManualClock

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class TimeMark:
    """Immutable reading of ``clock`` taken at ``instant``."""

    instant: Instant
    clock: Clock

    def elapsed_now(self) -> Duration:
        return self.clock.now() - self.instant

    def has_passed_now(self) -> bool:
        return self.elapsed_now() >= timedelta(0)

    def has_not_passed_now(self) -> bool:
        return not self.has_passed_now()

    def plus(self, duration: Duration) -> "TimeMark":
        return TimeMark(shift_instant(self.instant, duration), self.clock)

    def minus(self, duration: Duration) -> "TimeMark":
        return TimeMark(shift_instant(self.instant, -duration), self.clock)

    def __add__(self, duration: Duration) -> "TimeMark":
        if not isinstance(duration, timedelta):
            return NotImplemented
        return self.plus(duration)

    def __sub__(self, other):
        if isinstance(other, timedelta):
            return self.minus(other)
        if isinstance(other, TimeMark):
            self._check_same_clock(other)
            return self.instant - other.instant
        return NotImplemented

    def __lt__(self, other: "TimeMark") -> bool:
        if not isinstance(other, TimeMark):
            return NotImplemented
        self._check_same_clock(other)
        return self.instant < other.instant

    def __le__(self, other: "TimeMark") -> bool:
        if not isinstance(other, TimeMark):
            return NotImplemented
        self._check_same_clock(other)
        return self.instant <= other.instant

    def __gt__(self, other: "TimeMark") -> bool:
        if not isinstance(other, TimeMark):
            return NotImplemented
        return other < self

    def __ge__(self, other: "TimeMark") -> bool:
        if not isinstance(other, TimeMark):
            return NotImplemented
        return other <= self

    def _check_same_clock(self, other: "TimeMark") -> None:
        if other.clock is not self.clock:
            raise ValueError(
                f"Time marks from different clocks are not comparable: {self.clock!r} and {other.clock!r}"
            )


class TimeSource(ABC):
    """Something that can take time marks."""

    @abstractmethod
    def mark_now(self) -> TimeMark:
        """Capture the current reading."""

    def as_clock(self, origin: Instant) -> "TimeSourceClock":
        """Clock reading ``origin`` now and advancing with this source."""

        return TimeSourceClock(self, origin)


class ClockTimeSource(TimeSource):
    """Time source whose marks read ``clock``."""

    def __init__(self, clock: Clock) -> None:
        self.clock = clock

    def mark_now(self) -> TimeMark:
        return TimeMark(self.clock.now(), self.clock)

    def __repr__(self) -> str:
        return f"ClockTimeSource({self.clock!r})"


class _MonotonicClock(Clock):
    # readings are only meaningful relative to each other
    def now(self) -> Instant:
        return _EPOCH + timedelta(microseconds=time.monotonic_ns() // 1000)


class MonotonicTimeSource(ClockTimeSource):
    """Time source immune to wall-clock adjustments, backed by ``time.monotonic_ns``."""

    def __init__(self) -> None:
        super().__init__(_MonotonicClock())


class ManualTimeSource(ClockTimeSource):
    """Time source advanced explicitly; the counterpart of :class:`ManualClock` for marks."""

    def __init__(self) -> None:
        super().__init__(ManualClock(_EPOCH))

    def advance(self, delta: Duration) -> None:
        self.clock.advance(delta)

    def __iadd__(self, delta: Duration) -> "ManualTimeSource":
        self.advance(delta)
        return self


class TimeSourceClock(Clock):
    """Clock driven by a time source: ``origin`` plus the time elapsed since creation."""

    def __init__(self, time_source: TimeSource, origin: Instant) -> None:
        self._origin = require_aware(origin)
        self._mark = time_source.mark_now()

    def now(self) -> Instant:
        return shift_instant(self._origin, self._mark.elapsed_now())

    def __repr__(self) -> str:
        return f"TimeSourceClock(origin={self._origin.isoformat()})"
