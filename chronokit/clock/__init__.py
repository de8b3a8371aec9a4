"""Clocks, time sources and time marks."""
from .clock import SYSTEM_CLOCK, Clock, FixedClock, ManualClock, OffsetClock, SystemClock
from .time_source import (
    ClockTimeSource,
    ManualTimeSource,
    MonotonicTimeSource,
    TimeMark,
    TimeSource,
    TimeSourceClock,
)

__all__ = [
    "Clock",
    "ClockTimeSource",
    "FixedClock",
    "ManualClock",
    "ManualTimeSource",
    "MonotonicTimeSource",
    "OffsetClock",
    "SYSTEM_CLOCK",
    "SystemClock",
    "TimeMark",
    "TimeSource",
    "TimeSourceClock",
]
