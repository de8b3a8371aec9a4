"""Calendrical primitives: clocks, weekdays, months and localized names.

The subpackages expose the contracts used by higher level date/time code:
``core`` holds enums and errors, ``clock`` the time sources, ``calendar`` the
ordering contract across date precisions and ``naming`` the display-name
resolver. ``config`` and ``telemetry`` carry settings and logging.
"""

from .calendar import ArbitraryPrecisionDate, CalendarDate, Year, YearMonth
from .clock import SYSTEM_CLOCK, Clock, SystemClock, TimeMark, TimeSource
from .core.enums import DayOfWeek, Month, TextStyle
from .core.errors import (
    ChronoError,
    DateTimeArithmeticException,
    DateTimeFormatException,
    IllegalTimeZoneException,
    InvalidCalendarFieldError,
)
from .naming import DisplayNameResolver, Locale, display_name

__all__ = [
    "ArbitraryPrecisionDate",
    "CalendarDate",
    "ChronoError",
    "Clock",
    "DateTimeArithmeticException",
    "DateTimeFormatException",
    "DayOfWeek",
    "DisplayNameResolver",
    "IllegalTimeZoneException",
    "InvalidCalendarFieldError",
    "Locale",
    "Month",
    "SYSTEM_CLOCK",
    "SystemClock",
    "TextStyle",
    "TimeMark",
    "TimeSource",
    "Year",
    "YearMonth",
    "display_name",
]
