"""Ordering contract for calendrical values of differing precision.

Every :class:`ArbitraryPrecisionDate` exposes a ``year`` and an ordered tuple
of fields from coarsest to finest. Two values compare field by field over
the fields both of them have; a field missing on either side counts as
equal. A bare :class:`Year` therefore ties with every date inside that year,
which keeps mixed collections sortable but means ``compare_to(...) == 0``
does not imply equality. ``==`` stays plain value equality per variant.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta

from chronokit.core.enums import DayOfWeek, Month
from chronokit.core.errors import DateTimeArithmeticException, DateTimeFormatException, InvalidCalendarFieldError

_ISO_PATTERN = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?$")


def _check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"year must be an int, got {type(year).__name__}")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidCalendarFieldError(f"Invalid year {year}: expected a value in {MINYEAR}..{MAXYEAR}")
    return year


def _coerce_month(month: Month | int) -> Month:
    return month if isinstance(month, Month) else Month.of(month)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class ArbitraryPrecisionDate(ABC):
    """A calendrical value with at least a year, ordered against any other such value."""

    year: int

    @abstractmethod
    def precision_fields(self) -> tuple[int, ...]:
        """Numeric fields from coarsest (year) to finest."""

    def compare_to(self, other: "ArbitraryPrecisionDate") -> int:
        """Return -1, 0 or 1; fields absent on either operand are treated as equal."""

        for mine, theirs in zip(self.precision_fields(), other.precision_fields()):
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ArbitraryPrecisionDate):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ArbitraryPrecisionDate):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ArbitraryPrecisionDate):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ArbitraryPrecisionDate):
            return NotImplemented
        return self.compare_to(other) >= 0

    @classmethod
    def parse(cls, text: str) -> "ArbitraryPrecisionDate":
        """Parse ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` into the matching variant."""

        match = _ISO_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise DateTimeFormatException(f"Expected YYYY, YYYY-MM or YYYY-MM-DD, got {text!r}")
        year, month, day = (int(part) if part else None for part in match.group("year", "month", "day"))
        try:
            if month is None:
                parsed: ArbitraryPrecisionDate = Year(year)
            elif day is None:
                parsed = YearMonth(year, month)
            else:
                parsed = CalendarDate(year, month, day)
        except InvalidCalendarFieldError as exc:
            raise DateTimeFormatException(f"Invalid date {text!r}: {exc}", exc) from exc
        if cls is not ArbitraryPrecisionDate and not isinstance(parsed, cls):
            raise DateTimeFormatException(f"{text!r} is not a {cls.__name__}")
        return parsed


@dataclass(frozen=True, eq=True)
class Year(ArbitraryPrecisionDate):
    """A bare year; ordered purely by ``year``."""

    year: int

    def __post_init__(self) -> None:
        _check_year(self.year)

    def precision_fields(self) -> tuple[int, ...]:
        return (self.year,)

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self.year)

    def plus_years(self, years: int) -> "Year":
        try:
            return Year(self.year + years)
        except InvalidCalendarFieldError as exc:
            raise DateTimeArithmeticException(f"{self} plus {years} years is out of range", exc) from exc

    def at_month(self, month: Month | int) -> "YearMonth":
        return YearMonth(self.year, month)

    def __str__(self) -> str:
        return f"{self.year:04d}"


@dataclass(frozen=True, eq=True)
class YearMonth(ArbitraryPrecisionDate):
    """A month of a specific year."""

    year: int
    month: Month

    def __post_init__(self) -> None:
        _check_year(self.year)
        object.__setattr__(self, "month", _coerce_month(self.month))

    def precision_fields(self) -> tuple[int, ...]:
        return (self.year, self.month.number)

    @property
    def length_of_month(self) -> int:
        return self.month.length(is_leap_year(self.year))

    def plus_months(self, months: int) -> "YearMonth":
        total = self.year * 12 + self.month.ordinal + months
        try:
            return YearMonth(total // 12, total % 12 + 1)
        except InvalidCalendarFieldError as exc:
            raise DateTimeArithmeticException(f"{self} plus {months} months is out of range", exc) from exc

    def at_day(self, day: int) -> "CalendarDate":
        return CalendarDate(self.year, self.month, day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month.number:02d}"


@dataclass(frozen=True, eq=True)
class CalendarDate(ArbitraryPrecisionDate):
    """A full Gregorian calendar date."""

    year: int
    month: Month
    day: int

    def __post_init__(self) -> None:
        _check_year(self.year)
        object.__setattr__(self, "month", _coerce_month(self.month))
        if isinstance(self.day, bool) or not isinstance(self.day, int):
            raise TypeError(f"day must be an int, got {type(self.day).__name__}")
        length = self.month.length(is_leap_year(self.year))
        if not 1 <= self.day <= length:
            raise InvalidCalendarFieldError(
                f"Invalid day {self.day} for {self.month.name.title()} {self.year}: expected a value in 1..{length}"
            )

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month.number, self.day)

    def precision_fields(self) -> tuple[int, ...]:
        return (self.year, self.month.number, self.day)

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek.from_date(self.to_date())

    def plus_days(self, days: int) -> "CalendarDate":
        try:
            return CalendarDate.from_date(self.to_date() + timedelta(days=days))
        except OverflowError as exc:
            raise DateTimeArithmeticException(f"{self} plus {days} days is out of range", exc) from exc

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month.number:02d}-{self.day:02d}"
