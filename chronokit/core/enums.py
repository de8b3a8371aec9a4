"""Enumerations shared across chronokit subsystems.

``DayOfWeek`` and ``Month`` are closed, ordered sets whose ordinal position
defines their ISO number (Monday = 1, January = 1). ``TextStyle`` tags the
rendering policy used by the display-name resolver. Values are the canonical
serialized names, so ``DayOfWeek("MONDAY")`` and YAML ``full_standalone``
round-trip without custom codecs.
"""
from __future__ import annotations

from datetime import date
from enum import Enum
from functools import cached_property

from .errors import DateTimeFormatException, InvalidCalendarFieldError


class _OrdinalEnum:
    """Ordering by declaration position rather than by serialized value."""

    @cached_property
    def ordinal(self) -> int:
        return type(self)._member_names_.index(self.name)

    def _check_comparable(self, other, op: str) -> None:
        # the str mixin would otherwise order by serialized name
        if type(other) is not type(self):
            raise TypeError(
                f"'{op}' not supported between instances of {type(self).__name__!r} and {type(other).__name__!r}"
            )

    def __lt__(self, other):
        self._check_comparable(other, "<")
        return self.ordinal < other.ordinal

    def __le__(self, other):
        self._check_comparable(other, "<=")
        return self.ordinal <= other.ordinal

    def __gt__(self, other):
        self._check_comparable(other, ">")
        return self.ordinal > other.ordinal

    def __ge__(self, other):
        self._check_comparable(other, ">=")
        return self.ordinal >= other.ordinal

    def display_name(self, text_style: "TextStyle | None" = None, locale=None, *, resolver=None) -> str:
        """Localized name, FULL_STANDALONE in the resolver's default locale unless given."""

        from chronokit.naming.resolver import default_resolver

        return (resolver or default_resolver()).display_name(self, text_style, locale)


def _check_number(kind: str, value: int, upper: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} number must be an int, got {type(value).__name__}")
    if not 1 <= value <= upper:
        raise InvalidCalendarFieldError(f"Invalid {kind} number {value}: expected a value in 1..{upper}")
    return value


class DayOfWeek(_OrdinalEnum, str, Enum):
    """Day of the week in ISO-8601 order, Monday first."""

    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"

    @property
    def iso_day_number(self) -> int:
        """ISO-8601 number of the day, 1 (Monday) through 7 (Sunday)."""

        return self.ordinal + 1

    @classmethod
    def of(cls, iso_day_number: int) -> "DayOfWeek":
        """Return the day with the given ISO number; no wraparound is applied."""

        return _ALL_DAYS[_check_number("ISO day", iso_day_number, 7) - 1]

    @classmethod
    def from_date(cls, value: date) -> "DayOfWeek":
        return cls.of(value.isoweekday())

    @classmethod
    def parse(cls, text: str) -> "DayOfWeek":
        """Parse the serialized form (``"MONDAY"``), ignoring case."""

        try:
            return cls(text.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise DateTimeFormatException(f"Unknown day of week: {text!r}", exc) from exc


class Month(_OrdinalEnum, str, Enum):
    """Month of the Gregorian year, January first."""

    JANUARY = "JANUARY"
    FEBRUARY = "FEBRUARY"
    MARCH = "MARCH"
    APRIL = "APRIL"
    MAY = "MAY"
    JUNE = "JUNE"
    JULY = "JULY"
    AUGUST = "AUGUST"
    SEPTEMBER = "SEPTEMBER"
    OCTOBER = "OCTOBER"
    NOVEMBER = "NOVEMBER"
    DECEMBER = "DECEMBER"

    @property
    def number(self) -> int:
        """Calendar number of the month, 1 (January) through 12 (December)."""

        return self.ordinal + 1

    def length(self, leap_year: bool) -> int:
        """Number of days in this month."""

        if self is Month.FEBRUARY:
            return 29 if leap_year else 28
        return 30 if self in (Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER) else 31

    @classmethod
    def of(cls, number: int) -> "Month":
        return _ALL_MONTHS[_check_number("month", number, 12) - 1]

    @classmethod
    def from_date(cls, value: date) -> "Month":
        return cls.of(value.month)

    @classmethod
    def parse(cls, text: str) -> "Month":
        """Parse the serialized form (``"JANUARY"``), ignoring case."""

        try:
            return cls(text.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise DateTimeFormatException(f"Unknown month: {text!r}", exc) from exc


_ALL_DAYS: tuple[DayOfWeek, ...] = tuple(DayOfWeek)
_ALL_MONTHS: tuple[Month, ...] = tuple(Month)


class TextStyle(str, Enum):
    """Length and grammatical context of a display name.

    Standalone forms are used when the name appears on its own (a calendar
    header), the other forms when it is embedded in a formatted date.
    """

    FULL = "full"
    FULL_STANDALONE = "full_standalone"
    SHORT = "short"
    SHORT_STANDALONE = "short_standalone"
    NARROW = "narrow"
    NARROW_STANDALONE = "narrow_standalone"

    @property
    def is_standalone(self) -> bool:
        return self.value.endswith("_standalone")

    @property
    def is_narrow(self) -> bool:
        return self in (TextStyle.NARROW, TextStyle.NARROW_STANDALONE)

    def as_standalone(self) -> "TextStyle":
        return self if self.is_standalone else TextStyle(f"{self.value}_standalone")

    def as_normal(self) -> "TextStyle":
        return TextStyle(self.value.removesuffix("_standalone"))

    @property
    def partner(self) -> "TextStyle":
        """The same length in the other grammatical context."""

        return self.as_normal() if self.is_standalone else self.as_standalone()
