"""Name tables: the provider side of display-name resolution.

A table answers ``lookup(value, style, locale)`` with a string or ``None``.
``None`` only means "not at this style and locale"; the resolver decides
what to try next. Tables never degrade styles or locales themselves.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Protocol, Sequence, runtime_checkable

from chronokit.core.enums import DayOfWeek, Month, TextStyle

from .locale import Locale

MONTH = "month"
DAY_OF_WEEK = "day_of_week"
UNIT_SIZES = {MONTH: 12, DAY_OF_WEEK: 7}

NameValue = DayOfWeek | Month
LocaleNames = Mapping[str, Mapping[TextStyle, Sequence[str]]]

# Locale-independent single letters, used when no table has narrow data.
NARROW_FALLBACK: dict[str, tuple[str, ...]] = {
    MONTH: ("J", "F", "M", "A", "M", "J", "J", "A", "S", "O", "N", "D"),
    DAY_OF_WEEK: ("M", "T", "W", "T", "F", "S", "S"),
}


def unit_of(value: object) -> str | None:
    if isinstance(value, Month):
        return MONTH
    if isinstance(value, DayOfWeek):
        return DAY_OF_WEEK
    return None


def narrow_fallback(value: object) -> str | None:
    unit = unit_of(value)
    if unit is None:
        return None
    return NARROW_FALLBACK[unit][value.ordinal]


@runtime_checkable
class NameTable(Protocol):
    def lookup(self, value: NameValue, style: TextStyle, locale: Locale) -> str | None: ...


class StaticNameTable:
    """In-memory table keyed by locale tag, unit and style.

    ``data`` looks like ``{"ru": {"month": {TextStyle.FULL: [...12 names]}}}``.
    Name lists must cover the whole unit; partial tables are rejected.
    """

    def __init__(self, data: Mapping[str, LocaleNames]) -> None:
        self._data: dict[str, dict[str, dict[TextStyle, tuple[str, ...]]]] = {}
        for tag, units in data.items():
            key = Locale.parse(tag).tag
            target = self._data.setdefault(key, {})
            for unit, styles in units.items():
                if unit not in UNIT_SIZES:
                    raise ValueError(f"Unknown unit {unit!r} for locale {tag!r}")
                for style, names in styles.items():
                    names = tuple(names)
                    if len(names) != UNIT_SIZES[unit]:
                        raise ValueError(
                            f"{tag}/{unit}/{TextStyle(style).value} needs {UNIT_SIZES[unit]} names, got {len(names)}"
                        )
                    target.setdefault(unit, {})[TextStyle(style)] = names

    @property
    def locales(self) -> list[str]:
        return sorted(self._data)

    def lookup(self, value: NameValue, style: TextStyle, locale: Locale) -> str | None:
        unit = unit_of(value)
        names = self._data.get(locale.tag, {}).get(unit, {}).get(style) if unit else None
        if names is None:
            return None
        return names[value.ordinal]


class ChainedNameTable:
    """The first table that resolves an entry wins."""

    def __init__(self, tables: Iterable[NameTable]) -> None:
        self.tables = tuple(tables)

    def lookup(self, value: NameValue, style: TextStyle, locale: Locale) -> str | None:
        for table in self.tables:
            name = table.lookup(value, style, locale)
            if name is not None:
                return name
        return None
