"""Typed configuration models for chronokit.

The config subsystem relies on pydantic to validate YAML files and to
provide strongly-typed objects to the rest of the package: settings that
pick the default locale, text style and timezone, and external name tables.
"""
from __future__ import annotations

from datetime import tzinfo
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from chronokit.core.enums import TextStyle
from chronokit.core.errors import DateTimeFormatException, IllegalTimeZoneException
from chronokit.core.time_utils import timezone_of
from chronokit.naming.locale import Locale
from chronokit.naming.tables import DAY_OF_WEEK, MONTH, UNIT_SIZES


class CalendarSettings(BaseModel):
    """Defaults injected into resolvers and clocks.

    ``default_locale`` left empty means the platform locale. ``name_tables``
    lists extra YAML name tables, resolved relative to the settings file and
    consulted before the builtin names.
    """

    default_locale: Optional[str] = None
    default_text_style: TextStyle = TextStyle.FULL_STANDALONE
    timezone: str = Field("UTC")
    log_level: str = Field("INFO")
    name_tables: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @field_validator("default_locale")
    @classmethod
    def _check_locale(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        try:
            return Locale.parse(value).tag
        except DateTimeFormatException as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            timezone_of(value)
        except IllegalTimeZoneException as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    def locale(self) -> Optional[Locale]:
        return Locale.parse(self.default_locale) if self.default_locale else None

    def zone(self) -> tzinfo:
        return timezone_of(self.timezone)


class UnitNames(BaseModel):
    """Names of one unit (month or day of week) per text style."""

    full: Optional[List[str]] = None
    full_standalone: Optional[List[str]] = None
    short: Optional[List[str]] = None
    short_standalone: Optional[List[str]] = None
    narrow: Optional[List[str]] = None
    narrow_standalone: Optional[List[str]] = None

    model_config = ConfigDict(extra="forbid")

    def by_style(self) -> Dict[TextStyle, List[str]]:
        return {
            TextStyle(style): names
            for style, names in self.model_dump(exclude_none=True).items()
        }


class LocaleNamesConfig(BaseModel):
    """Names for one locale tag."""

    month: Optional[UnitNames] = None
    day_of_week: Optional[UnitNames] = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_sizes(self) -> "LocaleNamesConfig":
        for unit in (MONTH, DAY_OF_WEEK):
            names = getattr(self, unit)
            if names is None:
                continue
            for style, entries in names.by_style().items():
                if len(entries) != UNIT_SIZES[unit]:
                    raise ValueError(f"{unit}.{style.value} needs {UNIT_SIZES[unit]} names, got {len(entries)}")
        return self


class NameTableFile(BaseModel):
    """Root of a name-table YAML file: ``locales: {tag: {...}}``."""

    locales: Dict[str, LocaleNamesConfig]

    @field_validator("locales")
    @classmethod
    def _check_tags(cls, value: Dict[str, LocaleNamesConfig]) -> Dict[str, LocaleNamesConfig]:
        for tag in value:
            try:
                Locale.parse(tag)
            except DateTimeFormatException as exc:
                raise ValueError(str(exc)) from exc
        return value

    def to_table_data(self) -> Dict[str, Dict[str, Dict[TextStyle, List[str]]]]:
        data: Dict[str, Dict[str, Dict[TextStyle, List[str]]]] = {}
        for tag, names in self.locales.items():
            units = {}
            for unit in (MONTH, DAY_OF_WEEK):
                unit_names = getattr(names, unit)
                if unit_names is not None:
                    units[unit] = unit_names.by_style()
            data[tag] = units
        return data
