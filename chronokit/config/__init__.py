"""Configuration loading and validation package."""

from .bootstrap import CalendarContext, bootstrap
from .loader import build_resolver, load_name_table, load_settings
from .models import CalendarSettings, LocaleNamesConfig, NameTableFile, UnitNames

__all__ = [
    "CalendarContext",
    "CalendarSettings",
    "LocaleNamesConfig",
    "NameTableFile",
    "UnitNames",
    "bootstrap",
    "build_resolver",
    "load_name_table",
    "load_settings",
]
