"""YAML loaders for the config subsystem.

Each helper here consumes one YAML file, validates it via models.py and
returns typed objects to the caller. ``build_resolver`` turns validated
settings into a ready :class:`DisplayNameResolver`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from chronokit.core.errors import ConfigurationError
from chronokit.naming.builtin import BUILTIN_NAMES
from chronokit.naming.resolver import DisplayNameResolver
from chronokit.naming.tables import ChainedNameTable, StaticNameTable

from .models import CalendarSettings, NameTableFile

logger = logging.getLogger("chronokit.config")

_DEFAULT_SETTINGS_PATH = Path("config") / "chronokit.yml"


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Malformed YAML in {path}", exc) from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_settings(path: Path | str = _DEFAULT_SETTINGS_PATH) -> CalendarSettings:
    """Load chronokit.yml (default locale, text style, timezone, log level, name tables)."""

    path = Path(path)
    data = _read_yaml(path)
    try:
        settings = CalendarSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}", exc) from exc
    # name tables are relative to the settings file
    resolved = [str((path.parent / entry).resolve()) for entry in settings.name_tables]
    settings = settings.model_copy(update={"name_tables": resolved})
    logger.debug("Settings loaded", extra={"path": str(path), "name_tables": resolved})
    return settings


def load_name_table(path: Path | str) -> StaticNameTable:
    """Load a YAML name table (``locales: {tag: {month: {...}, day_of_week: {...}}}``)."""

    path = Path(path)
    data = _read_yaml(path)
    try:
        parsed = NameTableFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid name table in {path}", exc) from exc
    table = StaticNameTable(parsed.to_table_data())
    logger.debug("Name table loaded", extra={"path": str(path), "locales": table.locales})
    return table


def build_resolver(settings: CalendarSettings) -> DisplayNameResolver:
    """Resolver using the configured tables (first) and the builtin names (last)."""

    tables = [load_name_table(entry) for entry in settings.name_tables]
    table = ChainedNameTable([*tables, BUILTIN_NAMES]) if tables else BUILTIN_NAMES
    return DisplayNameResolver(
        table,
        default_locale=settings.locale(),
        default_style=settings.default_text_style,
    )
