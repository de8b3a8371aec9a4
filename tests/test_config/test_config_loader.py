from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from chronokit.config.loader import build_resolver, load_name_table, load_settings
from chronokit.core.enums import DayOfWeek, Month, TextStyle
from chronokit.core.errors import ConfigurationError
from chronokit.naming import Locale

UKRAINIAN_TABLE = """
locales:
  uk:
    month:
      full_standalone: [січень, лютий, березень, квітень, травень, червень, липень, серпень, вересень, жовтень, листопад, грудень]
      full: [січня, лютого, березня, квітня, травня, червня, липня, серпня, вересня, жовтня, листопада, грудня]
    day_of_week:
      short: [пн, вт, ср, чт, пт, сб, нд]
"""


def test_load_settings_should_parse_valid_yaml(write_yaml: Callable[[str, str], Path]) -> None:
    path = write_yaml(
        "chronokit.yml",
        """
        default_locale: de-AT
        default_text_style: short
        timezone: Europe/Vienna
        log_level: warning
        """,
    )
    settings = load_settings(path)
    assert settings.locale() == Locale("de", "AT")
    assert settings.default_text_style is TextStyle.SHORT
    assert settings.timezone == "Europe/Vienna"
    assert settings.log_level == "WARNING"


def test_load_settings_accepts_blank_file(write_yaml: Callable[[str, str], Path]) -> None:
    settings = load_settings(write_yaml("chronokit.yml", ""))
    assert settings.default_text_style is TextStyle.FULL_STANDALONE


def test_load_settings_should_raise_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yml")


def test_load_settings_should_wrap_validation_errors(write_yaml: Callable[[str, str], Path]) -> None:
    path = write_yaml("chronokit.yml", "timezone: Nowhere/Special\n")
    with pytest.raises(ConfigurationError) as excinfo:
        load_settings(path)
    assert excinfo.value.cause is not None


def test_load_settings_should_reject_non_mapping_root(write_yaml: Callable[[str, str], Path]) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(write_yaml("chronokit.yml", "- just\n- a list\n"))


def test_load_settings_should_wrap_yaml_errors(write_yaml: Callable[[str, str], Path]) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(write_yaml("chronokit.yml", "default_locale: [unclosed\n"))


def test_load_name_table_should_parse_locales(write_yaml: Callable[[str, str], Path]) -> None:
    table = load_name_table(write_yaml("uk.yml", UKRAINIAN_TABLE))
    assert table.locales == ["uk"]
    assert table.lookup(Month.MARCH, TextStyle.FULL, Locale("uk")) == "березня"
    assert table.lookup(DayOfWeek.SUNDAY, TextStyle.SHORT, Locale("uk")) == "нд"
    assert table.lookup(DayOfWeek.SUNDAY, TextStyle.FULL, Locale("uk")) is None


def test_load_name_table_should_reject_wrong_sizes(write_yaml: Callable[[str, str], Path]) -> None:
    path = write_yaml(
        "bad.yml",
        """
        locales:
          uk:
            day_of_week:
              short: [пн, вт]
        """,
    )
    with pytest.raises(ConfigurationError):
        load_name_table(path)


def test_build_resolver_should_chain_configured_tables(write_yaml: Callable[[str, str], Path]) -> None:
    write_yaml("uk.yml", UKRAINIAN_TABLE)
    settings = load_settings(
        write_yaml(
            "chronokit.yml",
            """
            default_locale: uk-UA
            name_tables: [uk.yml]
            """,
        )
    )
    resolver = build_resolver(settings)
    assert resolver.default_locale == Locale("uk", "UA")
    assert resolver.display_name(Month.JANUARY) == "січень"
    assert resolver.display_name(Month.JANUARY, TextStyle.FULL) == "січня"
    assert resolver.display_name(Month.JANUARY, TextStyle.FULL, "en") == "January"
    assert resolver.display_name(Month.JANUARY, TextStyle.NARROW) == "J"


def test_build_resolver_without_tables_uses_builtin_names() -> None:
    from chronokit.config.models import CalendarSettings

    resolver = build_resolver(CalendarSettings(default_locale="fr", default_text_style="full"))
    assert resolver.display_name(DayOfWeek.FRIDAY) == "vendredi"
