from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable

from chronokit.clock import FixedClock
from chronokit.config import CalendarSettings, bootstrap
from chronokit.core.enums import Month, TextStyle
from chronokit.naming import Locale

LATE_EVENING_UTC = datetime(2024, 3, 10, 22, 0, tzinfo=timezone.utc)


def test_bootstrap_should_apply_log_level(write_yaml: Callable[[str, str], Path]) -> None:
    path = write_yaml(
        "chronokit.yml",
        """
        default_locale: en
        log_level: debug
        """,
    )
    context = bootstrap(path, logger_name="chronokit_test_bootstrap_level")
    assert context.settings.log_level == "DEBUG"
    assert context.logger.name == "chronokit_test_bootstrap_level"
    assert context.logger.level == logging.DEBUG


def test_bootstrap_should_write_log_file_when_log_dir_given(tmp_path: Path) -> None:
    settings = CalendarSettings(default_locale="en", log_level="WARNING")
    context = bootstrap(settings, log_dir=tmp_path / "logs", logger_name="chronokit_test_bootstrap_file")
    assert context.logger.level == logging.WARNING
    assert (tmp_path / "logs" / "chronokit.jsonl").exists()


def test_context_today_uses_configured_timezone() -> None:
    clock = FixedClock(LATE_EVENING_UTC)
    sydney = bootstrap(
        CalendarSettings(default_locale="en", timezone="Australia/Sydney"),
        clock=clock,
        logger_name="chronokit_test_bootstrap_tz",
    )
    utc = bootstrap(CalendarSettings(default_locale="en"), clock=clock, logger_name="chronokit_test_bootstrap_tz")
    assert sydney.today() == date(2024, 3, 11)
    assert utc.today() == date(2024, 3, 10)


def test_context_display_name_uses_configured_locale_and_style() -> None:
    settings = CalendarSettings(default_locale="de", default_text_style=TextStyle.SHORT_STANDALONE)
    context = bootstrap(settings, logger_name="chronokit_test_bootstrap_names")
    assert context.resolver.default_locale == Locale("de")
    assert context.display_name(Month.MARCH) == "Mär"
    assert context.display_name(Month.MARCH, TextStyle.FULL) == "März"
