"""Wire validated settings into logging, a resolver and a zoned clock view."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from chronokit.clock import SYSTEM_CLOCK, Clock
from chronokit.core.enums import TextStyle
from chronokit.naming.resolver import DisplayNameResolver
from chronokit.naming.tables import NameValue
from chronokit.telemetry.logging_setup import configure_logging

from .loader import build_resolver, load_settings
from .models import CalendarSettings


@dataclass(frozen=True)
class CalendarContext:
    """Settings-driven defaults: names in the configured locale, dates in the configured zone."""

    settings: CalendarSettings
    resolver: DisplayNameResolver
    clock: Clock
    logger: logging.Logger

    def today(self) -> date:
        return self.clock.today_in(self.settings.zone())

    def display_name(self, value: NameValue, text_style: Optional[TextStyle] = None) -> str:
        return self.resolver.display_name(value, text_style)


def bootstrap(
    settings: CalendarSettings | Path | str | None = None,
    *,
    clock: Clock = SYSTEM_CLOCK,
    log_dir: Path | None = None,
    logger_name: str = "chronokit",
) -> CalendarContext:
    """Configure logging at ``settings.log_level`` and build the resolver.

    ``settings`` may be a loaded :class:`CalendarSettings` or a path to a
    settings file; ``None`` loads the default ``config/chronokit.yml``.
    """

    if not isinstance(settings, CalendarSettings):
        settings = load_settings(settings) if settings is not None else load_settings()
    logger = configure_logging(level=settings.log_level, log_dir=log_dir, logger_name=logger_name)
    resolver = build_resolver(settings)
    logger.info(
        "Calendar context ready",
        extra={"locale": str(resolver.default_locale), "timezone": settings.timezone, "log_level": settings.log_level},
    )
    return CalendarContext(settings=settings, resolver=resolver, clock=clock, logger=logger)
