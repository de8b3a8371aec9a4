"""Locale identifiers used as keys into name tables."""
from __future__ import annotations

import locale as _platform_locale
import logging
import os
import re
from dataclasses import dataclass
from typing import Iterator

from chronokit.core.errors import DateTimeFormatException

logger = logging.getLogger("chronokit.naming")

_TAG_PATTERN = re.compile(r"^(?P<language>[A-Za-z]{2,3})(?:[-_](?P<region>[A-Za-z]{2}|\d{3}))?(?:[.@].*)?$")
_POSIX_NAMES = {"C", "POSIX"}


@dataclass(frozen=True)
class Locale:
    """Language plus optional region, normalized to ``en`` / ``US``."""

    language: str
    region: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", self.language.lower())
        if self.region is not None:
            object.__setattr__(self, "region", self.region.upper())

    @property
    def tag(self) -> str:
        return f"{self.language}-{self.region}" if self.region else self.language

    def fallbacks(self) -> Iterator["Locale"]:
        """This locale, then its bare language."""

        yield self
        if self.region:
            yield Locale(self.language)

    @classmethod
    def parse(cls, tag: str) -> "Locale":
        """Parse ``en``, ``en-US``, ``en_US`` or a POSIX name such as ``ru_RU.UTF-8``."""

        match = _TAG_PATTERN.match(tag.strip()) if isinstance(tag, str) else None
        if match is None:
            raise DateTimeFormatException(f"Malformed locale tag: {tag!r}")
        return cls(match.group("language"), match.group("region"))

    @classmethod
    def default(cls) -> "Locale":
        """Process default locale from the environment, ``en`` when unset or POSIX."""

        candidates = [os.environ.get(name) for name in ("LC_ALL", "LC_TIME", "LANG")]
        candidates.append(_platform_locale.getlocale(_platform_locale.LC_TIME)[0])
        for candidate in candidates:
            if not candidate or candidate.split(".")[0] in _POSIX_NAMES:
                continue
            try:
                return cls.parse(candidate)
            except DateTimeFormatException:
                logger.debug("Ignoring unparseable platform locale %r", candidate)
        return ENGLISH

    def __str__(self) -> str:
        return self.tag


ENGLISH = Locale("en")
