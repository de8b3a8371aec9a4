"""Display-name resolution for weekdays and months.

The resolver walks an ordered list of (style, locale) attempts against an
injected :class:`NameTable`, lazily, and returns the first hit:

* narrow styles: the requested style, its standalone/in-phrase partner,
  then the single-letter fallback table;
* other styles: the requested style, its partner, then FULL_STANDALONE,
  FULL, SHORT_STANDALONE and SHORT, then the builtin English name of the
  same length (full or abbreviated).

Each style is tried at the requested locale and then at its bare language.
The English step only runs once the locale has nothing at any style.
"""
from __future__ import annotations

import logging
from typing import Iterator

from chronokit.core.enums import TextStyle
from chronokit.core.errors import DateTimeFormatException

from .builtin import BUILTIN_NAMES
from .locale import ENGLISH, Locale
from .tables import NameTable, NameValue, narrow_fallback

logger = logging.getLogger("chronokit.naming")

_DEGRADATION = (
    TextStyle.FULL_STANDALONE,
    TextStyle.FULL,
    TextStyle.SHORT_STANDALONE,
    TextStyle.SHORT,
)


def style_chain(style: TextStyle) -> tuple[TextStyle, ...]:
    """Styles tried for a request, most specific first."""

    if style.is_narrow:
        return (style, style.partner)
    chain = [style, style.partner]
    chain.extend(candidate for candidate in _DEGRADATION if candidate not in chain)
    return tuple(chain)


class DisplayNameResolver:
    """Resolve localized names through a name table with style degradation.

    ``default_locale`` and ``default_style`` apply when a call omits them; the
    locale defaults to the platform locale read once at construction.
    """

    def __init__(
        self,
        table: NameTable | None = None,
        *,
        default_locale: Locale | str | None = None,
        default_style: TextStyle = TextStyle.FULL_STANDALONE,
    ) -> None:
        self.table = table if table is not None else BUILTIN_NAMES
        self.default_locale = _as_locale(default_locale) if default_locale is not None else Locale.default()
        self.default_style = TextStyle(default_style)

    def attempts(self, style: TextStyle, locale: Locale) -> Iterator[tuple[TextStyle, Locale]]:
        for candidate in style_chain(style):
            for target in locale.fallbacks():
                yield candidate, target

    def display_name(
        self,
        value: NameValue,
        text_style: TextStyle | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        style = TextStyle(text_style) if text_style is not None else self.default_style
        target = _as_locale(locale) if locale is not None else self.default_locale
        for candidate, candidate_locale in self.attempts(style, target):
            try:
                name = self.table.lookup(value, candidate, candidate_locale)
            except Exception as exc:
                raise DateTimeFormatException(
                    f"Name table failed for {value!r} ({candidate.value}, {candidate_locale})", exc
                ) from exc
            if name is not None:
                if (candidate, candidate_locale) != (style, target):
                    logger.debug(
                        "Display name degraded",
                        extra={"value": str(value), "requested": style.value, "resolved": candidate.value,
                               "locale": str(candidate_locale)},
                    )
                return name
        if style.is_narrow:
            name = narrow_fallback(value)
            source = "narrow fallback table"
        else:
            # builtin English carries FULL and SHORT only
            name = BUILTIN_NAMES.lookup(value, style.as_normal(), ENGLISH)
            source = "English fallback"
        if name is None:
            raise DateTimeFormatException(f"No display name for {value!r} ({style.value}, {target})")
        logger.debug(
            "Display name from %s",
            source,
            extra={"value": str(value), "requested": style.value, "locale": str(target)},
        )
        return name


def _as_locale(locale: Locale | str) -> Locale:
    return locale if isinstance(locale, Locale) else Locale.parse(locale)


_default_resolver: DisplayNameResolver | None = None


def default_resolver() -> DisplayNameResolver:
    """Resolver over the builtin table and the platform locale, created on first use."""

    global _default_resolver
    if _default_resolver is None:
        _default_resolver = DisplayNameResolver()
    return _default_resolver


def display_name(
    value: NameValue,
    text_style: TextStyle = TextStyle.FULL_STANDALONE,
    locale: Locale | str | None = None,
    *,
    resolver: DisplayNameResolver | None = None,
) -> str:
    """Localized name of a weekday or month."""

    return (resolver or default_resolver()).display_name(value, text_style, locale)
