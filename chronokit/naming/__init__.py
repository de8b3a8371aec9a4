"""Locales, name tables and display-name resolution."""
from .builtin import BUILTIN_NAMES
from .locale import ENGLISH, Locale
from .resolver import DisplayNameResolver, default_resolver, display_name, style_chain
from .tables import NARROW_FALLBACK, ChainedNameTable, NameTable, StaticNameTable, narrow_fallback

__all__ = [
    "BUILTIN_NAMES",
    "ChainedNameTable",
    "DisplayNameResolver",
    "ENGLISH",
    "Locale",
    "NARROW_FALLBACK",
    "NameTable",
    "StaticNameTable",
    "default_resolver",
    "display_name",
    "narrow_fallback",
    "style_chain",
]
