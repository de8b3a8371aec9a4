"""Shared type aliases for readability and contract enforcement.

Instants are aware ``datetime`` objects and durations are ``timedelta``
objects; the aliases below name those roles in signatures so clock and
calendar code reads in terms of the concepts it works with.
"""
from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import TypeAlias, Union

Instant: TypeAlias = datetime
Duration: TypeAlias = timedelta
TimeZoneLike: TypeAlias = Union[tzinfo, str]
