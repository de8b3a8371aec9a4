from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

from chronokit.clock import ManualClock, ManualTimeSource
from chronokit.naming import DisplayNameResolver, Locale, StaticNameTable
from chronokit.naming.builtin import BUILTIN_NAMES


@pytest.fixture
def base_instant() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def manual_clock(base_instant: datetime) -> ManualClock:
    return ManualClock(base_instant)


@pytest.fixture
def manual_time_source() -> ManualTimeSource:
    return ManualTimeSource()


@pytest.fixture
def english_resolver() -> DisplayNameResolver:
    return DisplayNameResolver(BUILTIN_NAMES, default_locale=Locale("en", "US"))


@pytest.fixture
def empty_resolver() -> DisplayNameResolver:
    return DisplayNameResolver(StaticNameTable({}), default_locale=Locale("en"))


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write
