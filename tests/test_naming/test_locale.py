from __future__ import annotations

import pytest

from chronokit.core.errors import DateTimeFormatException
from chronokit.naming import ENGLISH, Locale


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("en", Locale("en")),
        ("en-US", Locale("en", "US")),
        ("en_us", Locale("en", "US")),
        ("ru_RU.UTF-8", Locale("ru", "RU")),
        ("es-419", Locale("es", "419")),
        ("DE", Locale("de")),
    ],
)
def test_parse_normalizes_tags(tag: str, expected: Locale) -> None:
    assert Locale.parse(tag) == expected


@pytest.mark.parametrize("tag", ["", "english", "e", "en-USA-x"])
def test_parse_rejects_malformed_tags(tag: str) -> None:
    with pytest.raises(DateTimeFormatException):
        Locale.parse(tag)


def test_fallbacks_drop_region() -> None:
    assert list(Locale("pt", "BR").fallbacks()) == [Locale("pt", "BR"), Locale("pt")]
    assert list(Locale("pt").fallbacks()) == [Locale("pt")]
    assert Locale("pt", "br").tag == "pt-BR"


def test_default_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LC_ALL", "fr_CA.UTF-8")
    assert Locale.default() == Locale("fr", "CA")


def test_default_skips_posix_locales(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LC_ALL", "C.UTF-8")
    monkeypatch.setenv("LC_TIME", "POSIX")
    monkeypatch.setenv("LANG", "pl_PL.UTF-8")
    assert Locale.default() == Locale("pl", "PL")


def test_default_falls_back_to_english(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LC_ALL", "LC_TIME", "LANG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("chronokit.naming.locale._platform_locale.getlocale", lambda category: (None, None))
    assert Locale.default() == ENGLISH
