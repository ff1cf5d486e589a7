from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is importable as a module path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from calendarcombo.errors import PatternError
from calendarcombo.settings import reset_settings_cache


class FakeLocaleServices:
    """In-memory locale services so parser tests do not depend on CLDR releases."""

    def __init__(self, patterns: dict[str, str], default: str = "en_US", us_locale: str = "en_US") -> None:
        self.patterns = dict(patterns)
        self.default = default
        self.us_locale = us_locale
        self.calls: list[str] = []

    def short_pattern(self, locale) -> str:
        self.calls.append(str(locale))
        try:
            return self.patterns[str(locale)]
        except KeyError:
            raise PatternError(locale, "unknown locale") from None

    def default_pattern(self) -> str:
        return self.short_pattern(self.default)

    def is_us(self, locale) -> bool:
        return str(locale) == self.us_locale


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for key in (
        "CALENDARCOMBO_DEFAULT_LOCALE",
        "CALENDARCOMBO_US_LOCALE",
        "CALENDARCOMBO_JSON_LOGS",
        "CALENDARCOMBO_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def fake_services():
    """US, German and ISO-style short patterns as CLDR ships them."""

    return FakeLocaleServices(
        {
            "en_US": "M/d/yy",
            "de_DE": "dd.MM.yy",
            "en_GB": "dd/MM/y",
            "sv_SE": "y-MM-dd",
            "xx_XX": "'no fields here'",
        }
    )
