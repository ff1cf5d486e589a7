from __future__ import annotations

import logging
from typing import Optional, Protocol, Union

from babel import Locale, UnknownLocaleError

from .errors import PatternError
from .settings import get_settings

logger = logging.getLogger("calendarcombo.locales")

LocaleLike = Union[str, Locale, None]


class LocaleServices(Protocol):
    def short_pattern(self, locale: LocaleLike) -> str:
        ...

    def default_pattern(self) -> str:
        ...

    def is_us(self, locale: LocaleLike) -> bool:
        ...


def normalize_locale(locale: LocaleLike) -> str:
    """``en-US``, ``en_US`` and ``Locale('en', 'US')`` all become ``en_US``.

    None resolves to the configured default locale.
    """
    if locale is None:
        return get_settings().default_locale
    if isinstance(locale, Locale):
        return str(locale)
    val = str(locale).strip().replace("-", "_")
    return val or get_settings().default_locale


def babel_locale(locale: LocaleLike) -> Locale:
    code = normalize_locale(locale)
    try:
        return Locale.parse(code)
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        logger.warning("Unknown locale %s: %s", code, exc, extra={"locale": code})
        raise PatternError(code, "unknown locale") from exc


class BabelLocaleServices:
    """Locale services backed by Babel's CLDR data."""

    def __init__(self, default_locale: Optional[str] = None, us_locale: Optional[str] = None) -> None:
        settings = get_settings()
        self._default_locale = normalize_locale(default_locale or settings.default_locale)
        self._us_locale = normalize_locale(us_locale or settings.us_locale)

    def short_pattern(self, locale: LocaleLike) -> str:
        return babel_locale(locale).date_formats["short"].pattern

    def default_pattern(self) -> str:
        return self.short_pattern(self._default_locale)

    def is_us(self, locale: LocaleLike) -> bool:
        # Locale ids compare case-insensitively ("en_us" is en_US)
        return normalize_locale(locale).casefold() == self._us_locale.casefold()


def get_locale_services() -> LocaleServices:
    return BabelLocaleServices()
