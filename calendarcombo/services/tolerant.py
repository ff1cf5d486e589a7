"""Best-effort parsing of user-typed dates.

Each strategy is a function ``(text, locale, services) -> CivilDate | None``.
They run in order and the first date wins; a strategy that does not match
returns None and never raises.

1. ``locale_short``: the locale's short-date pattern, lenient.
2. ``locale_short_long_year``: same pattern with ``yy`` widened to ``yyyy``.
3. ``default_short``: the host default short-date pattern, lenient.
4. ``digits_only``: all-digit input, strict default pattern, then the
   numeric parser with US/EU fallback.
5. ``digit_salvage``: input with other characters, stripped to its digits and
   handed to the numeric parser.

Lenient strategies roll out-of-range fields over (month 13 becomes January of
the next year); the first attempt of ``digits_only`` is strict so that an
ambiguous digit run is not silently reinterpreted.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from calendarcombo.errors import (
    EMPTY_INPUT,
    EXHAUSTED_STRATEGIES,
    DateParseError,
    InvalidDate,
    ParseFailed,
    PatternError,
)
from calendarcombo.locales import LocaleLike, LocaleServices, get_locale_services, normalize_locale
from calendarcombo.utils.dates import CivilDate, promote_two_digit_year

from .formatter import DateFormat
from .numeric import DIGITS_RE, parse_numeric, strict_attempt
from .patterns import widen_year

logger = logging.getLogger("calendarcombo.tolerant")

Strategy = Callable[[str, LocaleLike, LocaleServices], Optional[CivilDate]]


def _lenient_attempt(text: str, pattern: str, locale: LocaleLike) -> Optional[CivilDate]:
    try:
        return DateFormat(pattern, locale, lenient=True).parse(text)
    except (DateParseError, InvalidDate, PatternError):
        return None


def _locale_pattern(locale: LocaleLike, services: LocaleServices) -> Optional[str]:
    try:
        return services.short_pattern(locale)
    except PatternError:
        return None


def _default_pattern(services: LocaleServices) -> Optional[str]:
    try:
        return services.default_pattern()
    except PatternError:
        return None


def locale_short(text: str, locale: LocaleLike, services: LocaleServices) -> Optional[CivilDate]:
    pattern = _locale_pattern(locale, services)
    if pattern is None:
        return None
    return _lenient_attempt(text, pattern, locale)


def locale_short_long_year(text: str, locale: LocaleLike, services: LocaleServices) -> Optional[CivilDate]:
    pattern = _locale_pattern(locale, services)
    if pattern is None or "yyyy" in pattern:
        return None
    widened = widen_year(pattern)
    if widened == pattern:
        return None
    return _lenient_attempt(text, widened, locale)


def default_short(text: str, locale: LocaleLike, services: LocaleServices) -> Optional[CivilDate]:
    pattern = _default_pattern(services)
    if pattern is None:
        return None
    return _lenient_attempt(text, pattern, locale)


def digits_only(text: str, locale: LocaleLike, services: LocaleServices) -> Optional[CivilDate]:
    if not DIGITS_RE.fullmatch(text):
        return None
    pattern = _default_pattern(services)
    if pattern is not None:
        parsed = strict_attempt(text, pattern, locale)
        if parsed is not None:
            return parsed
    return parse_numeric(text, locale, True, services=services)


def digit_salvage(text: str, locale: LocaleLike, services: LocaleServices) -> Optional[CivilDate]:
    if DIGITS_RE.fullmatch(text):
        return None
    digits = "".join(ch for ch in text if "0" <= ch <= "9")
    if not digits:
        return None
    return parse_numeric(digits, locale, True, services=services)


STRATEGIES: tuple[tuple[str, Strategy], ...] = (
    ("locale_short", locale_short),
    ("locale_short_long_year", locale_short_long_year),
    ("default_short", default_short),
    ("digits_only", digits_only),
    ("digit_salvage", digit_salvage),
)


def parse_best_effort(
    text: str,
    locale: LocaleLike = None,
    *,
    services: Optional[LocaleServices] = None,
) -> CivilDate:
    """Parse ``text`` with the first strategy that yields a date.

    Raises ParseFailed("empty_input") for blank input and
    ParseFailed("exhausted_strategies") when nothing matched.
    """
    value = (text or "").strip()
    if not value:
        raise ParseFailed(EMPTY_INPUT, text)
    services = services or get_locale_services()
    locale_id = normalize_locale(locale)
    for name, strategy in STRATEGIES:
        parsed = strategy(value, locale_id, services)
        if parsed is not None:
            logger.debug("Parsed %r with %s", value, name, extra={"strategy": name, "locale": locale_id})
            return promote_two_digit_year(parsed)
        logger.debug("Strategy %s did not match %r", name, value, extra={"strategy": name, "locale": locale_id})
    raise ParseFailed(EXHAUSTED_STRATEGIES, text)


def parse_locale_short(
    text: str,
    locale: LocaleLike = None,
    *,
    services: Optional[LocaleServices] = None,
) -> CivilDate:
    """Lenient parse against the locale's short-date pattern only."""
    value = (text or "").strip()
    if not value:
        raise ParseFailed(EMPTY_INPUT, text)
    services = services or get_locale_services()
    parsed = locale_short(value, normalize_locale(locale), services)
    if parsed is None:
        raise ParseFailed(EXHAUSTED_STRATEGIES, text)
    return promote_two_digit_year(parsed)
