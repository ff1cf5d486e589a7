from __future__ import annotations

import logging
import re
from typing import Optional

from calendarcombo.errors import DateParseError, InvalidDate, PatternError
from calendarcombo.locales import LocaleLike, LocaleServices, get_locale_services
from calendarcombo.utils.dates import CivilDate, promote_two_digit_year

from .formatter import DateFormat
from .patterns import locale_pattern_info

logger = logging.getLogger("calendarcombo.numeric")

DIGITS_RE = re.compile(r"[0-9]+")

# Pre-defined digit-only layouts keyed by input length
US_LAYOUTS = {6: "MMddyy", 8: "MMddyyyy"}
EU_LAYOUTS = {6: "ddMMyy", 8: "ddMMyyyy"}


def strict_attempt(text: str, pattern: str, locale: LocaleLike = None) -> Optional[CivilDate]:
    """Strict parse that reports a miss as None instead of raising."""
    try:
        return DateFormat(pattern, locale, lenient=False).parse(text)
    except (DateParseError, InvalidDate, PatternError):
        return None


def parse_numeric(
    text: str,
    locale: LocaleLike = None,
    us_eu_fallback: bool = True,
    *,
    services: Optional[LocaleServices] = None,
) -> Optional[CivilDate]:
    """Parse a digit-only date such as ``03142015``.

    The locale's own field order is tried first (short year for six digits,
    long year for eight). With ``us_eu_fallback`` the US month-first or the
    European day-first layout is tried next. Anything else is a miss (None).
    """
    if not text or not DIGITS_RE.fullmatch(text):
        return None
    length = len(text)
    if length not in (6, 8):
        logger.debug("Numeric input of length %d is not a date layout", length, extra={"locale": str(locale)})
        return None
    services = services or get_locale_services()

    parsed = None
    try:
        info = locale_pattern_info(services.short_pattern(locale), fields_only=True)
    except PatternError as exc:
        logger.debug("Skipping locale layout: %s", exc, extra={"locale": str(locale)})
    else:
        parsed = strict_attempt(text, info.for_length(length), locale)

    if parsed is None and us_eu_fallback:
        layouts = US_LAYOUTS if services.is_us(locale) else EU_LAYOUTS
        parsed = strict_attempt(text, layouts[length], locale)

    if parsed is None:
        return None
    return promote_two_digit_year(parsed)
