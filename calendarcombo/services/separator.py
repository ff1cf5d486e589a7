from __future__ import annotations

import logging
from typing import Iterable, Optional

from calendarcombo.errors import (
    EMPTY_INPUT,
    NO_SEPARATOR_FOUND,
    NON_NUMERIC_TOKEN,
    TOKEN_COUNT_MISMATCH,
    UNKNOWN_FIELD_LETTER,
    InvalidDate,
    ParseFailed,
)
from calendarcombo.locales import LocaleLike
from calendarcombo.utils.dates import TWO_DIGIT_YEAR_OFFSET, CivilDate

from .numeric import DIGITS_RE
from .patterns import field_component

logger = logging.getLogger("calendarcombo.separator")

DEFAULT_SEPARATORS = ("/", "-", ".")


def _split(value: str, separator: str) -> list[str]:
    # Runs of separators collapse; whitespace inside a token is dropped
    return ["".join(part.split()) for part in value.split(separator) if part]


def slash_parse(
    text: str,
    pattern: str,
    separators: Iterable[str] = DEFAULT_SEPARATORS,
    locale: LocaleLike = None,
    *,
    today: Optional[CivilDate] = None,
) -> CivilDate:
    """Split ``text`` and ``pattern`` on the first separator found in ``text``
    and load each value into the field named by the pattern.

    One pattern serves every separator in ``separators``: ``yyyy/M/d``
    accepts ``2015-3-14`` and ``2015.3.14`` alike. Months are one-based.
    Fields the pattern does not name default to ``today`` (host local date).
    Time-of-day, week and weekday fields are accepted but do not affect the
    result. Two-digit years are promoted to 20xx.

    Raises ParseFailed for structural problems and InvalidDate when the loaded
    fields do not form a real date.
    """
    if not text or not text.strip():
        raise ParseFailed(EMPTY_INPUT, text)
    seps = [str(s) for s in separators if s]
    active = next((ch for ch in text if ch in seps), None)
    if active is None:
        raise ParseFailed(NO_SEPARATOR_FOUND, text)

    rewritten = pattern
    for sep in seps:
        if sep != active:
            rewritten = rewritten.replace(sep, active)

    values = _split(text, active)
    kinds = _split(rewritten, active)
    if len(values) != len(kinds):
        raise ParseFailed(TOKEN_COUNT_MISMATCH, text)

    loaded: dict[str, int] = {}
    for value, kind in zip(values, kinds):
        component = field_component(kind)
        if component is None:
            raise ParseFailed(UNKNOWN_FIELD_LETTER, text)
        if not DIGITS_RE.fullmatch(value):
            raise ParseFailed(NON_NUMERIC_TOKEN, text)
        if component == "date":
            component = "day_of_month"
        try:
            loaded[component] = int(value)
        except ValueError:
            # digit runs past the interpreter's int conversion limit
            raise ParseFailed(NON_NUMERIC_TOKEN, text) from None

    base = today or CivilDate.today()
    year = loaded.get("year", base.year)
    if year < 100:
        year += TWO_DIGIT_YEAR_OFFSET
    if loaded.get("era") == 0:
        year = 1 - year

    if "day_of_year" in loaded and "month" not in loaded and "day_of_month" not in loaded:
        day_of_year = loaded["day_of_year"]
        if not 1 <= day_of_year <= CivilDate.of(year, 12, 31).day_of_year():
            raise InvalidDate(year, 1, day_of_year)
        result = CivilDate.from_day_of_year(year, day_of_year)
    else:
        result = CivilDate.of(year, loaded.get("month", base.month), loaded.get("day_of_month", base.day))
    logger.debug("Separator parse of %r on %r", text, active, extra={"locale": str(locale)})
    return result
