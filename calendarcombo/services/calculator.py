from __future__ import annotations

import datetime as dt
from typing import Optional

from calendarcombo.locales import LocaleLike
from calendarcombo.utils.dates import CivilDate, coerce_civil


def days_between(start, end, locale: LocaleLike = None) -> int:
    """Signed whole days from ``start`` to ``end`` (``end - start``).

    Both sides are proleptic Gregorian civil dates; datetimes lose their
    time of day first, so DST shifts cannot cause an off-by-one. ``locale``
    only selects the calendar, which is always Gregorian here.
    """
    return coerce_civil(end).ordinal() - coerce_civil(start).ordinal()


def _year_and_day(value) -> tuple[int, int]:
    d = coerce_civil(value)
    return d.year, d.day_of_year()


def is_today(value, locale: LocaleLike = None, *, now: Optional[dt.datetime] = None) -> bool:
    """True when ``value`` falls on today's date in the host's local time zone."""
    today = CivilDate.from_date(now.date()) if now is not None else CivilDate.today()
    return _year_and_day(value) == _year_and_day(today)


def same_day(a, b) -> bool:
    return _year_and_day(a) == _year_and_day(b)
