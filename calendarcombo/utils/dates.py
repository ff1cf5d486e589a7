from __future__ import annotations

import datetime as dt
import functools
import re

from pydantic import BaseModel, ConfigDict, model_validator

from calendarcombo.errors import InvalidDate

TWO_DIGIT_YEAR_OFFSET = 2000

_ISO_RE = re.compile(r"^\s*(-?\d{1,})-(\d{1,2})-(\d{1,2})\s*$")
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_civil(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian (year, month, day).

    Uses 400-year eras (146097 days) with March-based years so the leap day
    lands at the end of each computational year.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


@functools.total_ordering
class CivilDate(BaseModel):
    """A (year, month, day) in the proleptic Gregorian calendar.

    Years use astronomical numbering (year 0 is 1 BC). Instances are always
    real calendar dates; build them with ``CivilDate.of`` to get an
    ``InvalidDate`` instead of a pydantic ValidationError on bad input.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int

    @model_validator(mode="after")
    def _check_real_date(self) -> "CivilDate":
        if not is_valid_civil(self.year, self.month, self.day):
            raise ValueError(f"invalid civil date: {self.year}-{self.month}-{self.day}")
        return self

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "CivilDate":
        year, month, day = int(year), int(month), int(day)
        if not is_valid_civil(year, month, day):
            raise InvalidDate(year, month, day)
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_ordinal(cls, days: int) -> "CivilDate":
        y, m, d = civil_from_days(int(days))
        return cls(year=y, month=m, day=d)

    @classmethod
    def rolled(cls, year: int, month: int, day: int) -> "CivilDate":
        """Lenient construction: out-of-range months and days carry over."""
        year += (month - 1) // 12
        month = (month - 1) % 12 + 1
        return cls.from_ordinal(days_from_civil(year, month, 1) + day - 1)

    @classmethod
    def from_day_of_year(cls, year: int, day_of_year: int) -> "CivilDate":
        return cls.from_ordinal(days_from_civil(year, 1, 1) + day_of_year - 1)

    @classmethod
    def from_date(cls, value: dt.date) -> "CivilDate":
        return cls(year=value.year, month=value.month, day=value.day)

    @classmethod
    def today(cls) -> "CivilDate":
        """Current civil date in the host's local time zone."""
        return cls.from_date(dt.date.today())

    def ordinal(self) -> int:
        return days_from_civil(self.year, self.month, self.day)

    def plus_days(self, days: int) -> "CivilDate":
        return CivilDate.from_ordinal(self.ordinal() + days)

    def day_of_year(self) -> int:
        return self.ordinal() - days_from_civil(self.year, 1, 1) + 1

    def weekday(self) -> int:
        # 1970-01-01 was a Thursday
        return (self.ordinal() + 3) % 7

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CivilDate):
            return NotImplemented
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"


def promote_two_digit_year(value: CivilDate) -> CivilDate:
    """Interpret years 0..99 as 2000..2099."""
    if 0 <= value.year < 100:
        return CivilDate.of(value.year + TWO_DIGIT_YEAR_OFFSET, value.month, value.day)
    return value


def coerce_civil(value) -> CivilDate:
    """Accept CivilDate, date, datetime or an ISO string.

    Datetimes keep only their wall-clock date, which pins every input to the
    same time of day before differencing.
    """
    if isinstance(value, CivilDate):
        return value
    if isinstance(value, dt.datetime):
        return CivilDate.from_date(value.date())
    if isinstance(value, dt.date):
        return CivilDate.from_date(value)
    if isinstance(value, str):
        m = _ISO_RE.match(value)
        if m:
            return CivilDate.of(*map(int, m.groups()))
    raise TypeError(f"cannot interpret {value!r} as a civil date")
