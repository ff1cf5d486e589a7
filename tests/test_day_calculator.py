from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo

import pytest

from calendarcombo.services.calculator import days_between, is_today, same_day
from calendarcombo.utils.dates import CivilDate


def test_days_between_leap_february():
    assert days_between(CivilDate.of(2020, 2, 28), CivilDate.of(2020, 3, 1), "en_US") == 2
    assert days_between(CivilDate.of(2019, 2, 28), CivilDate.of(2019, 3, 1), "en_US") == 1


def test_days_between_century():
    assert days_between(CivilDate.of(1900, 1, 1), CivilDate.of(2000, 1, 1), "en_US") == 36524


def test_days_between_is_signed():
    assert days_between(CivilDate.of(2015, 3, 14), CivilDate.of(2015, 3, 4)) == -10


def test_days_between_ignores_julian_cutover():
    # 1582-10-04 and 1582-10-15 are 11 days apart in the proleptic calendar
    assert days_between(dt.date(1582, 10, 4), dt.date(1582, 10, 15)) == 11


def test_days_between_drops_time_of_day():
    start = dt.datetime(2015, 3, 14, 23, 59)
    end = dt.datetime(2015, 3, 15, 0, 1)
    assert days_between(start, end) == 1
    assert days_between(end, start) == -1


@pytest.mark.parametrize(
    "start,end,expected",
    [
        # spring forward: the 14th has only 23 hours
        ((2021, 3, 13, 23, 30), (2021, 3, 14, 23, 30), 1),
        ((2021, 3, 14, 0, 30), (2021, 3, 15, 0, 30), 1),
        # fall back: the 7th has 25 hours
        ((2021, 11, 6, 12, 0), (2021, 11, 8, 0, 15), 2),
        ((2021, 11, 7, 0, 0), (2021, 11, 7, 23, 59), 0),
    ],
)
def test_days_between_across_dst(start, end, expected):
    zone = ZoneInfo("America/New_York")
    a = dt.datetime(*start, tzinfo=zone)
    b = dt.datetime(*end, tzinfo=zone)
    assert days_between(a, b, "en_US") == expected


def test_is_today_uses_injected_clock():
    now = dt.datetime(2015, 3, 14, 9, 26)
    assert is_today(CivilDate.of(2015, 3, 14), "en_US", now=now)
    assert not is_today(CivilDate.of(2014, 3, 14), "en_US", now=now)
    assert not is_today(CivilDate.of(2015, 3, 15), "en_US", now=now)


def test_is_today_with_host_clock():
    assert is_today(dt.date.today())
    assert not is_today(dt.date.today() - dt.timedelta(days=400))


def test_same_day():
    assert same_day(CivilDate.of(2015, 3, 14), dt.datetime(2015, 3, 14, 18, 0))
    assert not same_day(CivilDate.of(2015, 3, 14), CivilDate.of(2016, 3, 14))
    # Same day-of-year, different year
    assert not same_day(CivilDate.of(2015, 1, 1), CivilDate.of(2016, 1, 1))
