from __future__ import annotations

import datetime as dt

import pytest

hypothesis = pytest.importorskip("hypothesis")
st = pytest.importorskip("hypothesis.strategies")

from calendarcombo.services.calculator import days_between, same_day
from calendarcombo.utils.dates import CivilDate

civil_dates = st.dates(min_value=dt.date(1, 1, 1), max_value=dt.date(9998, 12, 31)).map(CivilDate.from_date)


@hypothesis.given(a=civil_dates, b=civil_dates)
def test_days_between_antisymmetric(a, b):
    assert days_between(a, b) == -days_between(b, a)


@hypothesis.given(a=civil_dates)
def test_days_between_identity_and_successor(a):
    assert days_between(a, a) == 0
    assert days_between(a, a.plus_days(1)) == 1


@hypothesis.given(a=civil_dates, b=civil_dates)
def test_days_between_matches_stdlib(a, b):
    assert days_between(a, b) == (b.to_date() - a.to_date()).days


@hypothesis.given(a=civil_dates, b=civil_dates)
def test_same_day_iff_zero_distance(a, b):
    assert same_day(a, b) == (days_between(a, b) == 0 and a.year == b.year)


@hypothesis.given(days=st.integers(min_value=-3_000_000, max_value=3_000_000))
def test_ordinal_round_trip(days):
    assert CivilDate.from_ordinal(days).ordinal() == days
