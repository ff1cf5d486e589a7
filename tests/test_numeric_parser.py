from __future__ import annotations

import pytest

from calendarcombo.locales import BabelLocaleServices
from calendarcombo.services.numeric import parse_numeric
from calendarcombo.utils.dates import CivilDate

from conftest import FakeLocaleServices

PI_DAY = CivilDate.of(2015, 3, 14)


def test_locale_layout_long_and_short(fake_services):
    assert parse_numeric("03142015", "en_US", False, services=fake_services) == PI_DAY
    assert parse_numeric("031415", "en_US", False, services=fake_services) == PI_DAY
    assert parse_numeric("14032015", "de_DE", False, services=fake_services) == PI_DAY
    assert parse_numeric("140315", "de_DE", False, services=fake_services) == PI_DAY


def test_locale_layout_with_year_first(fake_services):
    assert parse_numeric("20150314", "sv_SE", False, services=fake_services) == PI_DAY
    assert parse_numeric("150314", "sv_SE", False, services=fake_services) == PI_DAY


def test_us_layout_rejects_day_first_input(fake_services):
    # month 14 is not a month and the US fallback is the same layout
    assert parse_numeric("14032015", "en_US", True, services=fake_services) is None


def test_eu_fallback_after_locale_layout_misses(fake_services):
    # yyyyMMdd reads month 20, so only the day-first fallback matches
    assert parse_numeric("14032015", "sv_SE", False, services=fake_services) is None
    assert parse_numeric("14032015", "sv_SE", True, services=fake_services) == PI_DAY


def test_us_fallback_after_locale_layout_misses():
    services = FakeLocaleServices({"en_US": "y-MM-dd"})
    assert parse_numeric("03142015", "en_US", False, services=services) is None
    assert parse_numeric("03142015", "en_US", True, services=services) == PI_DAY


def test_unusable_locale_pattern_goes_straight_to_fallback(fake_services):
    assert parse_numeric("14032015", "xx_XX", True, services=fake_services) == PI_DAY
    assert parse_numeric("14032015", "missing", True, services=fake_services) == PI_DAY
    assert parse_numeric("14032015", "missing", False, services=fake_services) is None


@pytest.mark.parametrize("text", ["0314201", "3142015", "0314", "031420155", "", "03/14/15", "12a456"])
def test_other_lengths_and_non_digits_do_not_match(fake_services, text):
    assert parse_numeric(text, "en_US", True, services=fake_services) is None


def test_numeric_parse_is_strict(fake_services):
    # a lenient parse would roll 02/30 into March
    assert parse_numeric("02302015", "en_US", True, services=fake_services) is None


def test_with_babel_locale_data():
    assert parse_numeric("03142015", "en_US") == PI_DAY
    assert parse_numeric("14032015", "de_DE") == PI_DAY
    assert parse_numeric("140315", "fr_FR") == PI_DAY


def test_us_fallback_for_lowercase_locale_id(monkeypatch):
    services = BabelLocaleServices(us_locale="en_US")
    monkeypatch.setattr(services, "short_pattern", lambda locale: "y-MM-dd")
    # year-first layout misses, so the month-first US fallback must be chosen
    assert parse_numeric("03142015", "en_us", True, services=services) == PI_DAY
    assert parse_numeric("031415", "EN-us", True, services=services) == PI_DAY
