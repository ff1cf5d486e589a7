from .errors import (
    CalendarComboError,
    DateParseError,
    InvalidDate,
    ParseFailed,
    PatternError,
)
from .locales import BabelLocaleServices, LocaleServices, get_locale_services
from .logging_utils import configure_json_logging, maybe_enable_json_logging
from .services.calculator import days_between, is_today, same_day
from .services.formatter import DateFormat, format_date, parse_lenient, parse_strict
from .services.numeric import parse_numeric
from .services.patterns import field_component, locale_pattern_info, normalize_pattern
from .services.separator import slash_parse
from .services.tolerant import parse_best_effort, parse_locale_short
from .settings import get_settings, reset_settings_cache
from .utils.dates import CivilDate, coerce_civil, promote_two_digit_year

__all__ = [
    "CivilDate",
    "coerce_civil",
    "promote_two_digit_year",
    "days_between",
    "is_today",
    "same_day",
    "DateFormat",
    "format_date",
    "parse_strict",
    "parse_lenient",
    "parse_best_effort",
    "parse_locale_short",
    "parse_numeric",
    "slash_parse",
    "normalize_pattern",
    "locale_pattern_info",
    "field_component",
    "LocaleServices",
    "BabelLocaleServices",
    "get_locale_services",
    "CalendarComboError",
    "ParseFailed",
    "InvalidDate",
    "PatternError",
    "DateParseError",
    "get_settings",
    "reset_settings_cache",
    "configure_json_logging",
    "maybe_enable_json_logging",
]
