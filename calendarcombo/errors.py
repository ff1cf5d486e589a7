from __future__ import annotations

from typing import Optional

EMPTY_INPUT = "empty_input"
NO_SEPARATOR_FOUND = "no_separator_found"
TOKEN_COUNT_MISMATCH = "token_count_mismatch"
UNKNOWN_FIELD_LETTER = "unknown_field_letter"
NON_NUMERIC_TOKEN = "non_numeric_token"
EXHAUSTED_STRATEGIES = "exhausted_strategies"

PARSE_FAILURE_REASONS = frozenset(
    {
        EMPTY_INPUT,
        NO_SEPARATOR_FOUND,
        TOKEN_COUNT_MISMATCH,
        UNKNOWN_FIELD_LETTER,
        NON_NUMERIC_TOKEN,
        EXHAUSTED_STRATEGIES,
    }
)


class CalendarComboError(ValueError):
    """Base class for every error raised by calendarcombo."""


class ParseFailed(CalendarComboError):
    """No parse produced a date. ``reason`` is one of PARSE_FAILURE_REASONS."""

    def __init__(self, reason: str, text: Optional[str] = None) -> None:
        if reason not in PARSE_FAILURE_REASONS:
            raise ValueError(f"unknown parse failure reason: {reason!r}")
        self.reason = reason
        self.text = text
        super().__init__(f"could not parse {text!r}: {reason}" if text is not None else reason)


class InvalidDate(CalendarComboError):
    """Fields were parsed but do not form a real civil date (e.g. Feb 30)."""

    def __init__(self, year: int, month: int, day: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"invalid civil date: {year:04d}-{month:02d}-{day:02d}")


class PatternError(CalendarComboError):
    """A date pattern (or the locale supplying it) cannot be used."""

    def __init__(self, pattern: object, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"unusable pattern {pattern!r}: {detail}")


class DateParseError(CalendarComboError):
    """Input did not match a pattern. Raised by DateFormat.parse only;
    public entry points convert it."""

    def __init__(self, text: str, position: int, reason: str = EXHAUSTED_STRATEGIES) -> None:
        self.text = text
        self.position = position
        self.reason = reason
        super().__init__(f"unparseable date {text!r} at position {position}")
