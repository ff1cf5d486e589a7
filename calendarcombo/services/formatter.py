from __future__ import annotations

import datetime as dt
from typing import Optional

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.dates import format_datetime as babel_format_datetime

from calendarcombo.errors import (
    EMPTY_INPUT,
    EXHAUSTED_STRATEGIES,
    NON_NUMERIC_TOKEN,
    UNKNOWN_FIELD_LETTER,
    CalendarComboError,
    DateParseError,
    ParseFailed,
    PatternError,
)
from calendarcombo.locales import LocaleLike, babel_locale
from calendarcombo.utils.dates import CivilDate, coerce_civil, is_leap_year, promote_two_digit_year

from .patterns import FIELD, LITERAL, Token, tokenize

SUPPORTED_LETTERS = frozenset("GyMLdDE")
_TEXT_WIDTHS = ("wide", "abbreviated", "narrow")
# Defaults for fields the pattern does not carry
_EPOCH = (1970, 1, 1)


def _is_numeric(tok: Token) -> bool:
    if tok.kind != FIELD:
        return False
    if tok.letter in ("M", "L"):
        return tok.width <= 2
    return tok.letter in ("y", "d", "D")


def _is_separator(ch: str) -> bool:
    return not ch.isalnum() and not ch.isspace()


def _skip_ws(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


class DateFormat:
    """Formats and parses civil dates against one LDML pattern.

    Lenient mode mirrors a forgiving host parser: out-of-range fields roll
    over, whitespace is flexible, any punctuation stands in for another and
    trailing text is ignored. Strict mode demands an exact, complete match
    that forms a real date.
    """

    def __init__(self, pattern: str, locale: LocaleLike = None, *, lenient: bool = True) -> None:
        self.pattern = pattern
        self.locale = locale
        self.lenient = lenient
        self.tokens = tokenize(pattern)
        if not any(tok.kind == FIELD for tok in self.tokens):
            raise PatternError(pattern, "no field letters")
        self._babel: Optional[Locale] = None

    def _locale_data(self) -> Locale:
        if self._babel is None:
            self._babel = babel_locale(self.locale)
        return self._babel

    def unsupported_fields(self) -> tuple[str, ...]:
        """Fields that can be formatted but not parsed, e.g. ``HH``."""
        return tuple(tok.text for tok in self.tokens if tok.kind == FIELD and tok.letter not in SUPPORTED_LETTERS)

    def format(self, value) -> str:
        d = coerce_civil(value)
        if not 1 <= d.year <= 9999:
            raise CalendarComboError(f"year {d.year} cannot be formatted")
        if self.unsupported_fields():
            # Time-of-day fields render as midnight
            moment = dt.datetime.combine(d.to_date(), dt.time(), tzinfo=dt.timezone.utc)
            return babel_format_datetime(moment, format=self.pattern, tzinfo=dt.timezone.utc, locale=self._locale_data())
        return babel_format_date(d.to_date(), format=self.pattern, locale=self._locale_data())

    def parse(self, text: str) -> CivilDate:
        unsupported = self.unsupported_fields()
        if unsupported:
            raise PatternError(self.pattern, f"cannot parse field {unsupported[0]!r}")
        fields: dict[str, int] = {}
        pos = 0
        for i, tok in enumerate(self.tokens):
            if tok.kind == LITERAL:
                pos = self._match_literal(text, pos, tok.text)
                continue
            if self.lenient:
                pos = _skip_ws(text, pos)
            letter = "M" if tok.letter == "L" else tok.letter
            if _is_numeric(tok):
                nxt = self.tokens[i + 1] if i + 1 < len(self.tokens) else None
                limit = tok.width if nxt is not None and _is_numeric(nxt) else None
                fields[letter], pos = self._read_number(text, pos, limit)
            elif letter == "M":
                fields["M"], pos = self._read_name(text, pos, self._month_names())
            elif letter == "E":
                fields["E"], pos = self._read_name(text, pos, self._day_names())
            else:
                fields["G"], pos = self._read_name(text, pos, self._era_names())
        if not self.lenient and pos != len(text):
            raise DateParseError(text, pos)
        return self._resolve(text, fields)

    def _match_literal(self, text: str, pos: int, literal: str) -> int:
        for ch in literal:
            if self.lenient:
                pos = _skip_ws(text, pos)
                if ch.isspace():
                    continue
            if pos < len(text) and text[pos] == ch:
                pos += 1
                continue
            if self.lenient and pos < len(text) and _is_separator(ch) and _is_separator(text[pos]):
                pos += 1
                continue
            raise DateParseError(text, pos)
        return pos

    @staticmethod
    def _read_number(text: str, pos: int, limit: Optional[int]) -> tuple[int, int]:
        end = pos
        while end < len(text) and "0" <= text[end] <= "9" and (limit is None or end - pos < limit):
            end += 1
        if end == pos:
            raise DateParseError(text, pos, NON_NUMERIC_TOKEN)
        try:
            return int(text[pos:end]), end
        except ValueError:
            # digit runs past the interpreter's int conversion limit
            raise DateParseError(text, pos) from None

    @staticmethod
    def _read_name(text: str, pos: int, names: dict[str, int]) -> tuple[int, int]:
        # Longest match wins so "June" is not read as "Jun" + "e"
        for name in sorted(names, key=len, reverse=True):
            if text[pos:pos + len(name)].casefold() == name:
                return names[name], pos + len(name)
        raise DateParseError(text, pos)

    def _names(self, table: dict, contexts: tuple[str, ...]) -> dict[str, int]:
        out: dict[str, int] = {}
        for context in contexts:
            for width in _TEXT_WIDTHS:
                for key, name in (table.get(context, {}).get(width) or {}).items():
                    if name:
                        out.setdefault(str(name).casefold(), int(key))
        return out

    def _month_names(self) -> dict[str, int]:
        return self._names(self._locale_data().months, ("format", "stand-alone"))

    def _day_names(self) -> dict[str, int]:
        return self._names(self._locale_data().days, ("format", "stand-alone"))

    def _era_names(self) -> dict[str, int]:
        eras = self._locale_data().eras
        out: dict[str, int] = {}
        for width in _TEXT_WIDTHS:
            for key, name in (eras.get(width) or {}).items():
                if name:
                    out.setdefault(str(name).casefold(), int(key))
        return out

    def _resolve(self, text: str, fields: dict[str, int]) -> CivilDate:
        year = fields.get("y", _EPOCH[0])
        if fields.get("G", 1) == 0:
            year = 1 - year
        if "D" in fields and "M" not in fields and "d" not in fields:
            day_of_year = fields["D"]
            limit = 366 if is_leap_year(year) else 365
            if not self.lenient and not 1 <= day_of_year <= limit:
                raise DateParseError(text, len(text))
            result = CivilDate.from_day_of_year(year, day_of_year)
        else:
            month = fields.get("M", _EPOCH[1])
            day = fields.get("d", _EPOCH[2])
            if self.lenient:
                result = CivilDate.rolled(year, month, day)
            else:
                result = CivilDate.of(year, month, day)
        if not self.lenient and "E" in fields and result.weekday() != fields["E"]:
            raise DateParseError(text, len(text))
        return result


def format_date(value, pattern: str, locale: LocaleLike = None) -> str:
    """Render a date for display. The date is formatted as given."""
    return DateFormat(pattern, locale, lenient=True).format(value)


def _parse_public(text: str, pattern: str, locale: LocaleLike, lenient: bool) -> CivilDate:
    if not text or not text.strip():
        raise ParseFailed(EMPTY_INPUT, text)
    fmt = DateFormat(pattern, locale, lenient=lenient)
    if fmt.unsupported_fields():
        raise ParseFailed(UNKNOWN_FIELD_LETTER, text)
    try:
        parsed = fmt.parse(text.strip())
    except DateParseError as exc:
        reason = exc.reason if exc.reason == NON_NUMERIC_TOKEN else EXHAUSTED_STRATEGIES
        raise ParseFailed(reason, text) from exc
    return promote_two_digit_year(parsed)


def parse_strict(text: str, pattern: str, locale: LocaleLike = None) -> CivilDate:
    """Exact parse against one pattern.

    Raises ParseFailed on mismatch and InvalidDate when the fields do not
    form a real date.
    """
    return _parse_public(text, pattern, locale, lenient=False)


def parse_lenient(text: str, pattern: str, locale: LocaleLike = None) -> CivilDate:
    return _parse_public(text, pattern, locale, lenient=True)
