from __future__ import annotations

from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from calendarcombo.errors import PatternError

LITERAL = "literal"
FIELD = "field"

# Field letter -> calendar component. 'K' is reserved and deliberately unmapped.
FIELD_COMPONENTS: dict[str, str] = {
    "G": "era",
    "y": "year",
    "M": "month",
    "d": "day_of_month",
    "E": "day_of_week",
    "D": "day_of_year",
    "F": "date",
    "h": "hour",
    "m": "minute",
    "s": "second",
    "S": "millisecond",
    "w": "week_of_year",
    "W": "week_of_month",
    "a": "am_pm",
    "k": "hour_of_day",
    "z": "zone_offset",
}


class Token(NamedTuple):
    kind: str
    text: str
    # Repeat count for fields, 0 for literals
    width: int = 0

    @property
    def letter(self) -> str:
        return self.text[0] if self.kind == FIELD else ""


def _is_field_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split an LDML-style pattern into literal runs and fields.

    Text between single quotes is literal and ``''`` stands for one quote.
    Adjacent literal characters are merged into a single run.
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(LITERAL, "".join(literal)))
            literal.clear()

    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while end < n:
                if pattern[end] == "'":
                    if end + 1 < n and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            i = end + 1
            continue
        if _is_field_letter(ch):
            flush()
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            tokens.append(Token(FIELD, ch * (j - i), j - i))
            i = j
            continue
        literal.append(ch)
        i += 1
    flush()
    return tuple(tokens)


def _quote_literal(text: str) -> str:
    if not any(_is_field_letter(ch) or ch == "'" for ch in text):
        return text
    if not any(_is_field_letter(ch) for ch in text):
        return text.replace("'", "''")
    return "'" + text.replace("'", "''") + "'"


def render(tokens) -> str:
    return "".join(tok.text if tok.kind == FIELD else _quote_literal(tok.text) for tok in tokens)


def _require_fields(pattern: str, tokens: tuple[Token, ...]) -> None:
    if not any(tok.kind == FIELD for tok in tokens):
        raise PatternError(pattern, "no field letters")


def _widen(tokens: tuple[Token, ...], letter: str, width: int) -> tuple[Token, ...]:
    return tuple(
        Token(FIELD, letter * width, width) if tok.kind == FIELD and tok.letter == letter else tok
        for tok in tokens
    )


def normalize_pattern(pattern: str) -> str:
    """Widen lone ``M``, ``d`` and ``y`` fields to two letters.

    A letter is widened only when none of its fields is already two or more
    letters wide, otherwise years like "03" would parse as year 3.
    Normalizing a canonical pattern returns it unchanged.
    """
    tokens = tokenize(pattern)
    _require_fields(pattern, tokens)
    for letter in ("M", "d", "y"):
        widths = [tok.width for tok in tokens if tok.kind == FIELD and tok.letter == letter]
        if widths and max(widths) < 2:
            tokens = _widen(tokens, letter, 2)
    return render(tokens)


def widen_year(pattern: str) -> str:
    """``yy`` -> ``yyyy`` unless the pattern already carries a four-letter year."""
    if "yyyy" in pattern:
        return pattern
    tokens = tokenize(pattern)
    return render(
        Token(FIELD, "yyyy", 4) if tok.kind == FIELD and tok.text == "yy" else tok for tok in tokens
    )


def narrow_year(pattern: str) -> str:
    tokens = tokenize(pattern)
    return render(
        Token(FIELD, "yy", 2) if tok.kind == FIELD and tok.text == "yyyy" else tok for tok in tokens
    )


def strip_literals(pattern: str) -> str:
    return "".join(tok.text for tok in tokenize(pattern) if tok.kind == FIELD)


class LocalePatternInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    pattern: str
    canonical: str
    long: str
    short: str

    def for_length(self, length: int) -> str:
        return self.short if length == 6 else self.long


def locale_pattern_info(pattern: str, *, fields_only: bool = False) -> LocalePatternInfo:
    """Derive canonical, long-year and short-year variants of a short-date pattern."""
    source = strip_literals(pattern) if fields_only else pattern
    if not source:
        raise PatternError(pattern, "no field letters")
    canonical = normalize_pattern(source)
    if "yyyy" in canonical:
        long, short = canonical, narrow_year(canonical)
    else:
        long, short = widen_year(canonical), canonical
    return LocalePatternInfo(pattern=pattern, canonical=canonical, long=long, short=short)


def field_component(letter: str) -> Optional[str]:
    """Calendar component for the first character of a field, or None."""
    if not letter:
        return None
    return FIELD_COMPONENTS.get(letter[0])
