"""Strict, locale-aware date parser for formdate.

Parses a value against a y/M/d pattern without any leniency:
- literals must match exactly and nothing may be left over
- numeric fields must have exactly the digits the pattern renders
  ("dd" rejects "012" and "9"; "d" accepts "9" but not "09")
- calendar-invalid dates (Feb 30, day 0, month 13) are rejected,
  never rolled over

Textual months (MMM, MMMM) are matched against Babel's CLDR month names
for the requested locale. The locale never relaxes strictness.

Two-digit years (yy) are assumed to be 2000s (00-99 -> 2000-2099).
There is no sliding century window as in SimpleDateFormat, so "99"
is 2099 here, not 1999.
"""

import re
from datetime import date
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.dates import get_month_names

from formdate.config import DEFAULT_LOCALE
from formdate.domain.errors import InvalidFormatSpecError
from formdate.domain.validators.pattern import PatternToken, tokenize_pattern

_DIGITS = re.compile(r"[0-9]+")

# Defaults for fields a pattern does not mention
_DEFAULT_FIELDS = {"y": 1970, "M": 1, "d": 1}

# Longest digit run a non-abutting field may hold; year 9999 is the widest value
_MAX_DIGITS = 4


@lru_cache(maxsize=64)
def _month_names(locale_tag: str, width: int) -> tuple[str, ...]:
    """January..December names for a locale, abbreviated for MMM, wide for MMMM+."""
    try:
        locale = Locale.parse(locale_tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise InvalidFormatSpecError(f"Unknown locale {locale_tag!r}") from exc

    names = get_month_names(
        "abbreviated" if width == 3 else "wide", context="format", locale=locale
    )
    return tuple(names[month] for month in range(1, 13))


def _read_month_name(value: str, pos: int, token: PatternToken, locale_tag: str) -> tuple[int, int] | None:
    """Match a month name at pos, case-insensitively, longest name first."""
    candidates = sorted(
        enumerate(_month_names(locale_tag, token.width), start=1),
        key=lambda item: len(item[1]),
        reverse=True,
    )
    for month, name in candidates:
        end = pos + len(name)
        if value[pos:end].casefold() == name.casefold():
            return month, end
    return None


def _read_number(value: str, pos: int, token: PatternToken, abutting: bool) -> tuple[int, int] | None:
    """Read a numeric field at pos.

    Abutting fields (followed directly by another numeric field) take
    exactly token.width digits; otherwise the whole digit run is taken.
    """
    match = _DIGITS.match(value, pos)
    if match is None:
        return None

    text = match.group()
    if abutting:
        if len(text) < token.width:
            return None
        text = text[: token.width]
    elif len(text) > max(token.width, _MAX_DIGITS):
        return None

    number = int(text)
    if token.letter == "y" and token.width == 2:
        if len(text) != 2:
            return None
        number += 2000
    elif text != str(number).zfill(token.width):
        # Leading zeros or digit count don't match what the pattern renders
        return None

    return number, pos + len(text)


def parse_date(value: str | None, pattern: str, locale: str | None = None) -> date | None:
    """Parse a date string strictly against a pattern.

    Args:
        value: Raw input, e.g. "2011/09/28" or "13 Nov 2012".
        pattern: Date pattern, e.g. "yyyy/MM/dd" or "dd MMM yyyy".
        locale: Language tag for textual months, e.g. "en" or "ja".
            Defaults to DEFAULT_LOCALE.

    Returns:
        Parsed datetime.date, or None if:
        - value is None or empty
        - value doesn't match the pattern's literals or field widths
        - characters are left over after the pattern is consumed
        - the date doesn't exist (e.g., Feb 31)

    Raises:
        InvalidPatternError: If the pattern itself is invalid.
        InvalidFormatSpecError: If a textual month needs an unknown locale.

    Note:
        Does NOT raise for bad input. Parse failure is an expected outcome.
    """
    if not value:
        return None

    tokens = tokenize_pattern(pattern)
    locale_tag = locale or DEFAULT_LOCALE

    fields: dict[str, int] = {}
    pos = 0

    for index, token in enumerate(tokens):
        if not token.is_field:
            if not value.startswith(token.text, pos):
                return None
            pos += len(token.text)
            continue

        if token.is_textual:
            result = _read_month_name(value, pos, token, locale_tag)
        else:
            abutting = index + 1 < len(tokens) and tokens[index + 1].is_numeric
            result = _read_number(value, pos, token, abutting)

        if result is None:
            return None
        number, pos = result

        # A repeated field must agree with its earlier occurrence
        if fields.setdefault(token.letter, number) != number:
            return None

    if pos != len(value):
        return None

    merged = {**_DEFAULT_FIELDS, **fields}
    try:
        return date(merged["y"], merged["M"], merged["d"])
    except ValueError:
        return None


def is_valid_date(value: str | None, pattern: str, locale: str | None = None) -> bool:
    """Return True if value parses strictly against pattern."""
    return parse_date(value, pattern, locale) is not None


def format_date(value: date, pattern: str, locale: str | None = None) -> str:
    """Render a date with a y/M/d pattern.

    Numeric fields are zero-padded to the field width; yy renders the
    last two digits of the year. Textual months use the locale's names.
    """
    locale_tag = locale or DEFAULT_LOCALE
    numbers = {"y": value.year, "M": value.month, "d": value.day}

    parts: list[str] = []
    for token in tokenize_pattern(pattern):
        if not token.is_field:
            parts.append(token.text)
        elif token.is_textual:
            parts.append(_month_names(locale_tag, token.width)[value.month - 1])
        elif token.letter == "y" and token.width == 2:
            parts.append(str(value.year % 100).zfill(2))
        else:
            parts.append(str(numbers[token.letter]).zfill(token.width))

    return "".join(parts)
