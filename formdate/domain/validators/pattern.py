"""Date pattern tokenizing and separator stripping.

Patterns follow SimpleDateFormat syntax restricted to three letters:
- y: year
- M: month (numeric for 1-2 letters, textual for 3 or more)
- d: day of month

Any other character is a literal separator. Text inside single quotes
is literal, and '' stands for one quote character.
"""

from typing import NamedTuple

from formdate.domain.errors import InvalidPatternError
from formdate.domain.schemas.format_spec import ConversionTarget

PATTERN_LETTERS = "yMd"

_QUOTE = "'"


class PatternToken(NamedTuple):
    """One field (letter run) or literal chunk of a pattern."""

    letter: str | None  # None for literals
    width: int
    text: str

    @property
    def is_field(self) -> bool:
        return self.letter is not None

    @property
    def is_textual(self) -> bool:
        """True for month fields rendered as names (MMM, MMMM)."""
        return self.letter == "M" and self.width >= 3

    @property
    def is_numeric(self) -> bool:
        return self.is_field and not self.is_textual


def tokenize_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Split a date pattern into field and literal tokens.

    Adjacent literal characters are merged into one token.

    Args:
        pattern: Date pattern, e.g. "yyyy/MM/dd" or "dd 'de' MMMM yyyy".

    Returns:
        Tokens in pattern order.

    Raises:
        InvalidPatternError: If the pattern is empty, contains a letter
            other than y, M or d outside quotes, or has an unterminated
            quote.
    """
    if not pattern:
        raise InvalidPatternError("Date pattern must not be empty")

    tokens: list[PatternToken] = []
    literal: list[str] = []

    def flush_literal() -> None:
        if literal:
            text = "".join(literal)
            tokens.append(PatternToken(None, len(text), text))
            literal.clear()

    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]

        if char == _QUOTE:
            # '' outside a quoted section is a literal quote
            if i + 1 < length and pattern[i + 1] == _QUOTE:
                literal.append(_QUOTE)
                i += 2
                continue
            end = i + 1
            while True:
                end = pattern.find(_QUOTE, end)
                if end == -1:
                    raise InvalidPatternError(f"Unterminated quote in pattern {pattern!r}")
                if end + 1 < length and pattern[end + 1] == _QUOTE:
                    end += 2
                    continue
                break
            literal.append(pattern[i + 1 : end].replace(_QUOTE * 2, _QUOTE))
            i = end + 1
            continue

        if char.isascii() and char.isalpha():
            if char not in PATTERN_LETTERS:
                raise InvalidPatternError(
                    f"Unsupported pattern letter {char!r} in {pattern!r}; "
                    f"only {', '.join(PATTERN_LETTERS)} are allowed"
                )
            flush_literal()
            start = i
            while i < length and pattern[i] == char:
                i += 1
            tokens.append(PatternToken(char, i - start, pattern[start:i]))
            continue

        literal.append(char)
        i += 1

    flush_literal()
    return tuple(tokens)


def _is_fixed_width(token: PatternToken) -> bool:
    """Whether a numeric field always renders with exactly `width` digits."""
    if token.letter == "y":
        return token.width == 2 or token.width >= 4
    return token.width >= 2


def check_pattern_letters(pattern: str, target: ConversionTarget) -> tuple[PatternToken, ...]:
    """Tokenize a pattern and reject letters the target shape doesn't use.

    A year-month pattern may only use y and M; d is reserved for
    year-month-day patterns.

    Raises:
        InvalidPatternError: If the pattern is invalid or uses a letter
            outside target.pattern_letters.
    """
    tokens = tokenize_pattern(pattern)
    for token in tokens:
        if token.is_field and token.letter not in target.pattern_letters:
            raise InvalidPatternError(
                f"Pattern letter {token.letter!r} in {pattern!r} is not allowed for "
                f"{target.value}; use only {', '.join(target.pattern_letters)}"
            )
    return tokens


def strip_separators(pattern: str, target: ConversionTarget) -> str | None:
    """Derive the digits-only fallback of a pattern.

    Keeps the fields in order and drops every separator
    ("yyyy/MM/dd" -> "yyyyMMdd").

    Args:
        pattern: Primary date pattern.
        target: Conversion shape the pattern belongs to.

    Returns:
        The letters-only pattern, or None when no usable fallback exists:
        - nothing is left, or a letter the shape requires is missing
        - a textual month remains (digits cannot spell a month name)
        - a variable-width numeric field remains, since abutting
          variable-width digit runs are ambiguous ("d/M/yyyy")

        None means "fallback disabled", not an error.

    Raises:
        InvalidPatternError: If the primary pattern itself is invalid or
            uses a letter outside the target shape.
    """
    fields = [token for token in check_pattern_letters(pattern, target) if token.is_field]

    present = {token.letter for token in fields}
    if not fields or not set(target.pattern_letters) <= present:
        return None

    if any(token.is_textual or not _is_fixed_width(token) for token in fields):
        return None

    return "".join(token.text for token in fields)
