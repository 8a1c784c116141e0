"""Unit tests for pattern tokenizing and separator stripping."""

import pytest

from formdate.domain.errors import InvalidPatternError
from formdate.domain.schemas import ConversionTarget
from formdate.domain.validators.pattern import (
    PatternToken,
    check_pattern_letters,
    strip_separators,
    tokenize_pattern,
)

YM = ConversionTarget.YEAR_MONTH
YMD = ConversionTarget.YEAR_MONTH_DAY


# =============================================================================
# Tokenizer Tests
# =============================================================================


class TestTokenizePattern:
    """Tests for tokenize_pattern."""

    def test_fields_and_separators(self):
        """Letter runs become fields, everything else literals."""
        assert tokenize_pattern("yyyy/MM/dd") == (
            PatternToken("y", 4, "yyyy"),
            PatternToken(None, 1, "/"),
            PatternToken("M", 2, "MM"),
            PatternToken(None, 1, "/"),
            PatternToken("d", 2, "dd"),
        )

    def test_adjacent_literals_are_merged(self):
        tokens = tokenize_pattern("dd. MM")
        assert [t.text for t in tokens] == ["dd", ". ", "MM"]

    def test_quoted_text_is_literal(self):
        tokens = tokenize_pattern("yyyy'y'MM")
        assert [t.text for t in tokens] == ["yyyy", "y", "MM"]
        assert not tokens[1].is_field

    def test_escaped_quotes(self):
        """'' is a literal quote inside and outside quoted text."""
        assert [t.text for t in tokenize_pattern("yyyy''MM")] == ["yyyy", "'", "MM"]
        assert [t.text for t in tokenize_pattern("yyyy'o''c'MM")] == ["yyyy", "o'c", "MM"]

    def test_textual_month_flags(self):
        month = tokenize_pattern("MMM")[0]
        assert month.is_textual
        assert not month.is_numeric
        assert tokenize_pattern("MM")[0].is_numeric

    @pytest.mark.parametrize("pattern", ["", "yyyy/MM/dd HH", "hh:mm", "yyyy 'MM"])
    def test_invalid_patterns(self, pattern: str):
        with pytest.raises(InvalidPatternError):
            tokenize_pattern(pattern)


# =============================================================================
# Separator Stripping Tests
# =============================================================================


class TestStripSeparators:
    """Tests for the digits-only fallback pattern."""

    @pytest.mark.parametrize(
        "pattern,target,expected",
        [
            ("yyyy/MM/dd", YMD, "yyyyMMdd"),
            ("MM/dd/yyyy", YMD, "MMddyyyy"),
            ("dd.MM.yyyy", YMD, "ddMMyyyy"),
            ("yyyy年MM月dd日", YMD, "yyyyMMdd"),
            ("yy-MM-dd", YMD, "yyMMdd"),
            ("yyyy/MM", YM, "yyyyMM"),
            ("MM/yyyy", YM, "MMyyyy"),
            ("yyyyMMdd", YMD, "yyyyMMdd"),
            ("yyyy 'at' MM", YM, "yyyyMM"),
        ],
    )
    def test_strip(self, pattern: str, target: ConversionTarget, expected: str):
        assert strip_separators(pattern, target) == expected

    def test_letters_outside_shape_raise(self):
        """Day fields are not part of the year-month shape."""
        with pytest.raises(InvalidPatternError, match="not allowed for yyyymm"):
            strip_separators("yyyy/MM/dd", YM)

    @pytest.mark.parametrize(
        "pattern,target",
        [
            ("MMM yyyy", YM),  # month names can't be digits
            ("dd MMMM yyyy", YMD),
            ("d/M/yyyy", YMD),  # variable widths would be ambiguous
            ("yyyy/M", YM),
            ("y/MM", YM),
            ("yyy/MM", YM),
            ("yyyy/MM", YMD),  # no day to strip down to
            ("MM/dd", YMD),  # no year
        ],
    )
    def test_no_fallback(self, pattern: str, target: ConversionTarget):
        """Patterns without a usable digits-only form yield None."""
        assert strip_separators(pattern, target) is None

    def test_invalid_pattern_raises(self):
        with pytest.raises(InvalidPatternError):
            strip_separators("yyyy/MM/dd HH", YMD)


class TestCheckPatternLetters:
    """Tests for check_pattern_letters."""

    def test_returns_tokens_for_allowed_letters(self):
        assert check_pattern_letters("yyyy/MM", YM) == tokenize_pattern("yyyy/MM")

    @pytest.mark.parametrize("pattern", ["yyyy/MM/dd", "dd MMM yyyy", "yyyyMMd"])
    def test_day_rejected_for_year_month(self, pattern: str):
        with pytest.raises(InvalidPatternError):
            check_pattern_letters(pattern, YM)

    def test_quoted_day_letter_is_literal(self):
        """A quoted d is text, not a field."""
        assert check_pattern_letters("yyyy'd'MM", YM)[1].text == "d"
