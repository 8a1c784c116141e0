"""Date pattern validators for formdate."""

from formdate.domain.validators.converter import (
    DateStringConverter,
    YearMonthConverter,
    YearMonthDayConverter,
    convert_date_string,
    converter_for,
    is_valid_date_string,
)
from formdate.domain.validators.date_parser import format_date, is_valid_date, parse_date
from formdate.domain.validators.format_spec import resolve_format_spec
from formdate.domain.validators.pattern import PatternToken, strip_separators, tokenize_pattern

__all__ = [
    "parse_date",
    "is_valid_date",
    "format_date",
    "tokenize_pattern",
    "strip_separators",
    "PatternToken",
    "resolve_format_spec",
    "convert_date_string",
    "is_valid_date_string",
    "converter_for",
    "DateStringConverter",
    "YearMonthConverter",
    "YearMonthDayConverter",
]
