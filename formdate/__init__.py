"""formdate: strict validation and normalization of date form input.

Converts user-entered dates such as "2011/09/28" or "13 Nov 2012" into
canonical yyyyMMdd / yyyyMM strings, accepting the field's pattern or
its digits-only variant.
"""

from formdate.domain.context import ValidationContext
from formdate.domain.errors import (
    FormDateError,
    InvalidFormatSpecError,
    InvalidPatternError,
    MissingFieldFormatError,
    UnparseableDateError,
)
from formdate.domain.schemas import (
    ConversionTarget,
    FieldFormat,
    FormatSpec,
    ValidationMessage,
    YearMonthDayFormat,
    YearMonthFormat,
)
from formdate.domain.validators import (
    DateStringConverter,
    YearMonthConverter,
    YearMonthDayConverter,
    convert_date_string,
    converter_for,
    is_valid_date_string,
    parse_date,
    resolve_format_spec,
    strip_separators,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionTarget",
    "FieldFormat",
    "FormatSpec",
    "ValidationMessage",
    "YearMonthFormat",
    "YearMonthDayFormat",
    "ValidationContext",
    "DateStringConverter",
    "YearMonthConverter",
    "YearMonthDayConverter",
    "convert_date_string",
    "is_valid_date_string",
    "converter_for",
    "parse_date",
    "resolve_format_spec",
    "strip_separators",
    "FormDateError",
    "InvalidFormatSpecError",
    "InvalidPatternError",
    "MissingFieldFormatError",
    "UnparseableDateError",
]
