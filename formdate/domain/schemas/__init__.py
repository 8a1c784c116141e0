"""Pydantic schemas for format specs, field formats and validation results."""

from .format_spec import (
    AnnotationData,
    ConversionTarget,
    FieldFormat,
    FormatSpec,
    YearMonthDayFormat,
    YearMonthFormat,
)
from .validation import ValidationMessage

__all__ = [
    "AnnotationData",
    "ConversionTarget",
    "FieldFormat",
    "FormatSpec",
    "YearMonthFormat",
    "YearMonthDayFormat",
    "ValidationMessage",
]
