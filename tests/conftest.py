"""Pytest configuration and fixtures."""

import pytest

from formdate import (
    ValidationContext,
    YearMonthConverter,
    YearMonthDayConverter,
    YearMonthDayFormat,
    YearMonthFormat,
)

PARSE_FAILED_MESSAGE_ID = "MSG00002"


@pytest.fixture
def make_context():
    """Factory for a validation context over form parameters."""

    def _make(**params: str | list[str]) -> ValidationContext:
        return ValidationContext({"param": ["10"], **params})

    return _make


@pytest.fixture
def ymd_converter() -> YearMonthDayConverter:
    """Year-month-day converter with a default failure message id."""
    return YearMonthDayConverter(parse_failed_message_id=PARSE_FAILED_MESSAGE_ID)


@pytest.fixture
def ym_converter() -> YearMonthConverter:
    """Year-month converter with a default failure message id."""
    return YearMonthConverter(parse_failed_message_id=PARSE_FAILED_MESSAGE_ID)


@pytest.fixture
def slash_ymd() -> YearMonthDayFormat:
    return YearMonthDayFormat(allow_format="yyyy/MM/dd")


@pytest.fixture
def slash_ym() -> YearMonthFormat:
    return YearMonthFormat(allow_format="yyyy/MM")
