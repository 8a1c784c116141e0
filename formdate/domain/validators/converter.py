"""Date string validation and conversion for formdate.

Validates form input against a field's date pattern and converts it to
a canonical fixed-width string (yyyyMM or yyyyMMdd).

Each value is tried twice at most:
1. against the resolved pattern, e.g. "yyyy/MM/dd"
2. against the same pattern with separators removed, e.g. "yyyyMMdd"

With YearMonthDayFormat(allow_format="yyyy/MM/dd"):
- "2011/09/28" -> valid, "20110928"
- "20110928"   -> valid via the digits-only pattern
- "2011/02/29" -> invalid, no such day
- "2011-09-28" -> invalid, wrong separator
- "2011928"    -> invalid, matches neither pattern

None and "" are passed through untouched and always validate.
"""

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, ClassVar

from formdate.config import DEFAULT_PARSE_FAILED_MESSAGE_ID
from formdate.domain.context import ValidationContext
from formdate.domain.errors import MissingFieldFormatError, UnparseableDateError
from formdate.domain.schemas.format_spec import (
    AnnotationData,
    ConversionTarget,
    FieldFormat,
    FormatSpec,
    YearMonthDayFormat,
    YearMonthFormat,
)
from formdate.domain.validators.date_parser import format_date, parse_date
from formdate.domain.validators.format_spec import resolve_format_spec
from formdate.domain.validators.pattern import check_pattern_letters, strip_separators

logger = logging.getLogger(__name__)

FieldFormatLookup = Callable[[str], FieldFormat | None]


def _parse_with_fallback(value: str, spec: FormatSpec) -> date | None:
    """Try the spec's pattern, then its digits-only variant."""
    check_pattern_letters(spec.pattern, spec.target)
    parsed = parse_date(value, spec.pattern, spec.locale)
    if parsed is not None:
        return parsed

    fallback = strip_separators(spec.pattern, spec.target)
    if fallback is None or fallback == spec.pattern:
        return None

    logger.debug(f"Retrying {value!r} with digits-only pattern {fallback!r}")
    return parse_date(value, fallback, spec.locale)


def is_valid_date_string(value: str | None, spec: FormatSpec) -> bool:
    """Check whether a value can be converted with the given spec.

    Args:
        value: Raw form input.
        spec: Resolved format spec; its data_type selects the shape.

    Returns:
        True for None, "" and any value matching the spec's pattern or
        its digits-only variant. False otherwise.
    """
    if not value:
        return True
    return _parse_with_fallback(value, spec) is not None


def convert_date_string(value: str | None, spec: FormatSpec) -> str | None:
    """Convert a value to the canonical string of the spec's shape.

    Callers should gate this with is_valid_date_string().

    Args:
        value: Raw form input.
        spec: Resolved format spec; its data_type selects the shape.

    Returns:
        The value unchanged if None or "", else the canonical string,
        e.g. "20110928" for yyyymmdd or "201109" for yyyymm.

    Raises:
        UnparseableDateError: If the value matches neither pattern.
    """
    if not value:
        return value

    parsed = _parse_with_fallback(value, spec)
    if parsed is None:
        logger.warning(f"convert called with unvalidated value for pattern {spec.pattern!r}")
        raise UnparseableDateError(value, spec.pattern)

    return format_date(parsed, spec.target.output_pattern)


class DateStringConverter:
    """Base converter binding a conversion shape to its field format type.

    Args:
        parse_failed_message_id: Message id recorded when a field format
            declares none. Defaults to DEFAULT_PARSE_FAILED_MESSAGE_ID.
        format_lookup: Resolves a property name to its field format when
            the caller doesn't pass one explicitly.
    """

    target: ClassVar[ConversionTarget]
    format_type: ClassVar[type]

    def __init__(
        self,
        parse_failed_message_id: str | None = None,
        format_lookup: FieldFormatLookup | None = None,
    ):
        if not hasattr(type(self), "format_type"):
            raise TypeError(
                f"{type(self).__name__} is abstract; use YearMonthConverter or YearMonthDayConverter"
            )
        self.parse_failed_message_id = parse_failed_message_id or DEFAULT_PARSE_FAILED_MESSAGE_ID
        self._format_lookup = format_lookup

    def convert(
        self,
        context: ValidationContext | None,
        property_name: str,
        value: str | None,
        field_format: Any = None,
    ) -> str | None:
        """Convert a property value to its canonical date string.

        None and "" are returned as is, without checking the field format.

        Raises:
            MissingFieldFormatError: If no field format of this converter's
                kind is declared for the property.
            UnparseableDateError: If the value fails is_convertible().
        """
        if not value:
            return value

        data = self._require_annotation_data(property_name, field_format)
        spec = self.get_format_spec(context, property_name, data.allow_format)
        return convert_date_string(value, spec)

    def is_convertible(
        self,
        context: ValidationContext,
        property_name: str,
        display_name: Any,
        value: str | None,
        field_format: Any = None,
    ) -> bool:
        """Validate a property value, recording a message on failure.

        The message id is the field format's message_id, falling back to
        this converter's parse_failed_message_id.

        Returns:
            True if the value is None, "" or convertible.

        Raises:
            MissingFieldFormatError: If no field format of this converter's
                kind is declared for the property. No message is recorded.
        """
        if not value:
            return True

        data = self._require_annotation_data(property_name, field_format)
        spec = self.get_format_spec(context, property_name, data.allow_format)
        if is_valid_date_string(value, spec):
            return True

        context.add_result_message(
            property_name,
            data.message_id or self.parse_failed_message_id,
            display_name,
        )
        return False

    def get_format_spec(
        self,
        context: ValidationContext | None,
        property_name: str,
        allow_format: str,
    ) -> FormatSpec:
        """Resolve the spec for a property from the request and the field default."""
        override = context.get_format_spec(property_name) if context is not None else None
        return resolve_format_spec(allow_format, self.target, override)

    def get_annotation_data(self, field_format: Any) -> AnnotationData | None:
        """Extract pattern and message id, or None if field_format is the wrong kind."""
        if not isinstance(field_format, self.format_type):
            return None
        return AnnotationData(field_format.allow_format, field_format.message_id)

    def _require_annotation_data(self, property_name: str, field_format: Any) -> AnnotationData:
        if field_format is None and self._format_lookup is not None:
            field_format = self._format_lookup(property_name)

        data = self.get_annotation_data(field_format)
        if data is None:
            logger.warning(f"No {self.format_type.__name__} declared for {property_name}")
            raise MissingFieldFormatError(
                f"Must specify {self.format_type.__name__}. property={property_name}"
            )
        return data


class YearMonthConverter(DateStringConverter):
    """Converts input to a yyyyMM string.

    With YearMonthFormat(allow_format="yyyy/MM"):
    - "2011/09" -> "201109"
    - "201109"  -> "201109" (digits-only pattern)
    - "2011/13" -> invalid
    - "2011-09" -> invalid
    """

    target = ConversionTarget.YEAR_MONTH
    format_type = YearMonthFormat


class YearMonthDayConverter(DateStringConverter):
    """Converts input to a yyyyMMdd string."""

    target = ConversionTarget.YEAR_MONTH_DAY
    format_type = YearMonthDayFormat


_CONVERTERS: dict[ConversionTarget, type[DateStringConverter]] = {
    ConversionTarget.YEAR_MONTH: YearMonthConverter,
    ConversionTarget.YEAR_MONTH_DAY: YearMonthDayConverter,
}


def converter_for(target: ConversionTarget | str) -> type[DateStringConverter]:
    """Return the converter class for a shape or its discriminator."""
    return _CONVERTERS[ConversionTarget(target)]
