"""Per-call validation context for formdate.

Holds the request parameters a field is validated against and collects
the validation messages raised along the way. A context is built for
one request and discarded afterwards.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from formdate.config import FORMAT_SPEC_SEPARATOR, FORMAT_SPEC_SUFFIX
from formdate.domain.schemas.format_spec import FormatSpec
from formdate.domain.schemas.validation import ValidationMessage

logger = logging.getLogger(__name__)

FormatSpecLookup = Callable[[str], FormatSpec | None]


def _first(value: str | Sequence[str] | None) -> str | None:
    """Form parameters may be single strings or lists of strings."""
    if value is None or isinstance(value, str):
        return value
    return value[0] if value else None


class ValidationContext:
    """Request parameters plus the messages recorded while validating them.

    Format overrides are read from "<property><FORMAT_SPEC_SUFFIX>"
    parameters, e.g. ``birthday_formatSpec = "yyyymmdd{dd MMM yyyy|en}"``,
    with an optional "<property><FORMAT_SPEC_SUFFIX>_separator" parameter.
    Pass format_spec_lookup to resolve overrides some other way.
    """

    def __init__(
        self,
        params: Mapping[str, str | Sequence[str]] | None = None,
        format_spec_lookup: FormatSpecLookup | None = None,
    ):
        self.params: Mapping[str, str | Sequence[str]] = params or {}
        self.messages: list[ValidationMessage] = []
        self._format_spec_lookup = format_spec_lookup

    def get_format_spec(self, property_name: str) -> FormatSpec | None:
        """Return the request-scoped format override for a property, if any."""
        if self._format_spec_lookup is not None:
            return self._format_spec_lookup(property_name)

        key = f"{property_name}{FORMAT_SPEC_SUFFIX}"
        text = _first(self.params.get(key))
        if not text:
            return None

        separator = _first(self.params.get(f"{key}_separator")) or FORMAT_SPEC_SEPARATOR
        return FormatSpec.value_of(text, separator)

    def add_result_message(
        self, property_name: str, message_id: str | None, display_name: Any
    ) -> None:
        logger.debug(f"Validation failed for {property_name} (message {message_id})")
        self.messages.append(
            ValidationMessage(
                property_name=property_name,
                message_id=message_id,
                display_name=display_name,
            )
        )

    @property
    def is_valid(self) -> bool:
        return not self.messages
