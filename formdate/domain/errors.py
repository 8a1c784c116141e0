"""Configuration and contract errors for formdate.

A value that simply fails to parse is not an error: validators return
False (or None) for it. The exceptions below signal programmer mistakes
such as a missing field declaration or a malformed pattern.
"""


class FormDateError(ValueError):
    """Base class for formdate configuration errors."""


class InvalidPatternError(FormDateError):
    """Date pattern is empty, badly quoted or uses unsupported letters."""


class InvalidFormatSpecError(FormDateError):
    """Format spec text is malformed or resolves to no usable pattern."""


class MissingFieldFormatError(FormDateError):
    """Property has no field format declaration of the converter's kind."""


class UnparseableDateError(FormDateError):
    """convert() was called with a value that does not validate."""

    def __init__(self, value: str, pattern: str):
        super().__init__(f"Value {value!r} does not match pattern {pattern!r}")
        self.value = value
        self.pattern = pattern
