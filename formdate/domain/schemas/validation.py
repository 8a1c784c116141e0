"""Validation result schemas for formdate."""

from typing import Any

from pydantic import BaseModel, Field


class ValidationMessage(BaseModel):
    """A single validation failure recorded against a property.

    Rendering the message text is left to the caller's message catalog;
    only the keys needed to look it up are kept here.
    """

    property_name: str = Field(description="Property that failed validation")
    message_id: str | None = Field(
        default=None, description="Message catalog key for the failure"
    )
    display_name: Any = Field(
        default=None, description="Display name substituted into the message"
    )
