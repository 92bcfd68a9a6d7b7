"""Indications Schemas — Pydantic models for the relay's JSON bodies.

Invariants:
    - IndicationsRequest accepts camelCase keys (originalText, finalText) from browsers
    - Texts are taken as-is: no length limits, no strip, no escaping
    - Non-string texts are rejected (no int/None coercion)
"""

from pydantic import BaseModel, ConfigDict, Field


class IndicationsRequest(BaseModel):
    """Two versions of a legal text to compare."""
    model_config = ConfigDict(populate_by_name=True)

    original_text: str = Field(alias="originalText")
    final_text: str = Field(alias="finalText")


class IndicationsResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
