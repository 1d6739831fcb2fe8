"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: str | None = Field(default=None, description="Underlying cause, when known")
