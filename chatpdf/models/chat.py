"""
Chat request/response models.

Dependencies: pydantic
System role: Data contracts for the ask endpoint
"""

from pydantic import BaseModel, ConfigDict, Field


class AskRequest(BaseModel):
    """Question about the indexed document."""

    model_config = ConfigDict(populate_by_name=True)

    question: str | None = Field(default=None, description="User question")
    conversation_id: str | None = Field(
        default=None,
        alias="conversationId",
        max_length=128,
        description="Conversation to continue (shared default when omitted)",
    )


class AskResponse(BaseModel):
    """Answer generated from the retrieved context."""

    answer: str
