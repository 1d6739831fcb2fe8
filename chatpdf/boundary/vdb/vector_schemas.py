"""
Vector database schemas.

Pydantic models exchanged with vector index backends.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from typing import Any

from pydantic import BaseModel, Field


class IndexRecord(BaseModel):
    """One chunk vector ready to be written to an index."""

    id: str = Field(description="Deterministic chunk identifier")
    vector: list[float] = Field(description="Embedding vector")
    text: str = Field(description="Chunk text, stored alongside the vector")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")


class IndexMatch(BaseModel):
    """Single result from a nearest-neighbour query."""

    id: str = Field(description="Chunk identifier")
    text: str = Field(description="Chunk text content")
    score: float = Field(description="Backend distance or similarity score")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Chunk metadata")
