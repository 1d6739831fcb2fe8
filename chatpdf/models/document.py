"""
Document upload models.

Dependencies: pydantic
System role: Data contracts for the upload endpoint
"""

from pydantic import BaseModel, ConfigDict, Field


class UploadResult(BaseModel):
    """Outcome of storing and indexing one PDF."""

    file_name: str = Field(description="Server-generated stored file name")
    original_name: str = Field(description="Client-supplied file name")
    chunk_count: int = Field(description="Number of chunks indexed")
    processing_time_ms: float = Field(default=0.0)


class UploadResponse(BaseModel):
    """Response body for POST /upload."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "PDF uploaded and indexed successfully"
    file_name: str = Field(alias="fileName")
    chunk_count: int = Field(alias="chunkCount")
