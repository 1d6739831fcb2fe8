"""
Pipeline result model for document processing.

Dependencies: pydantic
System role: Return type for DocumentPipeline.ingest()
"""

from pydantic import BaseModel, Field


class PipelineResult(BaseModel):
    """Result of document processing pipeline execution."""

    document_id: str = Field(description="Identifier of the ingested document")
    chunk_count: int = Field(description="Number of chunks indexed")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
