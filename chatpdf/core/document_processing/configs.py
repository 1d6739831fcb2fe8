"""
Configuration settings for document processing pipeline.

Chunking parameters and ingestion concurrency.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(default=1000, description="Maximum chunk size in characters", gt=0)
    chunk_overlap: int = Field(default=200, description="Overlap between consecutive chunks", ge=0)
    max_concurrency: int = Field(
        default=5,
        description="Embedding/upsert batches allowed in flight at once",
        gt=0,
    )
    batch_size: int = Field(default=100, description="Chunks per embedding batch", gt=0)


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """Get cached pipeline settings."""
    return DocumentPipelineSettings()
