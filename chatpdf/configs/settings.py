"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from chatpdf.configs.base import BaseSettings
from chatpdf.configs.gemini import GeminiSettings
from chatpdf.configs.retrieval import RetrievalSettings
from chatpdf.configs.server import ServerSettings
from chatpdf.configs.vector_store import VectorStoreSettings
from chatpdf.core.document_processing.configs import DocumentPipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    server: ServerSettings = Field(default_factory=ServerSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Environment variables are read once, on first call.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
