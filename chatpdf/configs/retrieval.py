"""
Retrieval loop configuration.

Dependencies: pydantic, pydantic_settings
System role: Tuning for the conversational retrieval loop
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Settings for query rewriting, retrieval and answering."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=10, description="Chunks retrieved per question", gt=0)
    history_window: int = Field(
        default=0,
        description="Most recent turns sent upstream (0 sends the full history)",
        ge=0,
    )
    max_conversations: int = Field(
        default=1000,
        description="Conversations kept in memory before least recently used ones are evicted",
        gt=0,
    )
