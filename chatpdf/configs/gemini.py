"""
Google Gemini configuration.

Keys and model identifiers for the generative model and the embedding
model. The embedding key is optional and falls back to the generative key.

Dependencies: pydantic, pydantic_settings
System role: Upstream AI service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Gemini generative + embedding settings."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="API key for the generative model")
    embedding_api_key: str | None = Field(
        default=None,
        description="API key for the embedding model (defaults to api_key)",
    )
    model: str = Field(default="gemini-2.0-flash", description="Generative model ID")
    temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Output dimension for every embedding call",
        gt=0,
    )

    @property
    def resolved_embedding_api_key(self) -> str:
        """Embedding key, or the generative key when none is set."""
        return self.embedding_api_key or self.api_key
