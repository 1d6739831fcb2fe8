"""
Vector store configuration settings.

Selects the vector index backend (local FAISS for development, Amazon S3
Vectors for deployment) and names the index and namespace to use.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (FAISS for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="faiss",
        description="Vector store type: 'faiss' for local dev, 's3' for production",
    )
    index_name: str = Field(default="chatpdf", description="Index name")
    namespace: str = Field(
        default="",
        description="Optional namespace to partition the index",
    )
    faiss_dir: str = Field(
        default="/tmp/.faiss_index",
        description="Directory where the local FAISS index is persisted",
    )
    vectors_bucket: str = Field(default="", description="S3 Vectors bucket name")
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    aws_access_key_id: str | None = Field(default=None)
    aws_secret_access_key: str | None = Field(default=None)
