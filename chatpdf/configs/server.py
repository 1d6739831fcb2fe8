"""
HTTP server configuration.

Listening address, upload staging directory, upload size limit and the
browser origin allow-list.

Dependencies: pydantic, pydantic_settings
System role: HTTP surface configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Server settings. Read from unprefixed env vars (PORT, UPLOAD_DIR, ...)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=5000, description="Listening port")
    upload_dir: str = Field(
        default="/tmp/uploads",
        description="Directory where uploaded PDFs are staged",
    )
    max_upload_bytes: int = Field(
        default=25 * 1024 * 1024,
        description="Largest accepted upload in bytes",
        gt=0,
    )
    cors_allowed_origins: str = Field(
        default="http://localhost:5173,http://localhost:8501",
        description="Comma-separated list of browser origins allowed to call the API",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Allow-list parsed from the comma-separated setting."""
        return [
            origin.strip().rstrip("/")
            for origin in self.cors_allowed_origins.split(",")
            if origin.strip()
        ]
