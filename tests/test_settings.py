"""
Test suite for configuration loading.

System role: Verification of defaults and environment overrides
"""

import pytest

from chatpdf.configs import Settings
from chatpdf.configs.gemini import GeminiSettings
from chatpdf.configs.retrieval import RetrievalSettings
from chatpdf.configs.server import ServerSettings
from chatpdf.core.document_processing.configs import DocumentPipelineSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run from an empty directory so a developer .env is not picked up."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "PORT",
        "UPLOAD_DIR",
        "CORS_ALLOWED_ORIGINS",
        "GEMINI_API_KEY",
        "GEMINI_EMBEDDING_API_KEY",
        "RAG_MAX_CONVERSATIONS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """Tests for default values."""

    def test_retrieval_and_pipeline_defaults(self) -> None:
        settings = Settings()

        assert settings.server.port == 5000
        assert settings.server.upload_dir == "/tmp/uploads"
        assert settings.retrieval.top_k == 10
        assert settings.retrieval.history_window == 0
        assert settings.retrieval.max_conversations == 1000
        assert settings.pipeline.chunk_size == 1000
        assert settings.pipeline.chunk_overlap == 200
        assert settings.pipeline.max_concurrency == 5
        assert settings.gemini.model == "gemini-2.0-flash"
        assert settings.vector_store.store_type == "faiss"


class TestEnvironmentOverrides:
    """Tests for environment variable mapping."""

    def test_port_and_origins_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example/, https://b.example")

        server = ServerSettings()

        assert server.port == 8080
        assert server.allowed_origins == ["https://a.example", "https://b.example"]

    def test_embedding_key_falls_back_to_generative_key(self, monkeypatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "gen-key")

        assert GeminiSettings().resolved_embedding_api_key == "gen-key"

        monkeypatch.setenv("GEMINI_EMBEDDING_API_KEY", "embed-key")

        assert GeminiSettings().resolved_embedding_api_key == "embed-key"

    def test_pipeline_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("DOC_PIPELINE_MAX_CONCURRENCY", "2")

        assert DocumentPipelineSettings().max_concurrency == 2

    def test_conversation_limit_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("RAG_MAX_CONVERSATIONS", "25")

        assert RetrievalSettings().max_conversations == 25
