"""
Shared test fixtures and configuration for entire test suite.

Provides: fake services, sample PDFs and isolated settings
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from pathlib import Path

import pytest

from chatpdf.configs import Settings
from chatpdf.configs.gemini import GeminiSettings
from chatpdf.configs.retrieval import RetrievalSettings
from chatpdf.configs.server import ServerSettings
from chatpdf.configs.vector_store import VectorStoreSettings
from chatpdf.core.document_processing.configs import DocumentPipelineSettings
from fakes import FAKE_DIMENSION, SAMPLE_PAGES, FakeEmbedder, FakeVectorIndex, make_pdf


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture
def fake_index() -> FakeVectorIndex:
    return FakeVectorIndex()


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return make_pdf(SAMPLE_PAGES)


@pytest.fixture
def sample_pdf(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    """Write the sample PDF to disk."""
    path = tmp_path / "notes.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings isolated from the environment and pointing at tmp_path."""
    return Settings(
        server=ServerSettings(
            upload_dir=str(tmp_path / "uploads"),
            max_upload_bytes=1024 * 1024,
            cors_allowed_origins="http://localhost:5173",
        ),
        gemini=GeminiSettings(api_key="test-key", embedding_dimension=FAKE_DIMENSION),
        vector_store=VectorStoreSettings(store_type="faiss", faiss_dir=str(tmp_path / "faiss")),
        retrieval=RetrievalSettings(top_k=10, history_window=0),
        pipeline=DocumentPipelineSettings(chunk_size=1000, chunk_overlap=200, max_concurrency=5, batch_size=100),
    )
