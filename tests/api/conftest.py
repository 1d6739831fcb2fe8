"""
API test fixtures.

Builds the real application with services wired to deterministic fakes.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chatpdf.api.deps import get_chat_service, get_document_service
from chatpdf.application.services import ChatService, DocumentService
from chatpdf.boundary.storage import UploadStore
from chatpdf.configs import Settings
from chatpdf.core.document_processing import DocumentPipeline
from chatpdf.core.rag_query import ConversationalRetriever, ConversationStore
from chatpdf.core.rag_query.prompts import REWRITE_SYSTEM_PROMPT
from chatpdf.main import create_app
from fakes import FakeEmbedder, FakeGenerator, FakeVectorIndex


def _scripted(turns, instruction: str) -> str:
    if instruction == REWRITE_SYSTEM_PROMPT:
        return f"standalone: {turns[-1].text}"
    return "Binary search runs in O(log n)."


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator(_scripted)


@pytest.fixture
def conversations() -> ConversationStore:
    return ConversationStore()


@pytest.fixture
def app(
    test_settings: Settings,
    fake_embedder: FakeEmbedder,
    fake_index: FakeVectorIndex,
    generator: FakeGenerator,
    conversations: ConversationStore,
) -> FastAPI:
    """Application with chat and document services backed by fakes."""
    app = create_app(test_settings)

    pipeline = DocumentPipeline(fake_embedder, fake_index, test_settings.pipeline)
    upload_store = UploadStore(test_settings.server.upload_dir)
    retriever = ConversationalRetriever(fake_embedder, fake_index, generator, top_k=test_settings.retrieval.top_k)

    app.dependency_overrides[get_document_service] = lambda: DocumentService(
        pipeline, upload_store, test_settings.server.max_upload_bytes
    )
    app.dependency_overrides[get_chat_service] = lambda: ChatService(retriever, conversations)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
