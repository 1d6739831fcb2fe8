"""
Dependency injection container.

Lazily builds and caches the embedder, vector index, generator,
retrieval loop, ingestion pipeline and stores. Route handlers receive
services through the get_* providers, which tests override via
app.dependency_overrides.

Dependencies: chatpdf.configs, chatpdf.application, chatpdf.boundary
System role: DI container for service injection
"""

from chatpdf.application.services import ChatService, DocumentService
from chatpdf.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._embedder = None
        self._vector_index = None
        self._text_generator = None
        self._retriever = None
        self._document_pipeline = None
        self._conversations = None
        self._upload_store = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def configure(self, settings: Settings) -> None:
        """Swap settings and drop every instance built from the old ones."""
        self.clear()
        self._settings = settings

    @property
    def embedder(self):
        """Get cached embedder."""
        if self._embedder is None:
            from chatpdf.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings

            gemini = self.settings.gemini
            self._embedder = FixedDimensionEmbeddings(
                model=gemini.embedding_model,
                output_dimensionality=gemini.embedding_dimension,
                google_api_key=gemini.resolved_embedding_api_key,
            )
        return self._embedder

    @property
    def vector_index(self):
        """Get cached vector index."""
        if self._vector_index is None:
            from chatpdf.boundary.vdb.vector_index_factory import get_vector_index

            self._vector_index = get_vector_index(self.settings, self.embedder)
        return self._vector_index

    @property
    def text_generator(self):
        """Get cached generative model client."""
        if self._text_generator is None:
            from chatpdf.boundary.llm import GeminiTextGenerator

            gemini = self.settings.gemini
            self._text_generator = GeminiTextGenerator(
                api_key=gemini.api_key,
                model=gemini.model,
                temperature=gemini.temperature,
            )
        return self._text_generator

    @property
    def retriever(self):
        """Get cached conversational retriever."""
        if self._retriever is None:
            from chatpdf.core.rag_query import ConversationalRetriever

            self._retriever = ConversationalRetriever(
                embedder=self.embedder,
                vector_index=self.vector_index,
                generator=self.text_generator,
                top_k=self.settings.retrieval.top_k,
                history_window=self.settings.retrieval.history_window,
            )
        return self._retriever

    @property
    def document_pipeline(self):
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            from chatpdf.core.document_processing import DocumentPipeline

            self._document_pipeline = DocumentPipeline(
                embedder=self.embedder,
                vector_index=self.vector_index,
                settings=self.settings.pipeline,
            )
        return self._document_pipeline

    @property
    def conversations(self):
        """Get cached conversation store."""
        if self._conversations is None:
            from chatpdf.core.rag_query import ConversationStore

            self._conversations = ConversationStore(self.settings.retrieval.max_conversations)
        return self._conversations

    @property
    def upload_store(self):
        """Get cached upload store."""
        if self._upload_store is None:
            from chatpdf.boundary.storage import UploadStore

            self._upload_store = UploadStore(self.settings.server.upload_dir)
        return self._upload_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._embedder = None
        self._vector_index = None
        self._text_generator = None
        self._retriever = None
        self._document_pipeline = None
        self._conversations = None
        self._upload_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings used by the service cache."""
    return get_service_cache().settings


def get_chat_service() -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Service wired to the cached retriever and conversation store
    """
    cache = get_service_cache()
    return ChatService(retriever=cache.retriever, conversations=cache.conversations)


def get_document_service() -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Service wired to the cached pipeline and upload store
    """
    cache = get_service_cache()
    return DocumentService(
        pipeline=cache.document_pipeline,
        upload_store=cache.upload_store,
        max_upload_bytes=cache.settings.server.max_upload_bytes,
    )
