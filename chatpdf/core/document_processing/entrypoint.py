"""
Document pipeline orchestrator.

Coordinates parsing, chunking and batched embed+upsert for one PDF.
Batches run concurrently up to max_concurrency; the first failing batch
cancels the rest and the whole document fails.

Dependencies: All task modules, configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
import uuid

from langchain_core.documents import Document

from chatpdf.core.exceptions import ChatPDFException, IngestionError
from chatpdf.core.protocols import Embedder, VectorIndex

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .models import PipelineResult
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask, VectorStoreTask

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: parse -> chunk -> embed+upsert."""

    def __init__(
        self,
        embedder: Embedder,
        vector_index: VectorIndex,
        settings: DocumentPipelineSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with configuration.

        Args:
            embedder: Embedder used for chunk vectors
            vector_index: Destination index
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or get_pipeline_settings()

        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._embedding_task = EmbeddingTask(embedder)
        self._vector_store_task = VectorStoreTask(vector_index)

    def _load_chunks(self, file_path: str) -> list[Document]:
        documents = self._parsing_task.parse(file_path)
        return self._chunking_task.chunk(documents)

    def _batches(self, chunks: list[Document]) -> list[tuple[int, list[Document]]]:
        size = self._settings.batch_size
        return [(start, chunks[start:start + size]) for start in range(0, len(chunks), size)]

    def _process_batch(self, offset: int, batch: list[Document], source_name: str | None) -> int:
        embedded = self._embedding_task.embed(batch, offset=offset, source_name=source_name)
        return len(self._vector_store_task.upload(embedded, source_name))

    async def ingest(
        self,
        file_path: str,
        source_name: str | None = None,
        document_id: str | None = None,
    ) -> PipelineResult:
        """
        Process a PDF through the full pipeline.

        Args:
            file_path: Path to the stored PDF
            source_name: Name recorded as the chunk source (defaults to file_path)
            document_id: Optional document ID (generated if None)

        Returns:
            PipelineResult: Processing result with chunk count

        Raises:
            IngestionError: Any stage failed; wraps the underlying cause
        """
        start_time = time.perf_counter()
        doc_id = document_id or str(uuid.uuid4())
        source = source_name or file_path

        logger.info(
            f"{__name__}:ingest - START",
            extra={"document_id": doc_id, "file_path": file_path},
        )

        try:
            chunks = await asyncio.to_thread(self._load_chunks, file_path)
            chunk_count = await self._run_batches(chunks, source)
        except IngestionError:
            raise
        except ChatPDFException as e:
            logger.error(f"{__name__}:ingest - FAILED: {e}", extra={"document_id": doc_id})
            cause = e.details.get("cause")
            raise IngestionError(
                "Failed to process PDF",
                cause=f"{e.message}: {cause}" if cause else e.message,
                details=dict(e.details),
            ) from e
        except Exception as e:
            logger.exception(f"{__name__}:ingest - FAILED", extra={"document_id": doc_id})
            raise IngestionError("Failed to process PDF", cause=e) from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{__name__}:ingest - COMPLETE",
            extra={
                "document_id": doc_id,
                "chunk_count": chunk_count,
                "processing_time_ms": round(elapsed_ms, 2),
            },
        )
        return PipelineResult(
            document_id=doc_id,
            chunk_count=chunk_count,
            processing_time_ms=elapsed_ms,
        )

    async def _run_batches(self, chunks: list[Document], source_name: str) -> int:
        """Run embed+upsert batches with bounded concurrency, failing fast."""
        semaphore = asyncio.Semaphore(self._settings.max_concurrency)

        async def run(offset: int, batch: list[Document]) -> int:
            async with semaphore:
                return await asyncio.to_thread(self._process_batch, offset, batch, source_name)

        tasks = [asyncio.create_task(run(offset, batch)) for offset, batch in self._batches(chunks)]
        if not tasks:
            return 0

        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        failed = next((task for task in done if task.exception() is not None), None)
        if failed is not None:
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            raise failed.exception()

        return sum(task.result() for task in done)
