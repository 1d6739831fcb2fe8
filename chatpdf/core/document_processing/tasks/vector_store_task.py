"""
Vector index upload task.

Turns embedded chunks into IndexRecords with compact metadata and
upserts them into the configured VectorIndex.

Dependencies: chatpdf.core.protocols, chatpdf.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import logging

from chatpdf.boundary.vdb.vector_schemas import IndexRecord
from chatpdf.core.exceptions import ChatPDFException, VectorStoreError
from chatpdf.core.protocols import VectorIndex

from ..models import Chunk

logger = logging.getLogger(__name__)


class VectorStoreTask:
    """Upload embedded chunks to a vector index."""

    def __init__(self, vector_index: VectorIndex) -> None:
        self._vector_index = vector_index

    def _sanitize_metadata(self, chunk: Chunk, source_name: str | None) -> dict:
        """
        Keep only the fields retrieval needs.

        PDF-extracted metadata (author, producer, ...) is dropped so records
        stay under backend metadata size limits.
        """
        metadata = chunk.metadata
        return {
            "text": chunk.content,
            "source": source_name or str(metadata.get("source", "")),
            "page": int(metadata.get("page", 0)),
            "chunk_index": int(metadata.get("chunk_index", 0)),
            "start_index": int(metadata.get("start_index", 0)),
        }

    def upload(self, chunks: list[Chunk], source_name: str | None = None) -> list[str]:
        """
        Upsert chunks into the index.

        Args:
            chunks: Chunks with embeddings
            source_name: Display name stored as the record source

        Returns:
            list[str]: Ids of the upserted records

        Raises:
            VectorStoreError: When the upsert fails
        """
        if not chunks:
            return []

        records = [
            IndexRecord(
                id=chunk.id,
                vector=chunk.embedding or [],
                text=chunk.content,
                metadata=self._sanitize_metadata(chunk, source_name),
            )
            for chunk in chunks
        ]

        try:
            self._vector_index.upsert(records)
        except ChatPDFException:
            raise
        except Exception as e:
            logger.exception(
                f"{__name__}:upload - Failed to upsert chunks",
                extra={"chunk_count": len(records), "error": str(e)},
            )
            raise VectorStoreError("Failed to upsert chunks", operation="upsert", cause=e) from e

        logger.info(
            f"{__name__}:upload - Upserted chunks",
            extra={"chunk_count": len(records), "source": source_name},
        )
        return [record.id for record in records]
