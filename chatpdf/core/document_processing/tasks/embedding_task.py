"""
Embedding generation task.

Embeds a batch of chunk texts through the configured Embedder and
assigns each chunk a deterministic id derived from the upload name and
the chunk's position, so uploading the same file again overwrites its
records instead of duplicating them.

Dependencies: hashlib, chatpdf.core.protocols
System role: Third stage of document ingestion pipeline
"""

import hashlib

from langchain_core.documents import Document

from chatpdf.core.exceptions import ChatPDFException, EmbeddingError
from chatpdf.core.protocols import Embedder

from ..models import Chunk


class EmbeddingTask:
    """Generate embeddings for chunk batches."""

    def __init__(self, embedder: Embedder) -> None:
        self._embedder = embedder

    def embed(
        self,
        documents: list[Document],
        offset: int = 0,
        source_name: str | None = None,
    ) -> list[Chunk]:
        """
        Generate embeddings for documents.

        Args:
            documents: Chunked LangChain Documents
            offset: Position of the first document within the whole file
            source_name: Stable document name used for chunk ids
                (defaults to each document's loader source)

        Returns:
            list[Chunk]: Chunks with embeddings, in input order

        Raises:
            EmbeddingError: When embedding generation fails
        """
        if not documents:
            return []

        texts = [doc.page_content for doc in documents]
        try:
            embeddings = self._embedder.embed_documents(texts)
        except ChatPDFException:
            raise
        except Exception as e:
            raise EmbeddingError("Failed to generate embeddings", cause=e) from e

        if len(embeddings) != len(texts):
            raise EmbeddingError(
                "Embedding count does not match chunk count",
                details={"expected": len(texts), "received": len(embeddings)},
            )

        chunks = []
        for i, (doc, embedding) in enumerate(zip(documents, embeddings)):
            metadata = dict(doc.metadata)
            metadata["chunk_index"] = offset + i
            if source_name:
                metadata["source"] = source_name
            chunks.append(
                Chunk(
                    id=generate_chunk_id(doc.page_content, metadata),
                    content=doc.page_content,
                    metadata=metadata,
                    embedding=list(embedding),
                )
            )
        return chunks


def generate_chunk_id(content: str, metadata: dict) -> str:
    """
    Generate deterministic chunk ID from content and position.

    Page and chunk_index keep identical text on different pages apart.

    Args:
        content: Chunk text content
        metadata: Chunk metadata (source, page, start_index, chunk_index)

    Returns:
        str: SHA-256 hash prefix (16 chars)
    """
    source = metadata.get("source", "")
    page = metadata.get("page", 0)
    start_index = metadata.get("start_index", 0)
    chunk_index = metadata.get("chunk_index", 0)
    hash_input = f"{content}:{source}:{page}:{start_index}:{chunk_index}"
    return hashlib.sha256(hash_input.encode()).hexdigest()[:16]
