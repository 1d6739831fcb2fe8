"""
FAISS vector index for local development.

Wraps LangChain FAISS over an IndexFlatL2 sized from the configured
embedding dimension, persisted to disk after every upsert. Records with
an existing id are replaced.

Dependencies: faiss-cpu, langchain_community.vectorstores
System role: Local vector index backend
"""

import logging
import threading
from pathlib import Path

import faiss
from langchain_community.docstore.in_memory import InMemoryDocstore
from langchain_community.vectorstores import FAISS
from langchain_core.embeddings import Embeddings

from chatpdf.boundary.vdb.vector_schemas import IndexMatch, IndexRecord
from chatpdf.core.exceptions import VectorStoreError

logger = logging.getLogger(__name__)


class FAISSVectorIndex:
    """Local FAISS index keyed by chunk id."""

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int,
        persist_dir: str = "/tmp/.faiss_index",
        index_name: str = "chatpdf",
        namespace: str = "",
    ) -> None:
        """
        Load the index from disk or create an empty one.

        Args:
            embeddings: Embedding function stored with the index (not called here)
            dimension: Vector dimension
            persist_dir: Directory holding the saved index
            index_name: Index file stem
            namespace: Optional suffix separating indexes within one directory
        """
        self._embeddings = embeddings
        self._dimension = dimension
        self._persist_dir = Path(persist_dir)
        self._index_name = f"{index_name}-{namespace}" if namespace else index_name
        self._lock = threading.Lock()

        self._persist_dir.mkdir(parents=True, exist_ok=True)
        self._store = self._load_or_create_index()

    def _load_or_create_index(self) -> FAISS:
        """Load existing FAISS index or create new one."""
        index_file = self._persist_dir / f"{self._index_name}.faiss"
        if index_file.exists():
            try:
                store = FAISS.load_local(
                    str(self._persist_dir),
                    self._embeddings,
                    index_name=self._index_name,
                    allow_dangerous_deserialization=True,
                )
                logger.info(
                    f"{__name__}:_load_or_create_index - Loaded index",
                    extra={"path": str(index_file), "vectors": store.index.ntotal},
                )
                return store
            except Exception as e:
                raise VectorStoreError("Failed to load FAISS index", operation="load", cause=e) from e

        logger.info(
            f"{__name__}:_load_or_create_index - Creating new index",
            extra={"path": str(index_file), "dimension": self._dimension},
        )
        return FAISS(
            embedding_function=self._embeddings,
            index=faiss.IndexFlatL2(self._dimension),
            docstore=InMemoryDocstore(),
            index_to_docstore_id={},
        )

    @property
    def size(self) -> int:
        """Number of vectors currently stored."""
        return self._store.index.ntotal

    def upsert(self, records: list[IndexRecord]) -> None:
        """Insert records, replacing any that share an id, then persist."""
        if not records:
            return

        with self._lock:
            try:
                ids = [record.id for record in records]
                existing = set(self._store.index_to_docstore_id.values())
                stale = [record_id for record_id in dict.fromkeys(ids) if record_id in existing]
                if stale:
                    self._store.delete(ids=stale)

                self._store.add_embeddings(
                    text_embeddings=[(record.text, record.vector) for record in records],
                    metadatas=[{**record.metadata, "chunk_id": record.id} for record in records],
                    ids=ids,
                )
                self._store.save_local(str(self._persist_dir), index_name=self._index_name)
            except Exception as e:
                logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
                raise VectorStoreError("Failed to upsert into FAISS index", operation="upsert", cause=e) from e

        logger.info(
            f"{__name__}:upsert - Upserted {len(records)} records",
            extra={"replaced": len(stale), "total": self.size},
        )

    def query(self, vector: list[float], top_k: int) -> list[IndexMatch]:
        """Return the top_k nearest records by L2 distance."""
        # Searches share the write lock; faiss does not allow search during add.
        with self._lock:
            try:
                results = self._store.similarity_search_with_score_by_vector(vector, k=top_k)
            except Exception as e:
                logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
                raise VectorStoreError("Failed to query FAISS index", operation="query", cause=e) from e

        matches = []
        for doc, score in results:
            metadata = dict(doc.metadata or {})
            matches.append(
                IndexMatch(
                    id=metadata.get("chunk_id") or doc.id or "",
                    text=metadata.get("text") or doc.page_content,
                    score=float(score),
                    metadata=metadata,
                )
            )
        return matches
