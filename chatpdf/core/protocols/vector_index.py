"""Vector index protocol for dependency injection."""

from typing import Protocol, runtime_checkable

from chatpdf.boundary.vdb.vector_schemas import IndexMatch, IndexRecord


@runtime_checkable
class VectorIndex(Protocol):
    """Stores chunk vectors and answers nearest-neighbour queries."""

    def upsert(self, records: list[IndexRecord]) -> None:
        """Insert records, replacing any with the same id.

        Args:
            records: Records to store.
        """
        ...

    def query(self, vector: list[float], top_k: int) -> list[IndexMatch]:
        """Return the top_k nearest records, most similar first.

        Args:
            vector: Query vector.
            top_k: Maximum number of matches.

        Returns:
            Matches carrying the stored chunk text.
        """
        ...
