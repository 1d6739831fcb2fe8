"""Embedder protocol for dependency injection."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Embedder(Protocol):
    """Turns text into fixed-dimension vectors."""

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        """Embed document chunks.

        Args:
            texts: Chunk texts.

        Returns:
            One vector per input text, in input order.
        """
        ...

    def embed_query(self, text: str) -> list[float]:
        """Embed a single search query.

        Args:
            text: Query text.

        Returns:
            Query vector.
        """
        ...
