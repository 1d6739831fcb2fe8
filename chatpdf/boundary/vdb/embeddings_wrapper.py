"""
Google Generative AI Embeddings wrapper with fixed output dimensionality.

Every embed call uses the configured dimension so that vectors written at
ingestion and vectors used for queries always match the index.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency across index backends
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that pins output_dimensionality on every call."""

    _output_dimensionality: int = 768

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 768,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings (google_api_key, ...)
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    @property
    def dimension(self) -> int:
        return self._output_dimensionality

    def embed_documents(
        self,
        texts: List[str],
        *,
        batch_size: int = 100,
        task_type: str | None = None,
        titles: List[str] | None = None,
        output_dimensionality: int | None = None,
    ) -> List[List[float]]:
        """Embed documents at the configured dimension unless overridden."""
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type,
            titles=titles,
            output_dimensionality=output_dimensionality or self._output_dimensionality,
        )

    def embed_query(
        self,
        text: str,
        task_type: str | None = None,
        title: str | None = None,
        output_dimensionality: int | None = None,
    ) -> List[float]:
        """Embed a query at the configured dimension unless overridden."""
        return super().embed_query(
            text,
            task_type=task_type,
            title=title,
            output_dimensionality=output_dimensionality or self._output_dimensionality,
        )
