"""
Exception hierarchy for ChatPDF.

Two families reach the HTTP surface: ValidationError (caller mistakes)
and UpstreamError (a document loader, embedding service, vector index or
generative model failed). Every exception carries a details dict for
logging and for the error body returned to clients.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ChatPDFException(Exception):
    """Base exception for all ChatPDF errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ChatPDFException):
    """Raised when caller input is rejected before any upstream work."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class UpstreamError(ChatPDFException):
    """Raised when an external dependency fails."""

    stage: str = "upstream"

    def __init__(
        self,
        message: str,
        cause: BaseException | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message shown to clients
            cause: Underlying exception or description
            details: Additional context
        """
        details = details or {}
        details.setdefault("stage", self.stage)
        if cause is not None:
            details["cause"] = str(cause)
        super().__init__(message, details)

    @property
    def cause(self) -> str | None:
        """Underlying failure description, if known."""
        return self.details.get("cause")


class IngestionError(UpstreamError):
    """Raised when a document could not be ingested as a whole."""

    stage = "ingestion"


class ParsingError(UpstreamError):
    """Raised when PDF parsing fails."""

    stage = "parsing"

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        cause: BaseException | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, cause=cause, details=details)


class ChunkingError(UpstreamError):
    """Raised when text splitting fails."""

    stage = "chunking"


class EmbeddingError(UpstreamError):
    """Raised when embedding generation fails."""

    stage = "embedding"


class VectorStoreError(UpstreamError):
    """Raised when vector index operations fail."""

    stage = "vector_store"

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        cause: BaseException | str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, query, load)
            cause: Underlying exception
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, cause=cause, details=details)


class GenerationError(UpstreamError):
    """Raised when the generative model call fails."""

    stage = "generation"


class EmptyResponseError(ChatPDFException):
    """Raised when the generative model returns no usable text."""

    def __init__(self, stage: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["stage"] = stage
        super().__init__(f"Model returned an empty response during {stage}", details)
