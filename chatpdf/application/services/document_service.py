"""
Document service.

Validates an upload, stores it and runs the ingestion pipeline.

Dependencies: chatpdf.core.document_processing, chatpdf.boundary.storage
System role: Upload orchestration for the upload endpoint
"""

import logging
from pathlib import Path
from typing import BinaryIO

from chatpdf.boundary.storage import UploadStore
from chatpdf.core.document_processing import DocumentPipeline
from chatpdf.core.exceptions import ValidationError
from chatpdf.models.document import UploadResult

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf"}


class DocumentService:
    """Store and index uploaded PDFs."""

    def __init__(
        self,
        pipeline: DocumentPipeline,
        upload_store: UploadStore,
        max_upload_bytes: int = 25 * 1024 * 1024,
    ) -> None:
        self.pipeline = pipeline
        self.upload_store = upload_store
        self.max_upload_bytes = max_upload_bytes

    def validate(self, filename: str | None, size: int | None) -> str:
        """
        Reject uploads before any storage work.

        Returns:
            str: The validated file name

        Raises:
            ValidationError: Missing file, non-PDF extension or too large
        """
        if not filename:
            raise ValidationError("No file uploaded", field="pdf")

        extension = Path(filename).suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                f"Unsupported file type '{extension or filename}'. Only PDF files are accepted.",
                field="pdf",
            )

        if size is not None and size > self.max_upload_bytes:
            raise ValidationError(
                f"File exceeds the {self.max_upload_bytes} byte upload limit",
                field="pdf",
                details={"size": size},
            )
        if size == 0:
            raise ValidationError("Uploaded file is empty", field="pdf")

        return filename

    async def upload(self, filename: str | None, stream: BinaryIO | None, size: int | None) -> UploadResult:
        """
        Validate, store and index one PDF.

        Args:
            filename: Client-supplied file name
            stream: File content
            size: Content length in bytes, when known

        Returns:
            UploadResult: Stored name and chunk count

        Raises:
            ValidationError: Rejected upload
            IngestionError: Pipeline failure
        """
        if stream is None:
            raise ValidationError("No file uploaded", field="pdf")
        filename = self.validate(filename, size)

        stored_path = await self.upload_store.save(filename, stream)
        result = await self.pipeline.ingest(str(stored_path), source_name=filename)

        logger.info(
            f"{__name__}:upload - Indexed document",
            extra={
                "file_name": stored_path.name,
                "chunk_count": result.chunk_count,
                "processing_time_ms": round(result.processing_time_ms, 2),
            },
        )
        return UploadResult(
            file_name=stored_path.name,
            original_name=filename,
            chunk_count=result.chunk_count,
            processing_time_ms=result.processing_time_ms,
        )
