"""
Upload API endpoint.

Routes: POST /upload (multipart field "pdf")

Dependencies: chatpdf.application.services
System role: PDF intake HTTP API
"""

from fastapi import APIRouter, Depends, File, UploadFile

from chatpdf.api.deps import get_document_service
from chatpdf.application.services import DocumentService
from chatpdf.core.exceptions import ChatPDFException, IngestionError
from chatpdf.models.common import ErrorResponse
from chatpdf.models.document import UploadResponse
from chatpdf.observability import get_logger
from chatpdf.observability.log_utils import log_exception_with_context

logger = get_logger(__name__)

router = APIRouter(tags=["documents"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_pdf(
    pdf: UploadFile | None = File(default=None, description="PDF document to index"),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadResponse:
    """
    Store and index a PDF.

    Returns:
        UploadResponse: Stored file name and number of indexed chunks

    Raises:
        ValidationError: Missing, non-PDF or oversized upload (400)
        IngestionError: Parsing, embedding or indexing failed (500)
    """
    try:
        result = await document_service.upload(
            filename=pdf.filename if pdf else None,
            stream=pdf.file if pdf else None,
            size=pdf.size if pdf else None,
        )
    except ChatPDFException:
        raise
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:upload_pdf - Unexpected failure",
            e,
            upload_name=pdf.filename if pdf else None,
        )
        raise IngestionError("Failed to process PDF", cause=e) from e
    finally:
        if pdf is not None:
            await pdf.close()

    return UploadResponse(file_name=result.file_name, chunk_count=result.chunk_count)
