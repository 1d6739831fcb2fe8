"""
Ask API endpoint.

Routes: POST /ask

Dependencies: chatpdf.application.services
System role: Question-answering HTTP API
"""

from fastapi import APIRouter, Depends

from chatpdf.api.deps import get_chat_service
from chatpdf.application.services import ChatService
from chatpdf.core.exceptions import ChatPDFException, UpstreamError
from chatpdf.models.chat import AskRequest, AskResponse
from chatpdf.models.common import ErrorResponse
from chatpdf.observability import get_logger
from chatpdf.observability.log_utils import log_exception_with_context

logger = get_logger(__name__)

router = APIRouter(tags=["chat"])


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask(
    request: AskRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> AskResponse:
    """
    Answer a question about the uploaded document.

    Raises:
        ValidationError: Missing or blank question (400)
        UpstreamError: Embedding, index or model failure (500)
        EmptyResponseError: Model returned no text (500)
    """
    try:
        answer = await chat_service.ask(request.question, request.conversation_id)
    except ChatPDFException:
        raise
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:ask - Unexpected failure",
            e,
            conversation_id=request.conversation_id,
            question=request.question,
        )
        raise UpstreamError("Failed to answer question", cause=e) from e

    return AskResponse(answer=answer)
