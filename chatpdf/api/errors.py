"""
Exception handlers.

Map the ChatPDF exception hierarchy onto HTTP status codes and a
uniform {"error", "details"} body.

Dependencies: fastapi
System role: Error translation for the HTTP surface
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from chatpdf.core.exceptions import ChatPDFException, UpstreamError, ValidationError
from chatpdf.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(
        f"{__name__}:validation_error_handler - {exc.message}",
        extra={"path": request.url.path, **exc.details},
    )
    return _error_response(400, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    logger.info(
        f"{__name__}:request_validation_error_handler - {message}",
        extra={"path": request.url.path, "location": location},
    )
    return _error_response(400, "Invalid request", f"{location}: {message}" if location else message)


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(
        f"{__name__}:upstream_error_handler - {exc.message}",
        extra={"path": request.url.path, **exc.details},
    )
    return _error_response(500, exc.message, exc.cause)


async def chatpdf_exception_handler(request: Request, exc: ChatPDFException) -> JSONResponse:
    logger.error(
        f"{__name__}:chatpdf_exception_handler - {exc.message}",
        extra={"path": request.url.path, **exc.details},
    )
    return _error_response(500, exc.message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every handler to the application."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(ChatPDFException, chatpdf_exception_handler)
