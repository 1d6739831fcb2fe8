"""
FastAPI middleware for observability and origin checks.

Correlation ID, request logging and origin allow-list middleware.

Dependencies: fastapi, starlette
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from chatpdf.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request and response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """Reuse or generate a correlation ID and echo it on the response."""
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """
    Reject browser requests from origins outside the allow-list.

    Requests without an Origin header (curl, server-to-server, same-origin
    GETs) pass through. A present but unlisted origin gets 403 before any
    route runs.
    """

    def __init__(self, app: ASGIApp, allowed_origins: list[str]) -> None:
        super().__init__(app)
        self._allowed = {origin.rstrip("/") for origin in allowed_origins}

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and "*" not in self._allowed and origin.rstrip("/") not in self._allowed:
            logger.warning(
                f"{__name__}:dispatch - Rejected origin",
                extra={"origin": origin, "path": request.url.path},
            )
            return JSONResponse(status_code=403, content={"error": "Origin not allowed"})
        return await call_next(request)
