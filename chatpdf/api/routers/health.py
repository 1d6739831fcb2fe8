"""
Health check API endpoints.

Routes: GET /, GET /health

System role: Liveness checks
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

LIVENESS_MESSAGE = "ChatPDF backend is running"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Plain-text liveness string."""
    return LIVENESS_MESSAGE


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")
