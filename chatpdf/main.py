"""
FastAPI application entry point.

Builds the app, registers routers, middleware and exception handlers,
and runs uvicorn when executed directly.

Dependencies: fastapi, uvicorn, chatpdf.api, chatpdf.observability, chatpdf.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatpdf import __version__
from chatpdf.api.deps import get_service_cache
from chatpdf.api.errors import register_exception_handlers
from chatpdf.api.routers import ask_router, health_router, upload_router
from chatpdf.configs import Settings, get_settings
from chatpdf.observability.logger import configure_logging
from chatpdf.observability.middleware import (
    CorrelationMiddleware,
    OriginAllowListMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and the upload directory on startup and drops
    cached services on shutdown.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)
    cache.upload_store.ensure_directory()
    logger.info(
        "Application startup complete",
        extra={
            "upload_dir": cache.settings.server.upload_dir,
            "vector_store": cache.settings.vector_store.store_type,
        },
    )

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use (environment-derived singleton if None)

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    get_service_cache().configure(settings)
    allowed_origins = settings.server.allowed_origins

    app = FastAPI(
        title="ChatPDF API",
        description="Upload a PDF and ask questions answered from its content",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = innermost
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )
    app.add_middleware(OriginAllowListMiddleware, allowed_origins=allowed_origins)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(upload_router)
    app.include_router(ask_router)

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
