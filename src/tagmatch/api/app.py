"""FastAPI application factory for TagMatch."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from tagmatch import __version__
from tagmatch.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from tagmatch.api.routers import analysis
from tagmatch.api.schemas import HealthResponse
from tagmatch.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="TagMatch",
        description="Checks that markup tags are properly opened, closed and nested.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(analysis.router, prefix="/analyze", tags=["analysis"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("tagmatch.api")
    logger.info(
        "TagMatch API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "tagmatch.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
