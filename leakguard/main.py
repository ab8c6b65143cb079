"""FastAPI application entry point for the leakguard search demo."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from leakguard.config import Settings, get_settings
from leakguard.logging_config import setup_logging
from leakguard.models.errors import GenericError
from leakguard.services.renderer import DEFAULT_ERROR_LOGGER, render
from leakguard.services.search import SECURE_ROUTE, handle_secure_search
from leakguard.services.vulnerable import VULNERABLE_ROUTE, handle_vulnerable_search

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

WELCOME_BODY = (
    "<h1>Welcome! Try /vulnerable-search?product=test or /secure-search?product=test</h1>"
)
NOT_FOUND_BODY = "<h1>404 Not Found</h1>"


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    timestamp: str


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("leakguard starting up")
    if settings.expose_vulnerable_search:
        logger.warning("Vulnerable search route is enabled", extra={"route": VULNERABLE_ROUTE})

    yield

    logger.info("leakguard shutting down")


def create_app(
    settings: Settings | None = None,
    error_logger: logging.Logger | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration; loaded from the environment when omitted.
        error_logger: Operator channel for failure detail. Defaults to the
            ``leakguard.errors`` logger.
    """
    settings = settings or get_settings()

    application = FastAPI(
        title="leakguard",
        version=VERSION,
        description="Verbose error leakage and its remediation, side by side",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.error_logger = error_logger or logging.getLogger(DEFAULT_ERROR_LOGGER)

    @application.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code == 404:
            return HTMLResponse(content=NOT_FOUND_BODY, status_code=404)
        return await http_exception_handler(request, exc)

    @application.get("/", response_class=HTMLResponse)
    async def root() -> HTMLResponse:
        """Landing page pointing at both search routes."""
        return HTMLResponse(content=WELCOME_BODY)

    @application.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            version=VERSION,
            timestamp=datetime.now(tz=UTC).isoformat(),
        )

    @application.get(SECURE_ROUTE, response_class=HTMLResponse)
    async def secure_search(request: Request, product: str | None = None) -> HTMLResponse:
        """Search with failures rendered as a fixed, generic page."""
        return handle_secure_search(product, request.app.state.error_logger)

    if settings.expose_vulnerable_search:

        @application.get(VULNERABLE_ROUTE, response_class=HTMLResponse)
        async def vulnerable_search(
            request: Request, product: str | None = None
        ) -> HTMLResponse:
            """Search that leaks backend error detail; for comparison only."""
            error_logger: logging.Logger = request.app.state.error_logger
            if product is None:
                return render(GenericError(), error_logger, route=VULNERABLE_ROUTE).response
            return handle_vulnerable_search(product, error_logger)

    return application


app = create_app()


def cli_entry() -> None:
    """CLI entry point for running the server."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        "leakguard.main:app",
        host=settings.host,
        port=settings.port,
    )
