"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from accounts.adapters.repository.memory import InMemoryAccountDirectory
from accounts.api.dependencies import get_directory
from accounts.api.models import HealthResponse
from accounts.api.v1 import router as v1_router
from accounts.config.logging_setup import configure_logging
from accounts.config.settings import get_settings
from accounts.domain.hashing import BcryptHasher

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Account Registration API v1 - Create user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Creates one account directory and one credential hasher per application
    and stores them in app state for dependency injection. Accounts live
    only as long as the process; nothing is flushed on shutdown.
    """
    logger.info("Starting application...")

    app.state.directory = InMemoryAccountDirectory()
    app.state.hasher = BcryptHasher()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application (%d accounts discarded)", len(app.state.directory))


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, path and client address for each request."""
    client = request.client.host if request.client else "-"
    logger.info("%s %s from %s", request.method, request.url.path, client)
    return await call_next(request)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return a generic 500 without leaking internal details."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal error"},
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Account Registration API - Create accounts with unique emails and bcrypt-hashed passwords",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    app.middleware("http")(log_requests)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include v1 API routes
    app.include_router(v1_router, prefix="/v1")

    @app.get("/health", response_model=HealthResponse)
    def health_check(
        directory: InMemoryAccountDirectory = Depends(get_directory),
    ) -> HealthResponse:
        """
        Health check endpoint.

        Returns 200 OK with the number of registered accounts.
        """
        return HealthResponse(status="healthy", accounts=len(directory))

    return app


app = create_app()


def run() -> None:
    """Process entry point: configure logging and serve the app with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    logger.info("starting server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive,
        log_config=None,
    )
