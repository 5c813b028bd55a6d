"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, load_settings
from app.middleware import PerformanceMiddleware
from app.routers import accounts_router, tokens_router
from app.services.context import ServiceContext, build_service_context
from app.utils import ServiceError, error_response, setup_logger
from app.utils.constants import INVALID_REQUEST_BODY
from app.utils.sentry_utils import capture_exception, configure_sentry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the service context at startup unless one was injected."""
    if app.state.services is None:
        app.state.services = build_service_context(app.state.settings)

    logger.info(f"Account ledger backend started (env={app.state.settings.env})")
    yield
    logger.info("Account ledger backend stopped")


async def service_error_handler(request: Request, exc: ServiceError):
    """Render service errors as ``{"error": ...}`` (4xx) or ``{"success": false, "error": ...}`` (5xx)."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{exc.__class__.__name__} ({exc.status_code}): {exc.message} "
        f"method={request.method} url={request.url}"
    )
    if exc.status_code >= 500:
        capture_exception(exc)
    return error_response(exc.message, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, reported without pydantic internals."""
    logger.warning(
        f"Invalid request body method={request.method} url={request.url}: {exc.errors()}"
    )
    return error_response(INVALID_REQUEST_BODY, status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}: {exc} "
        f"method={request.method} url={request.url}",
        exc_info=True,
    )
    capture_exception(exc)
    return error_response(str(exc), status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    services: Optional[ServiceContext] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings, read from the environment when omitted
        services: Prebuilt service context. When omitted, the context is
            built from ``settings`` during application startup.
    """
    if services is not None:
        settings = services.settings
    elif settings is None:
        settings = load_settings()

    setup_logger(log_file=settings.log_file, log_level=settings.log_level)
    if configure_sentry(settings):
        logger.info("Sentry error tracking initialized")

    app = FastAPI(
        title="Account Ledger Backend",
        description="Account deletion and token crediting for the mobile app",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services

    # CORS configuration - allow all origins by default
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(PerformanceMiddleware)

    app.include_router(accounts_router)
    app.include_router(tokens_router)

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health")
    async def health_check():
        """Liveness check. Does not touch Firebase."""
        return {"status": "healthy", "environment": settings.env}

    return app
