"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogverse.core.config import get_settings
from blogverse.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from blogverse.domain.services.auth_result import INTERNAL_ERROR, ErrorKind
from blogverse.infrastructure.api.errors import error_response
from blogverse.infrastructure.api.schemas import FieldError
from blogverse.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)

_KIND_BY_STATUS: dict[int, ErrorKind] = {
    401: ErrorKind.UNAUTHORIZED,
    404: ErrorKind.NOT_FOUND,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and the database on startup, and closes the
    database on shutdown.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting BlogVerse",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )
    if settings.uses_default_secret and settings.is_production:
        logger.warning("Running in production with the default secret key")

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down BlogVerse")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="BlogVerse authentication API",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints."""

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint.

        Returns 200 if the service is running. Does not check
        database connectivity.
        """
        return {
            "status": "healthy",
            "service": "BlogVerse",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check including database connectivity."""
        if await get_db_manager().check_connection():
            return {"status": "ready", "service": "BlogVerse", "database": "connected"}
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "service": "BlogVerse", "database": "disconnected"},
        )


def register_routes(app: FastAPI) -> None:
    """Register API routes."""
    from blogverse.infrastructure.api.routes import auth_router, users_router

    settings = get_settings()

    app.include_router(auth_router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    app.include_router(users_router, prefix=f"{settings.api_prefix}/users", tags=["users"])


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers that answer with the error envelope."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            FieldError(
                field=".".join(str(part) for part in error["loc"] if part != "body"),
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        logger.info("Request validation failed", path=request.url.path, error_count=len(errors))
        return error_response(ErrorKind.VALIDATION, "Validation error", errors=errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = _KIND_BY_STATUS.get(exc.status_code)
        if kind is None:
            return JSONResponse(
                status_code=exc.status_code,
                content={"success": False, "message": str(exc.detail), "data": None},
                headers=getattr(exc, "headers", None),
            )
        return error_response(kind, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return error_response(ErrorKind.INTERNAL, INTERNAL_ERROR)


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log all requests and add a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info("Request started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()
