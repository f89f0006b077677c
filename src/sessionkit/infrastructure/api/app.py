"""FastAPI application factory and configuration.

This module provides the application factory function for creating and
configuring the FastAPI application with middleware, routes, exception
handlers and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sessionkit.core.config import get_settings
from sessionkit.core.errors import AppError, ErrorCode
from sessionkit.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from sessionkit.infrastructure.jobs import TokenCleanupScheduler
from sessionkit.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Initializes the database and starts the expired token cleanup loop on
    startup; stops both on shutdown.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting SessionKit",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    scheduler: TokenCleanupScheduler | None = None
    if settings.token_cleanup_enabled:
        scheduler = TokenCleanupScheduler(
            get_db_manager().session_factory,
            interval_seconds=settings.token_cleanup_interval_seconds,
            retention=timedelta(days=settings.refresh_token_retention_days),
        )
        scheduler.start()
    app.state.token_cleanup = scheduler

    yield

    logger.info("Shutting down SessionKit")
    if scheduler is not None:
        await scheduler.stop()
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
        description="User registration, login and JWT session refresh",
        lifespan=lifespan,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Returns 200 while the service is running."""
        return {
            "status": "healthy",
            "service": get_settings().app_name,
            "version": get_settings().app_version,
        }


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from sessionkit.infrastructure.api.routes import auth_router, users_router

    settings = get_settings()
    app.include_router(auth_router, prefix=f"{settings.api_prefix}/auth", tags=["auth"])
    app.include_router(users_router, prefix=f"{settings.api_prefix}/users", tags=["users"])


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Map classified errors to their HTTP status and a uniform body."""
        log = logger.warning if exc.is_operational else logger.error
        log(
            "Request failed",
            path=str(request.url.path),
            method=request.method,
            code=exc.code.value,
            status_code=exc.status_code,
            is_operational=exc.is_operational,
            error=exc.message,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url.path),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content=AppError(ErrorCode.INTERNAL_ERROR, "Internal server error").to_dict(),
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request and tag it with a correlation ID."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )

        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


# Create the application instance
app = create_app()
