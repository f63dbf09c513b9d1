"""
Main FastAPI application entry point.

Uses Application Factory Pattern.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from relais import __version__
from relais.config.settings import Settings, get_settings
from relais.di.container import (
    get_container,
    initialize_container,
    shutdown_container,
)
from relais.domain.exceptions import RelaisException
from relais.infrastructure.monitoring import get_logger, setup_logging
from relais.presentation.api.middleware import (
    RequestIDMiddleware,
    relais_exception_handler,
    validation_exception_handler,
)
from relais.presentation.api.routes import (
    governance,
    messages,
    proposals,
    transactions,
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory - creates and configures FastAPI app.

    Args:
        settings: Optional Settings instance (for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    # Structured logging (JSON only in production)
    json_logs = settings.ENV == "production"
    setup_logging(level=settings.LOG_LEVEL, json_logs=json_logs)
    logger = get_logger(__name__)

    logger.info(f"Creating Relais application (ENV={settings.ENV})")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Relais application...")
        await initialize_container()

        if not settings.NOTIFICATION_WEBHOOK:
            logger.info("No notification webhook configured, notifications off")

        logger.info("Relais application started successfully")

        yield

        logger.info("Shutting down Relais application...")
        await shutdown_container()
        logger.info("Relais application shutdown complete")

    app = FastAPI(
        title="Relais API",
        description="Signature relay backend for governance votes and delegations",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware chain (order matters!)
    # 1. Request ID middleware (FIRST for tracking)
    app.add_middleware(RequestIDMiddleware)

    # 2. GZip compression middleware
    app.add_middleware(
        GZipMiddleware,
        minimum_size=1000,
        compresslevel=6,
    )

    # 3. CORS middleware (LAST)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(RelaisException, relais_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Register routes
    app.include_router(governance.router, prefix="/api")
    app.include_router(messages.router, prefix="/api")
    app.include_router(transactions.router, prefix="/api")
    app.include_router(proposals.router, prefix="/api")

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint."""
        return {
            "service": settings.APP_NAME,
            "status": "running",
            "version": __version__,
            "description": "Signature relay for governance votes and delegations",
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health check endpoint.

        Reports database connectivity and notification configuration.
        """
        container = get_container()
        db_healthy = await container.database.health_check()

        return {
            "status": "healthy" if db_healthy else "degraded",
            "version": __version__,
            "components": {
                "database": {
                    "status": "healthy" if db_healthy else "unhealthy",
                },
                "notifications": {
                    "enabled": bool(settings.NOTIFICATION_WEBHOOK),
                },
            },
        }

    if settings.METRICS_ENABLED:

        @app.get("/metrics", tags=["Monitoring"])
        async def metrics():
            """
            Prometheus metrics endpoint.

            Returns metrics in Prometheus text format for scraping.
            """
            return Response(
                content=generate_latest(),
                media_type=CONTENT_TYPE_LATEST,
            )

    logger.info("Relais application created successfully")
    return app


def get_app() -> FastAPI:
    """
    Get or create application instance (lazy initialization).

    For uvicorn: uvicorn relais.main:get_app --factory
    """
    return create_app()


# Created on first access by ``uvicorn relais.main:app``
app: Optional[FastAPI] = None


def __getattr__(name: str):
    """Module-level __getattr__ for lazy app initialization."""
    global app
    if name == "app":
        if app is None:
            app = create_app()
        return app
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "relais.main:get_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
