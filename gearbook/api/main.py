"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gearbook.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from gearbook.api.middleware.error_handler import setup_exception_handlers
from gearbook.api.routes import (
    events_router,
    health_router,
    inventory_router,
    quotes_router,
    sets_router,
)
from gearbook.api.routes.health import health_payload
from gearbook.application.dto.responses import HealthResponse
from gearbook.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Migrates the database and opens the connection pool on startup,
    closes the pool on shutdown.
    """
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        debug=settings.api.debug,
        db_path=str(settings.storage.db_path),
    )

    from gearbook.infrastructure.storage.sqlite import close_pool, get_pool
    from gearbook.infrastructure.storage.sqlite.migrations import initialize_database

    results = await initialize_database()
    failed = [r.version for r in results if not r.success]
    if failed:
        logger.error("database_init_failed", failed_versions=failed)
        raise RuntimeError(f"Database migration failed: {', '.join(failed)}")
    logger.info("database_initialized", applied=len(results))

    await get_pool()
    logger.info("connection_pool_ready")

    logger.info("application_started")

    yield

    logger.info("application_stopping")
    await close_pool()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Equipment catalog, availability, bookings, sets and quotes",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(inventory_router)
    app.include_router(events_router)
    app.include_router(sets_router)
    app.include_router(quotes_router)

    # Root health endpoint (for container health checks)
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def root_health() -> HealthResponse:
        """Health check at root level."""
        return await health_payload()

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "gearbook.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )


if __name__ == "__main__":
    run()
