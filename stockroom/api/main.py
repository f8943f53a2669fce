"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockroom.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from stockroom.api.middleware.error_handler import setup_exception_handlers
from stockroom.api.routes import (
    expenses_router,
    health_router,
    purchases_router,
    reports_router,
    stocks_router,
    suppliers_router,
    usages_router,
)
from stockroom.config import configure_logging, get_logger, get_settings
from stockroom.core.exceptions import ConfigurationError

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Migrate and check the database, open the pool; close it on shutdown."""
    from stockroom.infrastructure.storage.sqlite import close_pool, get_pool
    from stockroom.infrastructure.storage.sqlite.migrations.migrator import (
        run_migrations,
        verify_schema_integrity,
    )

    settings = get_settings()
    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        db_path=str(settings.storage.db_path),
    )

    failed = [r for r in await run_migrations() if not r.success]
    if failed:
        logger.error("startup_migration_failed", version=failed[0].version, error=failed[0].error)
        raise ConfigurationError(f"Migration v{failed[0].version} failed: {failed[0].error}")

    for check in await verify_schema_integrity():
        if check["status"] == "FAIL":
            raise ConfigurationError(f"Schema check failed: {check}")
        if check["status"] == "WARN":
            logger.warning("schema_check_warning", **check)

    await get_pool()
    logger.info("application_started")

    try:
        yield
    finally:
        await close_pool()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title="Stockroom Inventory API",
        description="Stock catalog, purchases, usages and expenses with reconciled quantities",
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
    app.include_router(stocks_router)
    app.include_router(suppliers_router)
    app.include_router(purchases_router)
    app.include_router(usages_router)
    app.include_router(expenses_router)
    app.include_router(reports_router)

    # Root health endpoint (for container health checks)
    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple health check at root level."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "stockroom.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
