"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from stockroom.api.dependencies import get_app_settings
from stockroom.application.dto.responses import HealthResponse, ProviderHealthResponse
from stockroom.config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check. Returns service status and uptime."""
    return HealthResponse(
        status="healthy",
        version=get_app_settings().app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def database_health() -> HealthResponse:
    """Database health check. Runs a trivial query through the pool."""
    from stockroom.infrastructure.storage.sqlite import get_connection

    try:
        start = time.time()
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
        db_status = ProviderHealthResponse(
            name="sqlite",
            available=True,
            latency_ms=(time.time() - start) * 1000,
        )
    except Exception as e:
        logger.warning("database_health_failed", error=str(e))
        db_status = ProviderHealthResponse(name="sqlite", available=False, error=str(e))

    return HealthResponse(
        status="healthy" if db_status.available else "degraded",
        version=get_app_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
