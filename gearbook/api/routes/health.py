"""
Health check endpoints.
"""

import time

import aiosqlite
from fastapi import APIRouter

from gearbook.application.dto.responses import HealthResponse
from gearbook.config import get_logger, get_settings

logger = get_logger(__name__)

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


async def _database_status() -> str:
    from gearbook.infrastructure.storage.sqlite import get_connection

    try:
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
        return "ok"
    except (aiosqlite.Error, OSError) as e:
        logger.warning("database_health_failed", error=str(e))
        return f"error: {e}"


async def health_payload() -> HealthResponse:
    database = await _database_status()
    return HealthResponse(
        status="healthy" if database == "ok" else "unhealthy",
        version=get_settings().app_version,
        uptime_seconds=time.time() - _start_time,
        database=database,
    )


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Service health check.

    Returns service status, uptime and database reachability.
    """
    return await health_payload()
