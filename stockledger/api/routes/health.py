"""
Health check endpoints.
"""

import time

from fastapi import APIRouter

from stockledger import __version__
from stockledger.application.dto.responses import HealthResponse
from stockledger.config import get_settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health() -> HealthResponse:
    """
    Database health check.

    Tests SQLite connectivity and response time.
    """
    backend = get_settings().storage.backend
    if backend == "memory":
        return HealthResponse(
            status="healthy",
            version=__version__,
            uptime_seconds=time.time() - _start_time,
            database={"name": "memory", "available": True},
        )

    from stockledger.infrastructure.storage.sqlite import get_connection

    try:
        start = time.time()
        async with get_connection() as conn:
            await conn.execute("SELECT 1")
        latency = (time.time() - start) * 1000
        db_status = {"name": "sqlite", "available": True, "latency_ms": latency}

    except Exception as e:
        db_status = {"name": "sqlite", "available": False, "error": str(e)}

    return HealthResponse(
        status="healthy" if db_status["available"] else "unhealthy",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
    )
