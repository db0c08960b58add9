"""
Site Content API — Health Check Route
======================================

What:  GET /health for container probes and load balancers.
How:   Runs SELECT 1 on the engine. A database that cannot answer makes the
       service "unhealthy"; there are no other dependencies to probe.
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from content_api import __version__
from content_api.database import engine
from content_api.schemas.base import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", e)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
