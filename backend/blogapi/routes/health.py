"""
BlogAPI Backend: Health Check Route
====================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs `SELECT 1` through a request-scoped session and reports status.
Who:   Called by container health checks, load balancers, and monitoring.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (the endpoint still answers 200 so
                 monitors can read the body)
"""

import logging
import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogapi import __version__
from blogapi.database import get_db_session
from blogapi.schemas.post import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(db: AsyncSession = Depends(get_db_session)) -> HealthResponse:
    """Probe the database and return the aggregate service status."""
    db_status = "connected"
    overall = "healthy"

    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        await db.rollback()
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
