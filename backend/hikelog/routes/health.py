"""
HikeLog Backend - Health Check Route
======================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Sends a `ping` command to MongoDB and reports the aggregate status.
Who:   Called by container health checks, load balancers, and monitoring.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503)
"""

import asyncio
import logging
import time

from fastapi import APIRouter, Request, Response

from hikelog import __version__
from hikelog.config import settings
from hikelog.database import ping_database
from hikelog.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the backend service and its database.",
)
async def health_check(request: Request, response: Response) -> HealthResponse:
    """
    Check MongoDB connectivity with a lightweight `ping`.

    The ping is bounded by the same timeout as regular store operations.
    """
    db_status = "connected"
    overall = "healthy"

    database = getattr(request.app.state, "database", None)
    try:
        if database is None:
            raise RuntimeError("database not initialized")
        await asyncio.wait_for(
            ping_database(database), timeout=settings.store_timeout_seconds
        )
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
