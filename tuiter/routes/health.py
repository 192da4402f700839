"""
Tuiter Backend — Health Check Route
=====================================

What:  Health check endpoint for monitoring and container probes.
How:   Pings MongoDB and reports aggregate status.

Status levels:
    - healthy:   Database reachable (HTTP 200)
    - unhealthy: Database unreachable (HTTP 200 with status flag; the
                 request log middleware skips this path)
"""

import logging
import time

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from tuiter import __version__
from tuiter.database import get_database, ping
from tuiter.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module load time, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(db: AsyncDatabase = Depends(get_database)) -> HealthResponse:
    """
    Check the health of the service and its database.

    The check is a `ping` command: it verifies server selection and a
    round trip without touching any collection.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await ping(db)
    except PyMongoError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
