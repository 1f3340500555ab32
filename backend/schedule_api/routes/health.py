"""
Schedule API — Info & Health Routes
====================================

What:  GET / (liveness/info) and GET /health (store connectivity probe).
Who:   GET / is the plain liveness probe; /health is meant for Docker
       health checks and load balancers.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (the service cannot answer any request)
"""

import logging
import time

from fastapi import APIRouter, Depends

from schedule_api import __version__
from schedule_api.database import Database, get_database
from schedule_api.schemas.common import HealthResponse, InfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get("/", response_model=InfoResponse, summary="Service info")
async def info() -> InfoResponse:
    return InfoResponse(info="schedule API")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(database: Database = Depends(get_database)) -> HealthResponse:
    """
    Probe the store with SELECT 1 and report the aggregate status.

    Always answers 200; monitors read the `status` field.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await database.ping()
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
