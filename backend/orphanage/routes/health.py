"""
Orphanage API — Health Check Route
===================================

What:  Liveness endpoint for container probes and load balancers.
How:   Runs `SELECT 1` against the store and reports uptime.

Status levels:
    - healthy:   Store reachable (HTTP 200)
    - unhealthy: Store unreachable (HTTP 503)

The route is left out of the OpenAPI document, which lists only the
employee and child endpoints.
"""

import logging
import time

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError

from orphanage import __version__
from orphanage.database import Store, get_store
from orphanage.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    include_in_schema=False,
)
async def health_check(
    response: Response,
    store: Store = Depends(get_store),
) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await store.ping()
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: store unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
