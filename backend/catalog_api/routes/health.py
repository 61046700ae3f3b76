"""
Catalog API — Health Check Route
=================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings the document store (SELECT 1) and reports aggregate status.
Who:   Called by container health checks, load balancers and monitoring.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 200, flagged in the body)
"""

import logging
import time

from fastapi import APIRouter

from catalog_api import __version__
from catalog_api.database import DocumentStore
from catalog_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

# Process start, for uptime reporting
_start_time = time.time()


def build_health_router(store: DocumentStore) -> APIRouter:
    router = APIRouter(tags=["Health"])

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Service health check",
        description="Returns the health of the service and its database connection.",
    )
    async def health_check() -> HealthResponse:
        db_ok = await store.ping()
        if not db_ok:
            logger.warning("Health check: database unreachable")

        return HealthResponse(
            status="healthy" if db_ok else "unhealthy",
            version=__version__,
            database="connected" if db_ok else "disconnected",
            uptime_seconds=round(time.time() - _start_time, 2),
        )

    return router
