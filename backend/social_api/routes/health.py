"""
Social Media API Backend: Health Check Route
==============================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 against the engine and reports the result.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   database reachable
    - unhealthy: database unreachable (still HTTP 200; the body carries it)
"""

import logging
import time

from fastapi import APIRouter
from sqlalchemy import text

from social_api import __version__
from social_api.database import engine
from social_api.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: set once when the module loads
_start_time = time.time()


async def health_check() -> HealthResponse:
    """Probe database connectivity and report uptime."""
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
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


# ── Routing Table ─────────────────────────────────────────────────────────
ROUTES = [
    (
        "GET", "/health", health_check,
        {"response_model": HealthResponse, "summary": "Service health check"},
    ),
]

for method, path, endpoint, options in ROUTES:
    router.add_api_route(path, endpoint, methods=[method], **options)
