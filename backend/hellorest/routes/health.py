"""
HelloRest — Health Check Route
===============================

What:  Liveness endpoint for load balancers and container health checks.
How:   The service has no external dependencies, so it is healthy whenever it
       can answer; the body also reports the route count and binding mode.
"""

import time

from fastapi import APIRouter

from hellorest import __version__
from hellorest.config import settings
from hellorest.routes import ROUTE_TABLE
from hellorest.schemas.health import HealthResponse

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        routes=len(ROUTE_TABLE),
        binding_mode=settings.binding_mode.value,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
