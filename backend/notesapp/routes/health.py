"""
Notes Backend — Health Check Route
====================================

What:  GET /health for container health checks and load balancer probes.
How:   Runs SELECT 1 against the note store. The service is only useful
       while the store answers, so a dead database makes it "unhealthy"
       and the endpoint answers 503.
"""

import logging
import time

from fastapi import APIRouter, Response, status

from notesapp import __version__
from notesapp.database import ping_store
from notesapp.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Set once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Note store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    connected = await ping_store()

    if not connected:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
