"""
HRMS Employee API — Health Check Route
========================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Pings MongoDB through the repository and reports aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   MongoDB answered the ping (HTTP 200)
    - unhealthy: MongoDB unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from hrms import __version__
from hrms.database import get_employee_repository
from hrms.repositories.base import EmployeeRepository
from hrms.schemas.employee import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    if not await repository.ping():
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
