"""
HRMS Employee API — Access Log Middleware
===========================================

What:  One structured log line for every HTTP request.
How:   Times the request, then logs method, path, status, duration and client
       IP with the request ID from RequestIDMiddleware.

Example line:
    2026-10-19T12:00:00 [INFO] hrms.access: POST /employee 200 4.2ms [1f0c9a2e] from 10.0.0.7

Request and response bodies are never logged (employee records hold salaries).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from hrms.middleware.request_id import request_id_var

logger = logging.getLogger("hrms.access")

# Probe endpoints polled every few seconds
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status, duration and client IP for each request.

    Log level follows the status code:
        5xx → ERROR
        4xx → WARNING
        otherwise → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
