"""
Notes Backend — Access Log Middleware
=======================================

What:  One log line per HTTP request on the "notesapp.access" logger.
How:   Measures wall time around the downstream handler and logs method,
       path, status, duration and request id. Bodies are never logged.

Level by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Example line:
    GET /api/notes 200 3.4ms [a1b2c3d4] from 127.0.0.1
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notesapp.middleware.request_id import request_id_var

logger = logging.getLogger("notesapp.access")

# Probed every few seconds by orchestrators; not worth a log line each
QUIET_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration for each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Request ID middleware answers with a 500; log it as such
            self._log(request, 500, start_time)
            raise

        self._log(request, response.status_code, start_time)
        return response

    def _log(self, request: Request, status: int, start_time: float) -> None:
        duration_ms = (time.perf_counter() - start_time) * 1000
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
