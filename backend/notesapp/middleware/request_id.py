"""
Notes Backend — Request ID Middleware
=======================================

What:  Tags every request with a short correlation id.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates one; stores it in a ContextVar for loggers and error
       handlers, and echoes it on the response.

Unhandled exceptions are turned into the 500 error body here, so the
response still carries the id, passes back through CORS and is counted
by the access log.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    """First 8 hex chars of a UUID4; enough to correlate log lines."""
    return uuid.uuid4().hex[:8]


def unexpected_error_response(rid: str) -> JSONResponse:
    """500 body for exceptions no handler claimed; details stay in the log."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
            "request_id": rid,
        },
        headers={REQUEST_ID_HEADER: rid},
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns request ids and exposes them via request.state and the response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or new_request_id()

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            return unexpected_error_response(rid)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
