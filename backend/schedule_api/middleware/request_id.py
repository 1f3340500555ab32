"""
Schedule API — Request ID Middleware
=====================================

What:  Assigns a correlation ID to each request and returns it in X-Request-ID.
How:   Uses the client-provided X-Request-ID header when present, otherwise a
       short UUID; stores it in a ContextVar for loggers and error handlers.

Unexpected exceptions are turned into the 500 error envelope here rather
than in an app-level `Exception` handler: Starlette runs that handler in
ServerErrorMiddleware, outside this middleware, where the header can no
longer be added.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough for correlation and stays readable in logs
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        try:
            response = await call_next(request)
        except Exception as exc:
            # Stack trace is logged server-side only
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid, request.method, request.url.path, str(exc),
                exc_info=True,
            )
            response = JSONResponse(
                status_code=500,
                content={
                    "error": "internal_server_error",
                    "message": "An unexpected error occurred. Please try again or contact support.",
                    "details": None,
                    "request_id": rid,
                },
            )

        response.headers["X-Request-ID"] = rid
        return response
