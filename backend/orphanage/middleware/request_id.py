"""
Orphanage API — Request ID Middleware
======================================

What:  Assigns a short correlation ID to each request and echoes it back.
Why:   Every log line for one request carries the same ID, and clients can
       quote the X-Request-ID response header when reporting a problem.
How:   Reuses a client-sent X-Request-ID or generates one and stores it in a
       ContextVar read by the access log and the exception handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets request_id_var and the X-Request-ID response header."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request_id_var.set(rid)

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
