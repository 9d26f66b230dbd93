"""
NumAPI — Request ID Middleware
================================

What:  Assigns a correlation ID to each incoming request.
How:   Takes the client's X-Request-ID header when present, otherwise
       generates a short UUID; stores it in a ContextVar for loggers.
Who:   Applied to every request via Starlette middleware.
When:  Runs before RequestLoggingMiddleware so access log lines carry the ID.

Only a client-supplied ID is echoed back in the X-Request-ID response header.
Generated IDs stay server-side, so repeating an identical request produces an
identical response.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the same event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for log correlation."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        client_rid = request.headers.get("X-Request-ID")
        rid = client_rid or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        if client_rid:
            response.headers["X-Request-ID"] = client_rid

        return response
