"""
NumAPI — Access Log Middleware
================================

What:  One access log line per request, naming the handler the path was
       routed to and the outcome the dispatch pipeline produced.
How:   Resolves the undecoded path against the route table (a pure lookup)
       and maps the response status to its outcome.
Who:   Applied to every request via Starlette middleware.
When:  After RequestIDMiddleware (uses the request ID for correlation).

Example lines:
    GET /api/isprime/97 → primality ok 200 (0.9ms) [a1b2c3d4]
    GET /api/iseven/abc → parity invalid-number 400 (0.3ms) [a1b2c3d4]
    PROPFIND /x → unrouted not-found 404 (0.2ms) [a1b2c3d4]

Outcomes and levels:
    200 ok              INFO
    400 invalid-number  INFO
    404 not-found       INFO
    422 out-of-range    WARNING
    500 failed          ERROR
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from numapi.middleware.request_id import request_id_var
from numapi.routing import request_path, route

logger = logging.getLogger("numapi.access")

OUTCOMES = {
    200: ("ok", logging.INFO),
    400: ("invalid-number", logging.INFO),
    404: ("not-found", logging.INFO),
    422: ("out-of-range", logging.WARNING),
    500: ("failed", logging.ERROR),
}


def describe_outcome(status: int):
    """(label, log level) for a response status."""
    if status in OUTCOMES:
        return OUTCOMES[status]
    return f"status-{status}", logging.ERROR if status >= 500 else logging.WARNING


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs the routed handler, outcome and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        path = request_path(request.scope)
        match = route(path)
        handler = match.route.kind.value if match else "unrouted"

        response = await call_next(request)

        outcome, level = describe_outcome(response.status_code)
        logger.log(
            level,
            "%s %s → %s %s %d (%.1fms) [%s]",
            request.method,
            path,
            handler,
            outcome,
            response.status_code,
            (time.perf_counter() - started) * 1000,
            request_id_var.get(""),
        )
        return response
