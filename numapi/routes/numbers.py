"""
NumAPI — Catch-all Route Handler
==================================

What:  Single endpoint receiving every path and every HTTP method.
How:   Hands the undecoded request path to DispatchService, which owns the
       route table. Errors raised by the service are rendered by the global
       exception handlers registered in main.py.
Who:   Every HTTP client of the service.

Routing constraints handled by numapi.routing, not by FastAPI:
    - The remainder after a prefix is passed verbatim, slashes and
      percent-escapes included ("/api/iseven/12/x" → token "12/x")
    - Unmatched paths answer the plain-text 404 for any method, standard or
      not (no 405 responses, no trailing-slash redirects)

DispatchEndpoint is a plain ASGI callable. Starlette applies no method
restriction to a non-function endpoint registered with methods=None.
"""

from starlette.requests import Request
from starlette.types import Receive, Scope, Send

from numapi.routing import request_path
from numapi.services.dispatch_service import DispatchService

CATCH_ALL_PATH = "/{path:path}"


def get_dispatch_service(request: Request) -> DispatchService:
    """The DispatchService built by create_app()."""
    return request.app.state.dispatch_service


class DispatchEndpoint:
    """ASGI endpoint running every request through DispatchService."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        service = get_dispatch_service(request)
        response = await service.dispatch(request_path(scope))
        await response(scope, receive, send)
