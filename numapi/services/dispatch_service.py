"""
NumAPI — Dispatch Service (Request Orchestrator)
==================================================

What:  Central orchestrator for the route → validate → compute → format pipeline.
How:   Composes the pure router and validator with the injected computation
       provider; raises NumApiError subclasses for every non-success outcome
       and lets the global exception handlers render them.
Who:   Called by the catch-all route handler; calls the provider.
When:  Once per request.

Orchestration Flow:
    ┌──────────┐    ┌────────────┐    ┌──────────────┐    ┌────────────┐
    │  Route   │───▶│  Validate  │───▶│   Provider   │───▶│   Format   │
    │ (404)    │    │  (400)     │    │ (422 / 500)  │    │  (200)     │
    └──────────┘    └────────────┘    └──────────────┘    └────────────┘

Failure boundary:
    Every provider call runs in a worker thread (asyncio.to_thread) under
    asyncio.wait_for. Range errors raised by the provider pass through as-is;
    a timeout becomes ComputationTimeoutError; any other exception is wrapped
    in ComputationError. Nothing is retried.

DispatchService holds no per-request state, so one instance serves every
concurrent request.
"""

import asyncio
import logging
from typing import Dict, Optional

from starlette.responses import Response

from numapi import formatting
from numapi.config import settings
from numapi.exceptions import (
    ComputationError,
    ComputationTimeoutError,
    InvalidNumberError,
    RouteNotFoundError,
)
from numapi.routing import route
from numapi.schemas.outcomes import ComputationResult, InvalidNumber, RouteKind
from numapi.services.computation_base import ComputationProvider
from numapi.validation import validate

logger = logging.getLogger(__name__)

# Provider method invoked for each numeric route
OPERATIONS: Dict[RouteKind, str] = {
    RouteKind.PARITY: "is_even",
    RouteKind.PRIMALITY: "is_prime",
    RouteKind.FACTORIAL: "factorial",
}


class DispatchService:
    """
    Business logic layer for the numeric endpoints.

    Responsibilities:
        - dispatch(): full pipeline for one request path
        - compute():  guarded provider call for an already-validated number
    """

    def __init__(self, provider: ComputationProvider, timeout: Optional[float] = None):
        self.provider = provider
        self.timeout = timeout if timeout is not None else settings.computation_timeout

    async def dispatch(self, path: str) -> Response:
        """
        Resolve `path` to a response.

        Returns:
            200 response for the root route or a successful computation.

        Raises:
            RouteNotFoundError:    no route matches
            InvalidNumberError:    the token has no leading integer
            ComputationRangeError: the provider rejected the number
            ComputationError:      the provider failed or timed out
        """
        match = route(path)
        if match is None:
            raise RouteNotFoundError(path=path)

        if match.route.kind is RouteKind.ROOT:
            return formatting.render_root()

        argument = validate(match.token)
        if isinstance(argument, InvalidNumber):
            raise InvalidNumberError(token=argument.token, reason=argument.reason.value)

        result = await self.compute(match.route.kind, argument.value)
        return formatting.render_result(
            ComputationResult(number=argument.value, field=match.route.result_field, value=result)
        )

    async def compute(self, kind: RouteKind, n: int):
        """
        Run the provider operation for `kind` on `n` inside the failure boundary.
        """
        name = OPERATIONS[kind]
        operation = getattr(self.provider, name)

        try:
            result = await asyncio.wait_for(asyncio.to_thread(operation, n), timeout=self.timeout)
        except ComputationError:
            # Range errors and provider-raised failures keep their type
            raise
        except asyncio.TimeoutError:
            logger.error("Provider %s(%d) timed out after %.2fs", name, n, self.timeout)
            raise ComputationTimeoutError(timeout=self.timeout, operation=name)
        except Exception as e:
            logger.error("Provider %s failed: %s", name, str(e), exc_info=True)
            raise ComputationError(
                operation=name,
                context={"error_type": type(e).__name__},
            ) from e

        if not self._is_valid_result(kind, result):
            logger.error("Provider %s returned unusable value %r", name, result)
            raise ComputationError(
                message=f"{name} returned {type(result).__name__}",
                operation=name,
            )
        return result

    @staticmethod
    def _is_valid_result(kind: RouteKind, result: object) -> bool:
        if kind is RouteKind.FACTORIAL:
            return isinstance(result, int) and not isinstance(result, bool)
        return isinstance(result, bool)
