"""
NumAPI — FastAPI Application Factory
======================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn numapi.main:app) or by run() / the `numapi`
       console script.
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │   Req ID     │→│  Logging        │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ANY /{path}  → DispatchService               │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Invalid→400 │ NotFound→404 │ Range→422 │ 500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

No /docs, /redoc or /openapi.json: every path outside the route table must
keep answering the plain-text 404.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request

from numapi import __version__, formatting
from numapi.config import settings
from numapi.exceptions import (
    ComputationError,
    ComputationRangeError,
    InvalidNumberError,
    RouteNotFoundError,
)
from numapi.middleware.logging import RequestLoggingMiddleware
from numapi.middleware.request_id import RequestIDMiddleware, request_id_var
from numapi.routes import numbers
from numapi.services.computation_base import ComputationProvider
from numapi.services.dispatch_service import DispatchService
from numapi.services.provider_factory import build_provider

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # numapi.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("NumAPI %s starting up...", __version__)
    logger.info(
        "Computation provider: %s (timeout %.1fs)",
        type(app.state.dispatch_service.provider).__name__,
        app.state.dispatch_service.timeout,
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        InvalidNumberError     → 400 {"error":"Invalid number"}
        RouteNotFoundError     → 404 "404 Not Found" (plain text)
        ComputationRangeError  → 422 {"error":"Number out of range"}
        ComputationError       → 500 {"error":"Computation failed"}
        Exception (fallback)   → 500 {"error":"Internal server error"}

    Bodies are fixed strings from numapi.formatting; exception messages and
    context are logged server-side only.
    """

    @app.exception_handler(InvalidNumberError)
    async def handle_invalid_number(request: Request, exc: InvalidNumberError):
        rid = request_id_var.get("")
        logger.debug("[%s] Invalid number: %s", rid, exc.message)
        return formatting.render_error(exc)

    @app.exception_handler(RouteNotFoundError)
    async def handle_not_found(request: Request, exc: RouteNotFoundError):
        return formatting.render_error(exc)

    @app.exception_handler(ComputationRangeError)
    async def handle_out_of_range(request: Request, exc: ComputationRangeError):
        rid = request_id_var.get("")
        logger.info("[%s] Out of range: %s", rid, exc.message)
        return formatting.render_error(exc)

    @app.exception_handler(ComputationError)
    async def handle_computation_error(request: Request, exc: ComputationError):
        rid = request_id_var.get("")
        logger.error("[%s] Computation error: %s | Context: %s", rid, exc.message, exc.context)
        return formatting.render_error(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all for truly unexpected errors. Stack trace is logged, never returned."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return formatting.render_error(exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    provider: Optional[ComputationProvider] = None,
    computation_timeout: Optional[float] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        provider:            Computation provider to inject. Defaults to the one
                             selected by settings (built-in when unset).
        computation_timeout: Per-call provider timeout in seconds. Defaults to
                             settings.computation_timeout.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="NumAPI",
        description="Parity, primality and factorial for an integer in the URL path.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.dispatch_service = DispatchService(
        provider=provider if provider is not None else build_provider(settings),
        timeout=computation_timeout,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.add_route(
        numbers.CATCH_ALL_PATH,
        numbers.DispatchEndpoint(),
        methods=None,
        name="dispatch",
        include_in_schema=False,
    )

    return app


def run() -> None:
    """Start uvicorn with the configured host and port (the `numapi` command)."""
    uvicorn.run(
        "numapi.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `numapi.main:app` to be importable
app = create_app()
