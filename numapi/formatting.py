"""
NumAPI — Response Formatter
=============================

What:  Renders every terminal outcome into a Starlette response.
How:   One function per outcome family; error rendering maps the exception
       hierarchy to a fixed status code and a fixed body.
Who:   Called by the catch-all route (success) and by the global exception
       handlers in main.py (errors).

Status/Body Table:
    ROOT                      → 200 {"message":"Hello world"}
    ComputationResult         → 200 {"number":n,"<field>":value}
    InvalidNumberError        → 400 {"error":"Invalid number"}
    RouteNotFoundError        → 404 404 Not Found        (text/plain, not JSON)
    ComputationRangeError     → 422 {"error":"Number out of range"}
    ComputationError          → 500 {"error":"Computation failed"}
    anything else             → 500 {"error":"Internal server error"}

JSONResponse serializes compactly (no whitespace after ":" or ","), so the
bodies above are byte-exact. Bodies never include exception details.
"""

from starlette.responses import JSONResponse, PlainTextResponse, Response

from numapi.exceptions import (
    ComputationError,
    ComputationRangeError,
    InvalidNumberError,
    RouteNotFoundError,
)
from numapi.schemas.outcomes import ComputationResult, ErrorBody, MessageBody

ROOT_MESSAGE = "Hello world"
NOT_FOUND_TEXT = "404 Not Found"

INVALID_NUMBER = "Invalid number"
OUT_OF_RANGE = "Number out of range"
COMPUTATION_FAILED = "Computation failed"
INTERNAL_ERROR = "Internal server error"


def render_root() -> Response:
    return JSONResponse(MessageBody(message=ROOT_MESSAGE).model_dump())


def render_result(result: ComputationResult) -> Response:
    return JSONResponse(result.to_body())


def render_not_found() -> Response:
    return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)


def _error(status_code: int, message: str) -> Response:
    return JSONResponse(ErrorBody(error=message).model_dump(), status_code=status_code)


def render_error(exc: Exception) -> Response:
    """
    Map an exception to its canonical error response.

    Order matters: subclasses are checked before their parents
    (ComputationRangeError before ComputationError).
    """
    if isinstance(exc, InvalidNumberError):
        return _error(400, INVALID_NUMBER)
    if isinstance(exc, RouteNotFoundError):
        return render_not_found()
    if isinstance(exc, ComputationRangeError):
        return _error(422, OUT_OF_RANGE)
    if isinstance(exc, ComputationError):
        return _error(500, COMPUTATION_FAILED)
    return _error(500, INTERNAL_ERROR)
