"""
NumAPI — Custom Exception Hierarchy
=====================================

What:  Defines application-specific exceptions for every way a request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       render the canonical error bodies through numapi.formatting.
Who:   Raised by the dispatch service; caught by global handlers.
When:  During request processing, after routing has been attempted.

Exception Hierarchy:
    NumApiError (base)
    ├── InvalidNumberError             → 400 {"error":"Invalid number"}
    ├── RouteNotFoundError             → 404 "404 Not Found" (plain text)
    └── ComputationError               → 500 {"error":"Computation failed"}
        ├── ComputationTimeoutError    → 500 (provider exceeded computation_timeout)
        └── ComputationRangeError      → 422 {"error":"Number out of range"}
            ├── ComputationDomainError → 422 (e.g. factorial of a negative number)
            └── ComputationOverflowError → 422 (result wider than the integer width)

Validation errors are resolved inside the dispatch layer and never reach the
computation provider. Provider errors are caught at the call boundary and
re-raised as ComputationError subclasses, so nothing raised by a provider
escapes as an unhandled exception.
"""

from typing import Any, Dict, Optional


class NumApiError(Exception):
    """
    Base exception for all NumAPI errors.

    Attributes:
        message:  Description of the failure (logged; response bodies are fixed)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidNumberError(NumApiError):
    """
    Raised when the path token has no parseable leading integer.

    HTTP:    400 Bad Request
    Context: the raw token and the validator's reason.
    """

    def __init__(
        self,
        token: str = "",
        reason: str = "not a number",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["token"] = token
        ctx["reason"] = reason
        super().__init__(message=f"Token {token!r} is {reason}", context=ctx)
        self.token = token
        self.reason = reason


class RouteNotFoundError(NumApiError):
    """Raised when no route in the table matches the request path. HTTP 404."""

    def __init__(self, path: str = "", context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(message=f"No route matches '{path}'", context=ctx)
        self.path = path


class ComputationError(NumApiError):
    """
    Raised when the computation provider fails or returns an unusable value.

    What:    Any exception escaping a provider call, wrapped at the call boundary.
    HTTP:    500 Internal Server Error
    No retry is attempted; the failure is surfaced to the client immediately.
    """

    def __init__(
        self,
        message: str = "Computation failed",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation


class ComputationTimeoutError(ComputationError):
    """Raised when a provider call exceeds the configured computation_timeout."""

    def __init__(
        self,
        timeout: float = 0.0,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["timeout"] = timeout
        super().__init__(
            message=f"Computation did not finish within {timeout}s",
            operation=operation,
            context=ctx,
        )
        self.timeout = timeout


class ComputationRangeError(ComputationError):
    """
    Raised by a provider when the argument is outside the range it supports.

    HTTP:    422 Unprocessable Entity
    The number parsed fine, so this is not a 400; the provider simply has no
    defined answer for it.
    """

    def __init__(
        self,
        message: str = "Number out of range",
        number: Optional[int] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if number is not None:
            ctx["number"] = number
        super().__init__(message=message, operation=operation, context=ctx)
        self.number = number


class ComputationDomainError(ComputationRangeError):
    """Raised for inputs outside the mathematical domain (negative factorial)."""


class ComputationOverflowError(ComputationRangeError):
    """
    Raised when an input or result does not fit the provider's integer width.

    Example: factorial(21) with the default 64-bit width, since
    21! = 51090942171709440000 > 2**64 - 1.
    """
