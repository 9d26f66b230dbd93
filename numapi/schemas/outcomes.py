"""
NumAPI — Pydantic Models for Routes, Arguments and Response Bodies
====================================================================

What:  Immutable value objects passed between router, validator, dispatcher
       and formatter.
How:   Frozen pydantic models; constructed per request and discarded after the
       response is sent. The route table is the only instance that lives for
       the whole process.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Routing
# ══════════════════════════════════════════════════════════════════════════


class RouteKind(str, Enum):
    """The four handlers a path can be routed to."""

    ROOT = "root"
    PARITY = "parity"
    PRIMALITY = "primality"
    FACTORIAL = "factorial"


class Route(BaseModel):
    """
    A fixed rule mapping a URL path to a handler kind.

    exact:        True → the path must equal `prefix`; False → startswith match.
    result_field: Name of the computed field in the success body
                  (None for ROOT, which has no numeric argument).
    """

    prefix: str
    kind: RouteKind
    exact: bool = False
    result_field: Optional[str] = None

    model_config = {"frozen": True}

    def matches(self, path: str) -> bool:
        if self.exact:
            return path == self.prefix
        return path.startswith(self.prefix)


class RouteMatch(BaseModel):
    """A matched route plus the raw path remainder (the token)."""

    route: Route
    token: str = ""

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Numeric Argument
# ══════════════════════════════════════════════════════════════════════════


class InvalidReason(str, Enum):
    """Why a token was rejected. Only one reason is reported today."""

    NOT_A_NUMBER = "not a number"


class ValidNumber(BaseModel):
    value: int

    model_config = {"frozen": True}


class InvalidNumber(BaseModel):
    token: str
    reason: InvalidReason = InvalidReason.NOT_A_NUMBER

    model_config = {"frozen": True}


NumericArgument = Union[ValidNumber, InvalidNumber]


# ══════════════════════════════════════════════════════════════════════════
# Response Bodies
# ══════════════════════════════════════════════════════════════════════════


class ComputationResult(BaseModel):
    """
    Successful outcome of a numeric route.

    Rendered as {"number": <number>, "<field>": <value>}, in that key order.
    """

    number: int
    field: str
    value: Union[bool, int]

    model_config = {"frozen": True}

    def to_body(self) -> dict:
        return {"number": self.number, self.field: self.value}


class MessageBody(BaseModel):
    message: str = Field(description="Greeting returned by the root route")


class ErrorBody(BaseModel):
    error: str = Field(description="Fixed, human-readable error message")
