"""
NumAPI — Router
=================

What:  Matches a request path against the fixed, ordered route table.
How:   Exact match for "/", then prefix matches for the three numeric
       endpoints; first match wins. The path remainder after a prefix is
       returned verbatim as the token (no further splitting on "/").
Who:   Called by DispatchService for every request.

Route Table (checked in this order):
    "/"                exact   → ROOT
    "/api/isprime/"    prefix  → PRIMALITY  (is_prime)
    "/api/iseven/"     prefix  → PARITY     (is_even)
    "/api/factorial/"  prefix  → FACTORIAL  (factorial)

Examples:
    route("/api/iseven/12")    → PARITY, token "12"
    route("/api/iseven/12/x")  → PARITY, token "12/x"
    route("/api/iseven")       → None (prefix requires the trailing slash)

Paths are matched as the client sent them: percent-escapes are not decoded,
so "/api/iseven/%31%32" carries the token "%31%32".
"""

from typing import Any, Mapping, Optional, Tuple

from numapi.schemas.outcomes import Route, RouteKind, RouteMatch


ROUTES: Tuple[Route, ...] = (
    Route(prefix="/", kind=RouteKind.ROOT, exact=True),
    Route(prefix="/api/isprime/", kind=RouteKind.PRIMALITY, result_field="is_prime"),
    Route(prefix="/api/iseven/", kind=RouteKind.PARITY, result_field="is_even"),
    Route(prefix="/api/factorial/", kind=RouteKind.FACTORIAL, result_field="factorial"),
)


def route(path: str, routes: Tuple[Route, ...] = ROUTES) -> Optional[RouteMatch]:
    """
    Select the route for `path`, or None when nothing matches.

    Pure function of the path: no logging, no I/O.
    """
    for candidate in routes:
        if candidate.matches(path):
            token = "" if candidate.exact else path[len(candidate.prefix):]
            return RouteMatch(route=candidate, token=token)
    return None


def request_path(scope: Mapping[str, Any]) -> str:
    """
    The undecoded request path from an ASGI scope, query string removed.

    Falls back to the decoded `path` for servers that omit `raw_path`.
    """
    raw_path = scope.get("raw_path")
    if raw_path is None:
        return scope["path"]
    return raw_path.decode("latin-1").split("?", 1)[0]
