"""
NumAPI — Router Unit Tests
============================

What:  Tests for route() and the fixed route table.

Test Strategy:
    ✅ Exact match for "/" only
    ✅ Prefix matches and their first-match-wins order
    ✅ Token is the verbatim remainder, slashes included
    ✅ Everything else yields no match
    ✅ request_path() keeps percent-escapes and drops the query string
"""

import pytest
from pydantic import ValidationError

from numapi.routing import ROUTES, request_path, route
from numapi.schemas.outcomes import Route, RouteKind


class TestRootRoute:

    def test_root_path_matches(self):
        match = route("/")
        assert match is not None
        assert match.route.kind is RouteKind.ROOT
        assert match.token == ""

    def test_root_is_exact_only(self):
        """The root route must not behave as a prefix for every path."""
        assert route("/hello") is None

    def test_empty_path_does_not_match(self):
        assert route("") is None


class TestNumericRoutes:

    @pytest.mark.parametrize(
        "path, kind, field",
        [
            ("/api/isprime/7", RouteKind.PRIMALITY, "is_prime"),
            ("/api/iseven/7", RouteKind.PARITY, "is_even"),
            ("/api/factorial/7", RouteKind.FACTORIAL, "factorial"),
        ],
    )
    def test_prefix_routes(self, path, kind, field):
        match = route(path)
        assert match.route.kind is kind
        assert match.route.result_field == field
        assert match.token == "7"

    def test_empty_token_still_matches(self):
        """The validator, not the router, rejects an empty token."""
        match = route("/api/isprime/")
        assert match.route.kind is RouteKind.PRIMALITY
        assert match.token == ""

    def test_token_keeps_extra_segments(self):
        match = route("/api/iseven/12/x")
        assert match.route.kind is RouteKind.PARITY
        assert match.token == "12/x"

    def test_token_is_not_parsed(self):
        assert route("/api/factorial/abc").token == "abc"

    def test_prefix_requires_trailing_slash(self):
        assert route("/api/iseven") is None
        assert route("/api/isevenx/4") is None

    def test_prefix_is_case_sensitive(self):
        assert route("/API/iseven/4") is None

    @pytest.mark.parametrize("path", ["/unknown/path", "/api", "/api/", "/favicon.ico", "//"])
    def test_unknown_paths(self, path):
        assert route(path) is None


class TestRouteTable:

    def test_order(self):
        assert [r.kind for r in ROUTES] == [
            RouteKind.ROOT,
            RouteKind.PRIMALITY,
            RouteKind.PARITY,
            RouteKind.FACTORIAL,
        ]

    def test_routes_are_immutable(self):
        with pytest.raises(ValidationError):
            ROUTES[1].prefix = "/api/other/"

    def test_first_match_wins(self):
        """With overlapping prefixes the earlier entry is selected."""
        table = (
            Route(prefix="/api/", kind=RouteKind.PARITY, result_field="is_even"),
            Route(prefix="/api/isprime/", kind=RouteKind.PRIMALITY, result_field="is_prime"),
        )
        match = route("/api/isprime/5", routes=table)
        assert match.route.kind is RouteKind.PARITY
        assert match.token == "isprime/5"


class TestRequestPath:

    def test_keeps_percent_escapes(self):
        scope = {"path": "/api/iseven/12", "raw_path": b"/api/iseven/%31%32"}
        assert request_path(scope) == "/api/iseven/%31%32"

    def test_strips_query_string(self):
        scope = {"path": "/", "raw_path": b"/?x=1"}
        assert request_path(scope) == "/"

    def test_falls_back_to_decoded_path(self):
        assert request_path({"path": "/api/factorial/5"}) == "/api/factorial/5"

    def test_escaped_slash_is_not_a_prefix_match(self):
        scope = {"path": "/api/iseven/12", "raw_path": b"/api%2Fiseven/12"}
        assert route(request_path(scope)) is None
