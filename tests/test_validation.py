"""
NumAPI — Validator Unit Tests
===============================

What:  Tests for the permissive integer parser.
Why:   "12abc" must keep parsing as 12; tightening the parser would change
       observable responses.
"""

import pytest

from numapi.schemas.outcomes import InvalidNumber, InvalidReason, ValidNumber
from numapi.validation import validate


class TestValidTokens:

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("0", 0),
            ("42", 42),
            ("007", 7),
            ("-5", -5),
            ("+3", 3),
            ("-0", 0),
            ("18446744073709551616", 2**64),
        ],
    )
    def test_plain_integers(self, token, expected):
        assert validate(token) == ValidNumber(value=expected)

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("12abc", 12),
            ("12/x", 12),
            ("1.5", 1),
            ("3e5", 3),
            ("10 20", 10),
            ("-7-", -7),
        ],
    )
    def test_trailing_content_is_ignored(self, token, expected):
        assert validate(token) == ValidNumber(value=expected)

    def test_leading_whitespace_is_skipped(self):
        assert validate("  9") == ValidNumber(value=9)
        assert validate("\t-2") == ValidNumber(value=-2)


class TestInvalidTokens:

    @pytest.mark.parametrize("token", ["", "abc", "xyz", "-", "+", "+-1", "- 1", ".5", "x12", "/12"])
    def test_no_leading_integer(self, token):
        result = validate(token)
        assert isinstance(result, InvalidNumber)
        assert result.token == token
        assert result.reason is InvalidReason.NOT_A_NUMBER

    def test_non_ascii_digits_rejected(self):
        assert isinstance(validate("٣"), InvalidNumber)

    def test_reason_text(self):
        assert validate("abc").reason.value == "not a number"
