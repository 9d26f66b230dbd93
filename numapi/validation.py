"""
NumAPI — Argument Validator
=============================

What:  Turns the raw path token into a NumericArgument.
How:   Permissive base-10 parsing: optional leading whitespace, an optional
       sign, then ASCII digits. Anything after the digits is ignored.
Who:   Called by DispatchService once a numeric route has matched.

Parsing rules:
    "42"      → ValidNumber(42)
    "12abc"   → ValidNumber(12)      trailing content ignored
    "  7"     → ValidNumber(7)       leading whitespace skipped
    "-5"      → ValidNumber(-5)      sign accepted; range is the provider's concern
    "+3"      → ValidNumber(3)
    ""        → InvalidNumber
    "abc"     → InvalidNumber
    "-"       → InvalidNumber
    "1.5"     → ValidNumber(1)       the "." is trailing content

Validation is purely syntactic. No upper bound is enforced here.
"""

import re

from numapi.schemas.outcomes import (
    InvalidNumber,
    InvalidReason,
    NumericArgument,
    ValidNumber,
)

# [0-9] rather than \d: \d also matches non-ASCII digits such as "٣"
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def validate(token: str) -> NumericArgument:
    """Parse the leading integer of `token`, ignoring whatever follows it."""
    match = _LEADING_INTEGER.match(token)
    if match is None:
        return InvalidNumber(token=token, reason=InvalidReason.NOT_A_NUMBER)
    try:
        value = int(match.group(1))
    except ValueError:
        # Digit runs longer than sys.get_int_max_str_digits() refuse to convert
        return InvalidNumber(token=token, reason=InvalidReason.NOT_A_NUMBER)
    return ValidNumber(value=value)
