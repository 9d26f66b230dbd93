"""
NumAPI — Built-in Fixed-Width Computation Provider
====================================================

What:  Pure-Python provider emulating unsigned fixed-width native routines.
How:   Parity is computed directly; primality and factorial are bounded by
       an unsigned integer width (64 bits by default) and raise
       ComputationOverflowError instead of wrapping around.
Who:   Default provider when settings.computation_provider is empty.

Overflow policy (default 64-bit width, max = 2**64 - 1):
    is_even(n)    any integer, no bound
    is_prime(n)   n < 2 → False; n > max → ComputationOverflowError
    factorial(n)  n < 0 → ComputationDomainError;
                  n! > max → ComputationOverflowError (20! fits, 21! does not)

Primality algorithm:
    n < 1_000_000  trial division by odd numbers up to √n
    otherwise      Miller-Rabin with the first twelve primes as witnesses,
                   which is exact for every n < 3.3e24 (covers 64 bits)
"""

import logging

from numapi.exceptions import ComputationDomainError, ComputationOverflowError
from numapi.services.computation_base import ComputationProvider

logger = logging.getLogger(__name__)

_TRIAL_DIVISION_LIMIT = 1_000_000
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


class BuiltinComputationProvider(ComputationProvider):
    """Reference provider with an explicit, tested overflow policy."""

    def __init__(self, integer_width_bits: int = 64):
        if not 1 <= integer_width_bits <= 64:
            raise ValueError(
                f"integer_width_bits must be between 1 and 64, got {integer_width_bits}"
            )
        self.integer_width_bits = integer_width_bits
        self.max_value = (1 << integer_width_bits) - 1
        logger.debug("BuiltinComputationProvider initialized with %d-bit width", integer_width_bits)

    def is_even(self, n: int) -> bool:
        return n % 2 == 0

    def is_prime(self, n: int) -> bool:
        if n < 2:
            return False
        if n > self.max_value:
            raise ComputationOverflowError(
                message=f"{n} exceeds the {self.integer_width_bits}-bit primality range",
                number=n,
                operation="is_prime",
            )
        if n < _TRIAL_DIVISION_LIMIT:
            return self._trial_division(n)
        return self._miller_rabin(n)

    def factorial(self, n: int) -> int:
        if n < 0:
            raise ComputationDomainError(
                message=f"factorial is undefined for negative number {n}",
                number=n,
                operation="factorial",
            )
        result = 1
        # Stops as soon as the product leaves the width, so huge n fails fast
        for i in range(2, n + 1):
            result *= i
            if result > self.max_value:
                raise ComputationOverflowError(
                    message=f"{n}! exceeds {self.integer_width_bits} bits",
                    number=n,
                    operation="factorial",
                )
        return result

    # ── Primality helpers ─────────────────────────────────────────────────

    @staticmethod
    def _trial_division(n: int) -> bool:
        if n < 4:
            return True
        if n % 2 == 0:
            return False
        i = 3
        while i * i <= n:
            if n % i == 0:
                return False
            i += 2
        return True

    @staticmethod
    def _miller_rabin(n: int) -> bool:
        for p in _WITNESSES:
            if n % p == 0:
                return n == p

        # n - 1 = d * 2**s with d odd
        d, s = n - 1, 0
        while d % 2 == 0:
            d //= 2
            s += 1

        for a in _WITNESSES:
            x = pow(a, d, n)
            if x == 1 or x == n - 1:
                continue
            for _ in range(s - 1):
                x = pow(x, 2, n)
                if x == n - 1:
                    break
            else:
                return False
        return True
