"""
NumAPI — Abstract Computation Provider Interface
==================================================

What:  Abstract base class defining the contract for the numeric collaborator.
How:   Concrete providers inherit from ComputationProvider and implement the
       three operations. The dispatch service only ever talks to this interface.
Who:   Called by DispatchService, one operation per request.
When:  After routing and validation have produced a ValidNumber.

Providers are selected by configuration (see provider_factory.py) or passed
directly to create_app(), so a provider backed by native code, a remote
service, or plain Python can be plugged in without touching dispatch.
"""

from abc import ABC, abstractmethod


class ComputationProvider(ABC):
    """
    Abstract interface for parity, primality and factorial.

    Contract:
        - Deterministic: the same input always yields the same output
        - No shared mutable state across calls; calls may run concurrently
          in worker threads
        - Arguments are exactly what the validator produced, negatives included
        - Unsupported inputs raise ComputationRangeError (or a subclass);
          any other exception is treated as a provider failure (HTTP 500)
    """

    @abstractmethod
    def is_even(self, n: int) -> bool:
        """
        Parity test. Total over all integers, negatives included.
        """
        ...

    @abstractmethod
    def is_prime(self, n: int) -> bool:
        """
        Primality test.

        Returns:
            False for every n < 2, including all negative numbers.

        Raises:
            ComputationOverflowError: n is wider than the provider supports.
        """
        ...

    @abstractmethod
    def factorial(self, n: int) -> int:
        """
        Compute n!.

        Raises:
            ComputationDomainError:   n is negative.
            ComputationOverflowError: n! does not fit the provider's integer width.
        """
        ...
