"""
NumAPI — Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── builtin_provider: BuiltinComputationProvider with the default width
    ├── failing_provider: provider whose every operation raises RuntimeError
    ├── sleepy_provider: provider whose factorial blocks for one second
    └── test_client: HTTPX AsyncClient bound to a fresh app (built-in provider)
"""

import os
import time

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["NUMAPI_LOG_LEVEL"] = "WARNING"
os.environ.pop("NUMAPI_COMPUTATION_PROVIDER", None)
os.environ.pop("NUMAPI_INTEGER_WIDTH_BITS", None)

from numapi.services.builtin_provider import BuiltinComputationProvider  # noqa: E402
from numapi.services.computation_base import ComputationProvider  # noqa: E402


class FailingProvider(ComputationProvider):
    """Every call blows up, as a crashed native routine would."""

    def is_even(self, n: int) -> bool:
        raise RuntimeError("native is_even crashed")

    def is_prime(self, n: int) -> bool:
        raise RuntimeError("native is_prime crashed")

    def factorial(self, n: int) -> int:
        raise RuntimeError("native factorial crashed")


class SleepyProvider(BuiltinComputationProvider):
    """Built-in behaviour, except factorial takes a full second."""

    def factorial(self, n: int) -> int:
        time.sleep(1.0)
        return super().factorial(n)


@pytest.fixture
def builtin_provider():
    return BuiltinComputationProvider()


@pytest.fixture
def failing_provider():
    return FailingProvider()


@pytest.fixture
def sleepy_provider():
    return SleepyProvider()


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_root(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    from numapi.main import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
