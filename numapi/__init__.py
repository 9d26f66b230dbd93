"""
NumAPI — Application Package Initializer
==========================================

What: Marks the `numapi` directory as a Python package.
Who:  Used by pytest, uvicorn (uvicorn numapi.main:app) and the `numapi` console script.

Architecture Note:
    The service is a thin dispatch layer in front of a pluggable computation provider:

    ┌─────────────────────────────────────┐
    │         Routes (API Layer)          │  ← catch-all FastAPI endpoint
    ├─────────────────────────────────────┤
    │   Dispatch Service (Orchestration)  │  ← route → validate → compute → format
    ├─────────────────────────────────────┤
    │ Routing / Validation / Formatting   │  ← pure functions, no I/O
    ├─────────────────────────────────────┤
    │   Computation Provider (pluggable)  │  ← is_even / is_prime / factorial
    └─────────────────────────────────────┘

    Routing, validation and formatting are pure and testable without HTTP.
    The provider is injected, so it can be swapped without touching dispatch.
"""

__version__ = "1.0.0"
