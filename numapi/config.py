"""
NumAPI — Application Configuration
====================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the dispatch service and the
       built-in computation provider.
When:  Loaded once at module import time.

Configuration is deliberately small: the dispatch contract itself has no
knobs. Everything here is either server binding, logging, or how the
computation provider is chosen and bounded.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that reproduce the reference deployment
    (port 8000, built-in 64-bit provider).
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Computation Provider ──────────────────────────────────────────────
    # What: Import path of a custom provider, "package.module:attribute"
    # The attribute may be a ComputationProvider instance or a zero-argument
    # callable (usually the class) returning one.
    # Empty string selects the built-in fixed-width provider.
    computation_provider: str = Field(default="")

    # What: Upper bound, in seconds, for a single provider call
    # On expiry the request fails with 500; the worker thread is abandoned.
    computation_timeout: float = Field(default=5.0, gt=0, le=300)

    # What: Unsigned integer width of the built-in provider
    # Factorial results and primality inputs above 2**bits - 1 are rejected.
    # Capped at 64: the Miller-Rabin bases used for primality are only
    # deterministic below 3.3e24.
    integer_width_bits: int = Field(default=64, ge=8, le=64)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_prefix": "NUMAPI_",
    }


# Singleton instance, imported throughout the application
settings = Settings()
