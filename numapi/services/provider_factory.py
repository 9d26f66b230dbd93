"""
NumAPI — Computation Provider Selection
=========================================

What:  Builds the ComputationProvider the application will use.
How:   settings.computation_provider holds an import path of the form
       "package.module:attribute". The attribute may be a provider instance
       or a zero-argument callable (typically the class) returning one.
       An empty path selects BuiltinComputationProvider.
When:  Once, inside create_app().

Examples:
    NUMAPI_COMPUTATION_PROVIDER=""                              → built-in, 64-bit
    NUMAPI_COMPUTATION_PROVIDER="mypkg.native:NativeProvider"   → class, instantiated
    NUMAPI_COMPUTATION_PROVIDER="mypkg.remote:provider"         → ready-made instance
"""

import importlib
import logging
from typing import Optional

from numapi.config import Settings, settings as default_settings
from numapi.services.builtin_provider import BuiltinComputationProvider
from numapi.services.computation_base import ComputationProvider

logger = logging.getLogger(__name__)


def load_provider(import_path: str) -> ComputationProvider:
    """
    Import and return the provider named by `import_path`.

    Raises:
        ValueError: the path is malformed, cannot be imported, or does not
                    resolve to a ComputationProvider.
    """
    module_name, sep, attribute = import_path.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(
            f"Invalid computation provider path '{import_path}'. "
            "Expected 'package.module:attribute'."
        )

    try:
        module = importlib.import_module(module_name)
        target = getattr(module, attribute)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Cannot load computation provider '{import_path}': {e}") from e

    provider = target if isinstance(target, ComputationProvider) else target()
    if not isinstance(provider, ComputationProvider):
        raise ValueError(
            f"'{import_path}' did not produce a ComputationProvider "
            f"(got {type(provider).__name__})"
        )
    return provider


def build_provider(config: Optional[Settings] = None) -> ComputationProvider:
    """Provider selected by configuration; built-in when none is configured."""
    config = config or default_settings
    if config.computation_provider:
        provider = load_provider(config.computation_provider)
        logger.info("Using computation provider %s", config.computation_provider)
    else:
        provider = BuiltinComputationProvider(integer_width_bits=config.integer_width_bits)
        logger.info(
            "Using built-in computation provider (%d-bit width)",
            config.integer_width_bits,
        )
    return provider
