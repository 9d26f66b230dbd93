"""
NumAPI — Provider Selection and Settings Tests
================================================

What:  Tests for load_provider(), build_provider() and the Settings validators.
"""

import pytest
from pydantic import ValidationError

from numapi.config import Settings
from numapi.services import builtin_provider as builtin_module
from numapi.services.builtin_provider import BuiltinComputationProvider
from numapi.services.provider_factory import build_provider, load_provider


class TestLoadProvider:

    def test_class_path_is_instantiated(self):
        provider = load_provider("numapi.services.builtin_provider:BuiltinComputationProvider")
        assert isinstance(provider, BuiltinComputationProvider)

    def test_instance_path_is_used_as_is(self, monkeypatch):
        shared = BuiltinComputationProvider(integer_width_bits=16)
        monkeypatch.setattr(builtin_module, "shared_provider", shared, raising=False)
        assert load_provider("numapi.services.builtin_provider:shared_provider") is shared

    @pytest.mark.parametrize("path", ["", "no_colon", ":Attr", "module:"])
    def test_malformed_path(self, path):
        with pytest.raises(ValueError, match="Expected 'package.module:attribute'"):
            load_provider(path)

    def test_missing_module(self):
        with pytest.raises(ValueError, match="Cannot load"):
            load_provider("numapi.does_not_exist:Provider")

    def test_missing_attribute(self):
        with pytest.raises(ValueError, match="Cannot load"):
            load_provider("numapi.services.builtin_provider:NoSuchProvider")

    def test_not_a_provider(self):
        with pytest.raises(ValueError, match="did not produce a ComputationProvider"):
            load_provider("numapi.config:Settings")


class TestBuildProvider:

    def test_builtin_by_default(self):
        provider = build_provider(Settings(computation_provider="", integer_width_bits=32))
        assert isinstance(provider, BuiltinComputationProvider)
        assert provider.max_value == 2**32 - 1

    def test_configured_path(self):
        config = Settings(
            computation_provider="numapi.services.builtin_provider:BuiltinComputationProvider"
        )
        assert isinstance(build_provider(config), BuiltinComputationProvider)


class TestSettings:

    def test_defaults(self):
        config = Settings()
        assert config.backend_port == 8000
        assert config.integer_width_bits == 64

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    @pytest.mark.parametrize("bits", [4, 65])
    def test_width_bounds(self, bits):
        with pytest.raises(ValidationError):
            Settings(integer_width_bits=bits)

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("NUMAPI_COMPUTATION_TIMEOUT", "0.5")
        assert Settings().computation_timeout == 0.5
