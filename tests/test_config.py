"""Tests for detector settings loading and validation."""

import pytest

from traversal_detector.config import ConfigurationError, Settings, load_settings
from traversal_detector.core.vuln_engine.injection_context import (
    DEFAULT_INJECTION_POINTS,
    InjectionPoint,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment variables out of the settings under test."""
    for name in list(Settings.model_fields):
        monkeypatch.delenv(f"PATH_TRAVERSAL_{name}", raising=False)


class TestDefaults:

    def test_defaults(self):
        settings = load_settings()
        assert settings.MAX_CRAWLED_URLS_TO_FUZZ == 50
        assert settings.MAX_EXPLOITS_TO_TEST == 200
        assert settings.INJECTION_POINTS == DEFAULT_INJECTION_POINTS
        assert settings.MAX_CONCURRENT_REQUESTS == 10
        assert settings.REQUEST_TIMEOUT == 30.0

    def test_overrides(self):
        settings = load_settings(
            MAX_EXPLOITS_TO_TEST=5,
            INJECTION_POINTS=["PATH_SUFFIX", "ROOT"],
        )
        assert settings.MAX_EXPLOITS_TO_TEST == 5
        assert settings.INJECTION_POINTS == [InjectionPoint.PATH_SUFFIX, InjectionPoint.ROOT]

    def test_zero_budget_is_valid(self):
        assert load_settings(MAX_EXPLOITS_TO_TEST=0).MAX_EXPLOITS_TO_TEST == 0


class TestEnvironment:

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PATH_TRAVERSAL_MAX_EXPLOITS_TO_TEST", "7")
        assert load_settings().MAX_EXPLOITS_TO_TEST == 7

    def test_injection_points_from_env(self, monkeypatch):
        monkeypatch.setenv("PATH_TRAVERSAL_INJECTION_POINTS", '["ROOT", "QUERY_PARAMETER"]')
        assert load_settings().INJECTION_POINTS == [InjectionPoint.ROOT, InjectionPoint.QUERY_PARAMETER]


class TestValidation:
    """Bad values surface as ConfigurationError before any scanning."""

    @pytest.mark.parametrize("overrides", [
        {"MAX_EXPLOITS_TO_TEST": -1},
        {"MAX_CRAWLED_URLS_TO_FUZZ": -5},
        {"MAX_CONCURRENT_REQUESTS": 0},
        {"REQUEST_TIMEOUT": 0},
        {"INJECTION_POINTS": []},
        {"INJECTION_POINTS": ["NOT_A_POINT"]},
        {"INJECTION_POINTS": ["ROOT", "ROOT"]},
    ])
    def test_invalid_values_raise(self, overrides):
        with pytest.raises(ConfigurationError):
            load_settings(**overrides)

    def test_malformed_env_raises(self, monkeypatch):
        monkeypatch.setenv("PATH_TRAVERSAL_MAX_EXPLOITS_TO_TEST", "many")
        with pytest.raises(ConfigurationError):
            load_settings()
