"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

import api.config
from api.config import Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.cache_ttl_ms == 60_000
        assert settings.cache_max_items == 500
        assert settings.api_port == 5174
        assert settings.default_tide_station == "9414290"
        assert settings.tide_grace_minutes == 5

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CACHE_TTL_MS", "1500")
        monkeypatch.setenv("ENVIRONMENT", "Development")
        settings = Settings(_env_file=None)
        assert settings.cache_ttl_ms == 1500
        assert settings.is_development

    @pytest.mark.parametrize("field", ["cache_ttl_ms", "cache_max_items", "upstream_timeout_seconds"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_cors_origins_list(self):
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_import_does_not_build_settings(self):
        assert "settings" not in vars(api.config)
