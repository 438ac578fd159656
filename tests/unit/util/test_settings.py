"""Unit tests for settings loading and checks."""

import pytest
from pydantic import ValidationError as SettingsValidationError

from quill.config import ListingSettings, Settings, check_settings
from quill.util.error import ConfigurationError


class TestSettings:
    """Tests for Settings."""

    def test_nested_environment_variables(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("LISTING__MAX_LIMIT", "50")
        monkeypatch.setenv("READING__WORDS_PER_MINUTE", "250")

        # Act
        settings = Settings()

        # Assert
        assert settings.listing.max_limit == 50
        assert settings.reading.words_per_minute == 250

    def test_default_limit_must_fit_max(self):
        with pytest.raises(SettingsValidationError):
            ListingSettings(default_limit=200, max_limit=100)


class TestCheckSettings:
    """Tests for check_settings."""

    def test_production_with_default_secret_fails(self):
        settings = Settings(environment="production")
        settings.auth.jwt_secret = "development-only-secret-change-me-in-production"

        with pytest.raises(ConfigurationError):
            check_settings(settings)

    def test_production_with_real_secret_passes(self):
        settings = Settings(environment="production")
        settings.auth.jwt_secret = "a-real-secret-from-the-environment-0123456789"

        check_settings(settings)

    def test_development_defaults_pass(self):
        check_settings(Settings(environment="development"))
