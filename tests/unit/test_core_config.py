"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values reproduce the reference login screen
- Loading from TIMECRAFT_* environment variables
- Validation (log level, non-negative delays)
- Environment detection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from timecraft_auth.core.config import Settings, get_settings
from timecraft_auth.core.enums import Environment


class TestEnvironmentEnum:
    """Test Environment enum."""

    def test_environment_values(self):
        """Test that all expected environments are defined."""
        assert Environment.DEVELOPMENT == "development"
        assert Environment.TESTING == "testing"
        assert Environment.CI == "ci"
        assert Environment.PRODUCTION == "production"


class TestSettingsDefaults:
    """Test default values."""

    def test_reference_defaults(self):
        """Test defaults match the reference login screen."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.auth_delay_seconds == 2.0
        assert settings.redirect_delay_seconds == 1.5
        assert settings.demo_email == "demo@timecraft.com"
        assert settings.demo_password == "demo123"
        assert settings.is_development is True


class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_env_prefix(self):
        """Test TIMECRAFT_* variables override defaults."""
        env_values = {
            "TIMECRAFT_ENVIRONMENT": "testing",
            "TIMECRAFT_AUTH_DELAY_SECONDS": "0.25",
            "TIMECRAFT_DEMO_EMAIL": "qa@timecraft.com",
        }
        with patch.dict(os.environ, env_values, clear=True):
            settings = Settings(_env_file=None)

        assert settings.environment == Environment.TESTING
        assert settings.auth_delay_seconds == 0.25
        assert settings.demo_email == "qa@timecraft.com"
        assert settings.is_testing is True
        assert settings.is_production is False

    def test_log_level_normalized(self):
        """Test log level names are case-insensitive."""
        with patch.dict(os.environ, {"TIMECRAFT_LOG_LEVEL": "debug"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"


class TestSettingsValidation:
    """Test Settings field validation."""

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="LOUD")

    @pytest.mark.parametrize("field", ["auth_delay_seconds", "redirect_delay_seconds"])
    def test_negative_delay_rejected(self, field):
        """Test delays cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: -0.1})

    def test_zero_delay_allowed(self):
        """Test an instant round trip is a valid configuration."""
        settings = Settings(_env_file=None, auth_delay_seconds=0)

        assert settings.auth_delay_seconds == 0


class TestGetSettings:
    """Test cached accessor."""

    def test_get_settings_is_cached(self):
        """Test repeated calls return the same instance."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Test cache_clear() picks up environment changes."""
        with patch.dict(os.environ, {"TIMECRAFT_LOG_LEVEL": "WARNING"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "WARNING"

        with patch.dict(os.environ, {"TIMECRAFT_LOG_LEVEL": "ERROR"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().log_level == "ERROR"
