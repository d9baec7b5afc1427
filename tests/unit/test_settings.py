"""
Unit tests for application settings.
"""

import pytest

from accounts.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults serve on port 8080."""
        for var in ("APP_NAME", "LOG_LEVEL", "LOG_JSON", "HOST", "PORT", "TIMEOUT_KEEP_ALIVE"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.app_name == "accounts"
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.port == 8080
        assert settings.timeout_keep_alive == 5

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults, case-insensitively."""
        monkeypatch.setenv("port", "9090")
        monkeypatch.setenv("LOG_JSON", "false")
        settings = Settings(_env_file=None)
        assert settings.port == 9090
        assert settings.log_json is False

    def test_no_bcrypt_cost_setting(self) -> None:
        """Hasher cost is not part of configuration."""
        assert not any("bcrypt" in name for name in Settings.model_fields)

    def test_get_settings_is_cached(self) -> None:
        """get_settings returns the same instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
