"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from dh_manager.core.config import (
    EngineSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dh_manager.core.exceptions import ConfigurationError


class TestEngineSettings:
    """Tests for EngineSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default engine settings."""
        monkeypatch.chdir(tmp_path)

        settings = EngineSettings()

        assert settings.default_proficiency == 2

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default proficiency read from the environment."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DH_MANAGER_ENGINE_DEFAULT_PROFICIENCY", "4")

        settings = EngineSettings()

        assert settings.default_proficiency == 4


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "Daggerheart Character Manager"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.engine.default_proficiency == 2

    def test_env_vars(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test settings read from prefixed environment variables."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.engine.default_proficiency == 3

    def test_is_production_property(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test is_production property."""
        monkeypatch.setenv("DH_MANAGER_DEBUG", "false")
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.is_production is True


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_value_raises_configuration_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that an out-of-range value surfaces as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("DH_MANAGER_ENGINE_DEFAULT_PROFICIENCY", "99")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details
