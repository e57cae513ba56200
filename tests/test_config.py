"""Tests for settings."""

import pytest
from pydantic import ValidationError

from labyrinth.config import Settings, get_settings


class TestSettings:
    """Tests for loading settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.max_moves == 1_000_000
        assert settings.random_seed is None
        assert settings.log_level == "INFO"
        assert settings.maze_file is None
        assert settings.show_history is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LABYRINTH_MAX_MOVES", "50")
        monkeypatch.setenv("LABYRINTH_RANDOM_SEED", "7")
        monkeypatch.setenv("LABYRINTH_LOG_LEVEL", "debug")
        monkeypatch.setenv("LABYRINTH_SHOW_HISTORY", "true")

        settings = Settings()

        assert settings.max_moves == 50
        assert settings.random_seed == 7
        assert settings.log_level == "DEBUG"
        assert settings.show_history is True

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(log_level="chatty")

    def test_max_moves_must_be_positive(self):
        with pytest.raises(ValidationError, match="max_moves must be positive"):
            Settings(max_moves=0)

    def test_step_delay_not_negative(self):
        with pytest.raises(ValidationError):
            Settings(step_delay_ms=-1)

    def test_debug_forces_debug_level(self):
        assert Settings(debug=True, log_level="WARNING").effective_log_level == "DEBUG"
        assert Settings(log_level="WARNING").effective_log_level == "WARNING"

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
