"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LABYRINTH_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Labyrinth Crawler"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Exploration
    max_moves: int = 1_000_000
    random_seed: Optional[int] = None

    # Console runner
    step_delay_ms: int = 0
    show_history: bool = False
    maze_file: Optional[Path] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names in any case."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @field_validator("max_moves")
    @classmethod
    def validate_max_moves(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_moves must be positive")
        return v

    @field_validator("step_delay_ms")
    @classmethod
    def validate_step_delay(cls, v: int) -> int:
        if v < 0:
            raise ValueError("step_delay_ms must not be negative")
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        if self.debug:
            return "DEBUG"
        return self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
