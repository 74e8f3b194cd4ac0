"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LABYRINTH_",
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Labyrinth"
    debug: bool = False
    log_level: str = "WARNING"

    # Maze bounds (applied to both width and height)
    min_size: int = 5
    max_size: int = 100

    # Map view
    map_delimiter: str = " "

    # Generated mazes (used when no maze file is given)
    generated_width: int = 21
    generated_height: int = 11
    seed: Optional[int] = None

    @field_validator("min_size")
    @classmethod
    def validate_min_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("MIN_SIZE must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @field_validator("map_delimiter")
    @classmethod
    def validate_map_delimiter(cls, v: str) -> str:
        if len(v) > 1:
            raise ValueError("MAP_DELIMITER must be at most one character")
        return v

    @model_validator(mode="after")
    def validate_size_bounds(self) -> "Settings":
        if self.max_size < self.min_size:
            raise ValueError("MAX_SIZE must not be smaller than MIN_SIZE")
        return self

    @property
    def effective_log_level(self) -> str:
        """Log level to configure, DEBUG when debug mode is on."""
        if self.debug:
            return "DEBUG"
        return self.log_level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
