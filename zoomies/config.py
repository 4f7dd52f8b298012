"""
Configuration management for Lucy Zoomies.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zoomies.gameplay.config import SimulationConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables (ZOOMIES_*)."""

    model_config = SettingsConfigDict(
        env_prefix="ZOOMIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level"
    )

    # Display
    fps: int = Field(default=60, gt=0, description="Frame rate cap of the window")
    cell_size: int = Field(default=20, gt=0, description="Pixels per grid cell")

    # Randomness
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the park layout and people. None means a new park every time"
    )

    # Audio
    sound_enabled: bool = Field(default=True)
    assets_dir: str = Field(
        default="assets",
        description="Directory holding eat.mp3, gameover.mp3 and win.mp3"
    )

    # Gameplay
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
