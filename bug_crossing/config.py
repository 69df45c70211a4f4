"""
Configuration management for Bug Crossing.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Gameplay
    seed: Optional[int] = Field(
        default=None,
        description="Seed for obstacle speeds. None draws a fresh seed each run"
    )
    lives: int = Field(
        default=3,
        ge=1,
        description="Lives the player starts with"
    )
    obstacle_count: int = Field(
        default=6,
        ge=0,
        description="Number of obstacles, spread round-robin over the lanes"
    )

    # Tick driver
    fps: int = Field(
        default=60,
        ge=1,
        description="Target frames per second"
    )
    max_dt: float = Field(
        default=0.1,
        gt=0,
        description="Largest time step in seconds, longer pauses are clamped"
    )

    # Display
    window_title: str = Field(default="Bug Crossing")
    assets_dir: Path = Field(
        default=Path("assets"),
        description="Directory holding the images/ sprites. Missing sprites draw as blocks"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )

    class Config:
        env_prefix = "BUG_CROSSING_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    """
    return Settings()
