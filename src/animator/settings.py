"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support,
e.g. ANIMATOR_DEBUG=true or ANIMATOR_DEMO__CURVE=overshoot3.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DemoSettings(BaseSettings):
    """Demo animation settings."""

    model_config = SettingsConfigDict(env_prefix="ANIMATOR_DEMO_", extra="ignore")

    # Timing
    fps: int = Field(default=60, gt=0)
    duration: float = Field(default=1.0, ge=0.0)  # seconds per phase
    phase_pause: float = Field(default=0.5, ge=0.0)  # rest between phases
    cycles: int = Field(default=4, ge=1)  # phases to play

    # Curve name from the catalog or the preset file
    curve: str = "ease"

    # Transform limits
    max_offset: float = 100.0
    max_rotation_degrees: float = 60.0
    max_scale: float = Field(default=1.5, gt=0.0)
    default_hue: float = Field(default=5 / 8.0, ge=0.0, le=1.0)
    max_hue_shift: float = 0.3


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ANIMATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Frame clock used by the demo
    clock: Literal["asyncio", "pygame"] = "asyncio"

    # Optional YAML file with extra curve presets
    presets_path: Path | None = None

    demo: DemoSettings = Field(default_factory=DemoSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
