"""
Configuration settings for the pathwise learner engine.

Uses Pydantic Settings for environment variable management with .env file support.
All variables are prefixed with PATHWISE_ (e.g. PATHWISE_LOG_LEVEL=DEBUG).
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PATHWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Storage
    # ========================================
    profile_dir: Path = Field(
        default=Path.home() / ".pathwise" / "profiles",
        description="Directory holding one JSON file per learner profile",
    )

    # ========================================
    # Reference Data
    # ========================================
    reference_data_path: Path | None = Field(
        default=None,
        description="Optional JSON file overriding the built-in reference tables",
    )

    # ========================================
    # Engine Defaults
    # ========================================
    recommendation_limit: int = Field(
        default=5,
        ge=0,
        description="Default cap on composed recommendations",
    )
    streak_celebration_days: int = Field(
        default=7,
        ge=1,
        description="Streak length that triggers a celebration insight",
    )

    # ========================================
    # API Server
    # ========================================
    api_host: str = Field(default="127.0.0.1", description="API bind host")
    api_port: int = Field(default=8200, description="API bind port")

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum loguru level",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
