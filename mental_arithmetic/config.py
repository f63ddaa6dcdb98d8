"""
Configuration settings for the mental arithmetic engine.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a MENTAL_ARITH_ prefixed variable, e.g.
MENTAL_ARITH_LOG_LEVEL=DEBUG.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MENTAL_ARITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_format: str = Field(
        default="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
        description="Loguru format string for the stderr sink",
    )

    # ========================================
    # Problem Generation
    # ========================================
    default_problems_per_formula: int = Field(
        default=5,
        ge=1,
        description="Problems generated per formula when a level drill is requested",
    )
    max_sampling_attempts: int = Field(
        default=50,
        ge=1,
        description="Resampling budget per requested problem for constrained generators",
    )
    default_difficulty: Literal["beginner", "intermediate", "advanced", "expert"] = Field(
        default="beginner",
        description="Difficulty tier used by the CLI when none is given",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
