"""Application settings for the asset scoring library."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ASSET_SCORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    bitcoin_asset_id: str = Field(
        default="bitcoin-btc",
        description="Asset identifier scored against the all-time-high BTC volume instead of the BTC reference volume.",
    )
    log_level: str = Field(default="INFO", description="Level applied to the asset_score loggers.")
    log_file: Optional[str] = Field(default=None, description="Optional path of a log file.")

    @field_validator("bitcoin_asset_id")
    @classmethod
    def _strip_asset_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("bitcoin_asset_id must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{value}'")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid repeated environment parsing."""

    return Settings()
