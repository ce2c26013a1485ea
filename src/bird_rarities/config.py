"""
Application settings.

Values come from ``BIRD_RARITIES_*`` environment variables or a ``.env`` file
in the working directory. Use ``get_settings()`` rather than constructing
``Settings`` directly so every module shares one instance.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bird_rarities.datasources.taxonomy.client import EBIRD_TAXONOMY_CSV


class Settings(BaseSettings):
    """Runtime configuration for the rarity pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="BIRD_RARITIES_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "bird-rarities"
    app_env: str = "development"
    debug: bool = False

    reference_url: str = Field(
        default=EBIRD_TAXONOMY_CSV,
        description="CSV species table used to attach scientific/common names",
    )
    http_timeout: float = Field(default=30, gt=0)

    output_dir: Path = Path(".")
    overall_report: str = "rare_species_overall.csv"
    yearly_report: str = "rare_species_yearly.csv"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
