"""Mini README: Centralised configuration models and helpers for the gallery.

Structure:
    * GallerySettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``ARGALLERY_*`` environment variables (or a
    local ``.env`` file). Tests construct ``GallerySettings`` directly with
    temporary directories instead of going through the cache.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GallerySettings(BaseSettings):
    """Runtime configuration for the AR model gallery."""

    model_config = SettingsConfigDict(
        env_prefix="ARGALLERY_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    models_directory: Path = Field(
        Path("models"),
        description="Flat directory holding uploaded model files.",
    )
    thumbnails_directory: Path = Field(
        Path("data/thumbs"),
        description="Directory where rendered PNG thumbnails are cached.",
    )
    asset_extension: str = Field(
        ".glb",
        description="Suffix a stored file must carry to be visible to the gallery.",
        min_length=2,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        3000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI and the application factory.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept standard level names in any casing."""

        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("models_directory", "thumbnails_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache()
def get_settings() -> GallerySettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return GallerySettings()
