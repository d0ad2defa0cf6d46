"""Configuration management for CV Site."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.logging import RichHandler


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CV_SITE_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # CV content
    content_file: Path | None = Field(
        default=None,
        description="JSON file with CV content (defaults to the built-in content)",
    )

    # Locale routing
    locales: list[str] = Field(default_factory=lambda: ["en", "es"])
    base_locale: str = "en"

    # Simulated generation
    simulation_time_scale: float = Field(
        default=1.0,
        ge=0.0,
        le=10.0,
        description="Multiplier applied to every simulated delay (0 runs instantly)",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @model_validator(mode="after")
    def check_base_locale(self) -> "Settings":
        if not self.locales:
            raise ValueError("At least one locale must be configured")
        if self.base_locale not in self.locales:
            raise ValueError(
                f"Base locale '{self.base_locale}' is not one of {', '.join(self.locales)}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger through a rich handler."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
