"""Library defaults via pydantic-settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Vehicle formula defaults.

    Values are loaded from ``VEHICLE_``-prefixed environment variables, falling
    back to a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="VEHICLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Drivetrain efficiency used when converting power curves to kilowatts
    default_efficiency: float = Field(default=1.0, gt=0.0, le=1.0)

    # RPM spacing of resampled power curves
    resample_step_rpm: float = Field(default=100.0, gt=0.0)

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {value!r}"
            raise ValueError(msg)
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging at the configured level.

    Applications call this once at startup; importing :mod:`vehicle` never
    touches logging configuration.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
