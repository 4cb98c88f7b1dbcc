"""Configuration management for pacecalc."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import UnitSystem

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Variables use the ``PACECALC_`` prefix, e.g. ``PACECALC_UNIT_SYSTEM=imperial``.
    Locally, they may also come from a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PACECALC_",
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    unit_system: UnitSystem = Field(
        default=UnitSystem.METRIC,
        description="Default unit system for unlabeled paces and display",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: unit_system={_settings.unit_system.value}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None
