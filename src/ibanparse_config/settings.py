"""Library settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. IBANPARSE_ENV_FILE environment variable (path to a .env file)
3. config/.env in the project root

Uses pydantic-settings for automatic type coercion and validation. The
validation engine itself never reads settings; they only drive logging and
startup behaviour in ``ibanparse.startup``.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. IBANPARSE_ENV_FILE env var (relative paths resolve against the root)
    2. config/.env
    """
    env_file_path = os.environ.get("IBANPARSE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    env_file = get_config_dir() / ".env"
    if env_file.exists():
        return env_file

    return None


class Settings(BaseSettings):
    """Library configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables with the IBANPARSE_ prefix (highest priority)
    2. .env file
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="IBANPARSE_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging (IBANPARSE_LOG_ prefix)
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    # Build the structure registry in bootstrap() instead of on first use
    preload_registry: bool = True

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
