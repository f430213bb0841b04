"""docmock settings, read from DOCMOCK_* environment variables and .env."""

import logging
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_NAME = ".env"
ENV_SEARCH_LEVELS = 3


def find_env_file(start: Optional[Path] = None, levels: int = ENV_SEARCH_LEVELS) -> Optional[Path]:
    """
    Look for a .env file in ``start`` (default: cwd) and up to ``levels`` parents.

    Returns:
        Path of the first .env found, or None
    """
    current = (start or Path.cwd()).resolve()
    for directory in [current, *current.parents][: levels + 1]:
        candidate = directory / ENV_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_env_file(start: Optional[Path] = None) -> Optional[Path]:
    """Load the nearest .env into os.environ; variables already set win."""
    env_path = find_env_file(start)
    if env_path is not None:
        load_dotenv(env_path, override=False)
    return env_path


class Settings(BaseSettings):
    """Defaults for generation calls and logging."""

    # Generation
    seed: Optional[int] = None
    locale: str = "en_US"
    required_only: bool = False
    fallback: Literal["sample", "null"] = "sample"
    max_depth: int = Field(default=32, ge=1)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="DOCMOCK_",
        env_file=None,  # loaded by load_env_file
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    def __init__(self, **kwargs):
        load_env_file()
        super().__init__(**kwargs)
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
