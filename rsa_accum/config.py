"""
Accumulator Configuration

Environment-based configuration for worker distribution and logging.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .version import __version__


class Settings(BaseSettings):
    """Settings from ACCUM_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ACCUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parallel work distribution
    worker_mode: Literal["thread", "process", "serial"] = Field(
        default="thread",
        description="How per-item work is distributed: thread, process or serial",
    )

    max_workers: Optional[int] = Field(
        default=None,
        gt=0,
        description="Worker pool size (None lets the executor decide)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format: json or text",
    )

    app_version: str = Field(
        default=__version__,
        description="Version reported in structured logs",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get accumulator settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() rereads the environment."""
    global _settings
    _settings = None
