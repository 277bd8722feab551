"""Settings for ulidkit.

Configuration is explicit, validated, and environment-driven. The library
core needs none of it; the CLI and applications embedding ulidkit read log
and batch-generation defaults from here.

Features:
    - **UlidSettings:** log_level, json_logs, service_name, monotonic, max_batch
    - **env_prefix:** ``ULIDKIT_`` environment variable namespacing
    - **.env file support:** Automatic loading via pydantic-settings
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> import os
    >>> os.environ["ULIDKIT_LOG_LEVEL"] = "DEBUG"
    >>> UlidSettings().log_level
    'DEBUG'

Tags:
    settings, configuration, pydantic, environment, ulidkit
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UlidSettings(BaseSettings):
    """Settings shared by the CLI and embedding applications.

    Fields
    ──────
    log_level    : Structlog log level
    json_logs    : Force JSON (True) or console (False) logs; None auto-detects
    service_name : ``service.name`` stamped on every log event
    monotonic    : Default for ``ulidkit generate`` batches
    max_batch    : Upper bound for ``ulidkit generate --count``
    """

    model_config = SettingsConfigDict(
        env_prefix="ULIDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None
    service_name: str = "ulidkit"

    # ── Generation ───────────────────────────────────────────────
    monotonic: bool = True
    max_batch: int = Field(default=10_000, gt=0, description="Largest generate --count")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> UlidSettings:
    """Load and cache settings. Tests call ``get_settings.cache_clear()``."""
    return UlidSettings()


__all__ = ["UlidSettings", "get_settings"]
