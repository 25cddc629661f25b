"""
Application settings resolved from the environment.

get_settings() is cached; tests that change env vars call get_settings.cache_clear().
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from solana_instruction_api.config.env import (
    docs_enabled,
    get_api_host,
    get_log_format,
    get_log_level,
    get_port,
    load_api_env,
)


@dataclass(frozen=True)
class Settings:
    api_host: str
    port: int
    log_level: str
    docs_enabled: bool
    log_format: str = "json"


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the current application settings (loads .env on first call)."""
    load_api_env()
    return Settings(
        api_host=get_api_host(),
        port=get_port(),
        log_level=get_log_level(),
        docs_enabled=docs_enabled(),
        log_format=get_log_format(),
    )
