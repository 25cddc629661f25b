"""
Environment variable loading for the instruction API.

- API_HOST: bind address (default 0.0.0.0)
- PORT: listen port (default 3000; unparsable values fall back to the default)
- LOG_LEVEL / LOG_FORMAT: applied to api_logging by the app once settings load
- DOCS_ENABLED: serve /docs and /api-docs/openapi.json (default on)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is solana_instruction_api/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


def load_api_env() -> None:
    """Load .env from project root. Existing environment variables win."""
    load_dotenv(_ENV_PATH, override=False)


def _parse_bool(raw: str | None, default: bool) -> bool:
    value = (raw or "").strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


def get_api_host() -> str:
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_port() -> int:
    """PORT from env; anything that is not a valid u16 port gives DEFAULT_PORT."""
    raw = (os.getenv("PORT") or "").strip()
    try:
        port = int(raw)
    except ValueError:
        return DEFAULT_PORT
    if not 0 <= port <= 65535:
        return DEFAULT_PORT
    return port


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper() or "INFO"


def get_log_format() -> str:
    """LOG_FORMAT: json (default) or console."""
    return (os.getenv("LOG_FORMAT") or "json").strip().lower() or "json"


def docs_enabled() -> bool:
    return _parse_bool(os.getenv("DOCS_ENABLED"), True)
