"""
Structured logging for the instruction API: ISO timestamp, level, event_type.

Import time gives a JSON/INFO baseline (or LOG_LEVEL / LOG_FORMAT if already in
the process environment). Once settings are loaded, including any .env file,
the app calls configure_logging(settings.log_format, settings.log_level).

Loggers are resolved on every call rather than cached, so module-level
`logger = get_logger(__name__)` objects follow a later reconfiguration and
always write to the current sys.stdout.

Imports nothing from solana_instruction_api so any module can use it at import time.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_FORMATS = ("json", "console")


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _rename_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type in the output."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def level_value(level: str | int) -> int:
    """'warning' / 'WARNING' / 30 → 30; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _renderer(log_format: str) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.processors.JSONRenderer()


def configure_logging(log_format: str = "json", level: str | int = "INFO") -> None:
    """(Re)configure structlog with the given renderer ("json" or "console") and minimum level."""
    fmt = (log_format or "json").strip().lower()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _add_timestamp,
            _rename_event,
            _renderer(fmt if fmt in LOG_FORMATS else "json"),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging(os.getenv("LOG_FORMAT", "json"), os.getenv("LOG_LEVEL", "INFO"))


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("token_mint_built", mint=mint, amount=amount)
    """
    return structlog.get_logger(name, logger=name)


def bind_request_context(**values: Any) -> None:
    """Bind key/values (e.g. request_id) to every log line for the current request."""
    structlog.contextvars.bind_contextvars(**values)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
