"""
Structured logging for the Solana instruction API.

JSON logs with timestamp, level and event_type. Use get_logger() in every module;
configure_logging() applies the loaded settings.
"""

from solana_instruction_api.api_logging.logger import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)

__all__ = ["get_logger", "configure_logging", "bind_request_context", "clear_request_context"]
