"""
Test that api_logging imports without circular imports and the logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from api_logging and use the logger."""
    from solana_instruction_api.api_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_event_renamed_to_event_type():
    from solana_instruction_api.api_logging.logger import _rename_event

    out = _rename_event(None, "info", {"event": "keypair_generated", "pubkey": "x"})
    assert out["event_type"] == "keypair_generated"
    assert "event" not in out


def test_request_context_bind_and_clear():
    import structlog

    from solana_instruction_api.api_logging import bind_request_context, clear_request_context

    bind_request_context(request_id="abc123")
    assert structlog.contextvars.get_contextvars()["request_id"] == "abc123"
    clear_request_context()
    assert "request_id" not in structlog.contextvars.get_contextvars()
