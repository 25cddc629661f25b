"""
Configuration for the instruction API.

Loads settings from environment variables and an optional .env file.
"""

from solana_instruction_api.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
