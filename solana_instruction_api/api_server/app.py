"""
ASGI application entrypoint.

Run with: uvicorn solana_instruction_api.api_server.app:app --host 0.0.0.0 --port 3000
"""

from solana_instruction_api.api_server.server import app, create_app

__all__ = ["app", "create_app"]
