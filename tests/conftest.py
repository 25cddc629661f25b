"""
Pytest fixtures for the instruction API tests. The app is stateless, so one
TestClient per test is enough; keypair fixtures come straight from solders.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def client():
    """FastAPI TestClient over the module-level app."""
    from fastapi.testclient import TestClient

    from solana_instruction_api.api_server.server import app

    return TestClient(app)


@pytest.fixture
def keypair():
    from solders.keypair import Keypair

    return Keypair()


@pytest.fixture
def keypair_secret(keypair):
    """base58 of the 64-byte keypair, as /message/sign expects."""
    import base58

    return base58.b58encode(bytes(keypair)).decode("ascii")
