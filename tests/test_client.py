"""
Tests for the requests-based InstructionApiClient. The HTTP session is mocked.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from solana_instruction_api.client import InstructionApiClient, InstructionApiClientError


def _response(status_code: int, body, content_type: str = "application/json") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    resp.headers = {"content-type": content_type}
    resp.json.return_value = body
    resp.text = str(body)
    return resp


def _client_with(resp: MagicMock) -> InstructionApiClient:
    client = InstructionApiClient("http://api.test/")
    client._session = MagicMock()
    client._session.request.return_value = resp
    return client


def test_generate_keypair_returns_data():
    client = _client_with(_response(200, {"success": True, "data": {"pubkey": "P", "secret": "S"}}))
    assert client.generate_keypair() == {"pubkey": "P", "secret": "S"}
    client._session.request.assert_called_once_with("POST", "http://api.test/keypair", json=None, timeout=30.0)


def test_send_sol_uses_from_key():
    client = _client_with(_response(200, {"success": True, "data": {"program_id": "1"}}))
    client.send_sol("A", "B", 10)
    _, kwargs = client._session.request.call_args
    assert kwargs["json"] == {"from": "A", "to": "B", "lamports": 10}


def test_verify_message_returns_flag():
    client = _client_with(_response(200, {"success": True, "data": {"valid": True, "message": "m", "pubkey": "p"}}))
    assert client.verify_message("m", "sig", "p") is True


def test_error_envelope_raises():
    client = _client_with(_response(400, {"success": False, "error": "Invalid mint pubkey"}))
    with pytest.raises(InstructionApiClientError, match="Invalid mint pubkey") as excinfo:
        client.mint_token("bad", "d", "a", 1)
    assert excinfo.value.status_code == 400


def test_non_json_error_raises():
    client = _client_with(_response(502, None, content_type="text/html"))
    with pytest.raises(InstructionApiClientError) as excinfo:
        client.health()
    assert excinfo.value.status_code == 502


def test_health_passthrough():
    client = _client_with(_response(200, {"status": "ok"}))
    assert client.health() == {"status": "ok"}
