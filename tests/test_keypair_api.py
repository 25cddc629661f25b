"""
Tests for POST /keypair and the shared envelope/error behaviour of the server
(health, unknown routes, request id header).
"""

from __future__ import annotations

import base58
from solders.keypair import Keypair


def test_generate_keypair(client):
    """Returns a base58 pubkey and a base58 64-byte secret that belong together."""
    r = client.post("/keypair")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    secret_bytes = base58.b58decode(data["secret"])
    assert len(secret_bytes) == 64
    assert str(Keypair.from_bytes(secret_bytes).pubkey()) == data["pubkey"]


def test_generate_keypair_is_random(client):
    first = client.post("/keypair").json()["data"]
    second = client.post("/keypair").json()["data"]
    assert first["pubkey"] != second["pubkey"]
    assert first["secret"] != second["secret"]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_unknown_route_uses_error_envelope(client):
    r = client.post("/does/not/exist", json={})
    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]


def test_wrong_method_uses_error_envelope(client):
    r = client.get("/keypair")
    assert r.status_code == 405
    assert r.json()["success"] is False


def test_request_id_echoed(client):
    r = client.post("/keypair", headers={"X-Request-ID": "req-42"})
    assert r.headers["X-Request-ID"] == "req-42"


def test_request_id_generated_when_missing(client):
    r = client.post("/keypair")
    assert len(r.headers["X-Request-ID"]) == 32


def test_openapi_served(client):
    r = client.get("/api-docs/openapi.json")
    assert r.status_code == 200
    paths = r.json()["paths"]
    for route in (
        "/keypair",
        "/token/create",
        "/token/mint",
        "/message/sign",
        "/message/verify",
        "/send/sol",
        "/send/token",
    ):
        assert route in paths


def test_access_log_line(client):
    from structlog.testing import capture_logs

    with capture_logs() as logs:
        r = client.post("/keypair", headers={"X-Request-ID": "req-log"})
    assert r.status_code == 200
    access = [e for e in logs if e.get("event") == "http_request"]
    assert len(access) == 1
    entry = access[0]
    assert entry["method"] == "POST"
    assert entry["path"] == "/keypair"
    assert entry["status"] == 200
    assert isinstance(entry["duration_ms"], float)
    assert entry["duration_ms"] >= 0
