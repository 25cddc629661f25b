"""
Tests for POST /message/sign and POST /message/verify.

Signatures are checked against solders directly so no fixed vectors are needed.
"""

from __future__ import annotations

import base64
import json

import base58
import pytest
from solders.keypair import Keypair
from solders.signature import Signature

VALID_WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"


# --- /message/sign ---


def test_sign_message(client, keypair, keypair_secret):
    r = client.post("/message/sign", json={"message": "Hello, Solana!", "secret": keypair_secret})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["public_key"] == str(keypair.pubkey())
    assert data["message"] == "Hello, Solana!"
    sig = Signature.from_bytes(base64.b64decode(data["signature"]))
    assert sig.verify(keypair.pubkey(), b"Hello, Solana!")


def test_sign_message_matches_solders(client, keypair, keypair_secret):
    """Ed25519 is deterministic: same signature as signing locally."""
    r = client.post("/message/sign", json={"message": "gm", "secret": keypair_secret})
    expected = base64.b64encode(bytes(keypair.sign_message(b"gm"))).decode("ascii")
    assert r.json()["data"]["signature"] == expected


@pytest.mark.parametrize(
    "body",
    [
        {"message": "", "secret": "x"},
        {"message": "hi", "secret": "   "},
        {"message": "hi"},
        {"secret": "x"},
        {},
    ],
)
def test_sign_message_missing_fields(client, body):
    r = client.post("/message/sign", json=body)
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Missing required fields"}


def test_sign_message_secret_not_base58(client):
    r = client.post("/message/sign", json={"message": "hi", "secret": "0OIl+/"})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid base58-encoded secret key"


def test_sign_message_secret_wrong_length(client):
    short = base58.b58encode(b"\x01" * 32).decode("ascii")
    r = client.post("/message/sign", json={"message": "hi", "secret": short})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid secret key format (must be 64 bytes)"


@pytest.mark.parametrize("suffix", ["\n", " ", "\t"])
def test_sign_message_secret_with_trailing_whitespace(client, keypair_secret, suffix):
    r = client.post("/message/sign", json={"message": "hi", "secret": keypair_secret + suffix})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid base58-encoded secret key"}


def test_sign_message_lone_surrogate(client, keypair_secret):
    # escaped on the wire; the decoded str holds an unpaired surrogate
    payload = json.dumps({"message": "\ud800", "secret": keypair_secret})
    r = client.post("/message/sign", content=payload, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Message is not valid UTF-8"}


# --- /message/verify ---


def test_sign_then_verify(client, keypair, keypair_secret):
    signed = client.post("/message/sign", json={"message": "round trip", "secret": keypair_secret}).json()["data"]
    r = client.post(
        "/message/verify",
        json={"message": "round trip", "signature": signed["signature"], "pubkey": signed["public_key"]},
    )
    assert r.status_code == 200
    assert r.json() == {
        "success": True,
        "data": {"valid": True, "message": "round trip", "pubkey": signed["public_key"]},
    }


def test_verify_wrong_message_is_invalid(client, keypair):
    signature = base64.b64encode(bytes(keypair.sign_message(b"original"))).decode("ascii")
    r = client.post(
        "/message/verify",
        json={"message": "tampered", "signature": signature, "pubkey": str(keypair.pubkey())},
    )
    assert r.status_code == 200
    assert r.json()["data"]["valid"] is False


def test_verify_wrong_signer_is_invalid(client, keypair):
    other = Keypair()
    signature = base64.b64encode(bytes(keypair.sign_message(b"hello"))).decode("ascii")
    r = client.post(
        "/message/verify",
        json={"message": "hello", "signature": signature, "pubkey": str(other.pubkey())},
    )
    assert r.status_code == 200
    assert r.json()["data"]["valid"] is False


def test_verify_invalid_pubkey(client, keypair):
    signature = base64.b64encode(bytes(keypair.sign_message(b"hello"))).decode("ascii")
    r = client.post("/message/verify", json={"message": "hello", "signature": signature, "pubkey": "not-a-key"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid public key"}


def test_verify_invalid_base64(client):
    r = client.post("/message/verify", json={"message": "hello", "signature": "%%%not base64%%%", "pubkey": VALID_WALLET})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid base64 signature"


def test_verify_signature_wrong_length(client):
    short = base64.b64encode(b"\x00" * 10).decode("ascii")
    r = client.post("/message/verify", json={"message": "hello", "signature": short, "pubkey": VALID_WALLET})
    assert r.status_code == 400
    assert r.json()["error"] == "Failed to parse signature"


def test_verify_echoes_inputs(client):
    """A zero signature is well-formed but never valid; inputs are echoed unchanged."""
    zero = base64.b64encode(b"\x00" * 64).decode("ascii")
    r = client.post("/message/verify", json={"message": "echo", "signature": zero, "pubkey": VALID_WALLET})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data == {"valid": False, "message": "echo", "pubkey": VALID_WALLET}


def test_verify_lone_surrogate(client):
    zero = base64.b64encode(b"\x00" * 64).decode("ascii")
    payload = json.dumps({"message": "\ud800", "signature": zero, "pubkey": VALID_WALLET})
    r = client.post("/message/verify", content=payload, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Message is not valid UTF-8"}


def test_verify_non_canonical_base64(client, keypair):
    """Non-zero unused trailing bits are rejected even though a lenient decoder would accept them."""
    signature = base64.b64encode(bytes(keypair.sign_message(b"hello"))).decode("ascii")
    # 64 bytes encode to 86 chars + "==": the last char carries 4 unused bits
    assert signature.endswith("==")
    last = signature[-3]
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    tampered = signature[:-3] + alphabet[alphabet.index(last) | 1] + "=="
    r = client.post("/message/verify", json={"message": "hello", "signature": tampered, "pubkey": str(keypair.pubkey())})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Invalid base64 signature"}
