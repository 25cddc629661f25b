"""
Ed25519 message signing and verification over solders Keypair / Signature.

Messages are signed as their UTF-8 bytes. Signatures travel as standard base64,
secrets as base58 of the 64-byte keypair.
"""

from __future__ import annotations

from dataclasses import dataclass

from solders.keypair import Keypair

from solana_instruction_api.core.exceptions import ApiError
from solana_instruction_api.utils.key_utils import (
    b64encode,
    keypair_from_base58,
    keypair_to_base58,
    parse_pubkey,
    signature_from_base64,
)


INVALID_MESSAGE_ENCODING = "Message is not valid UTF-8"


@dataclass(frozen=True)
class GeneratedKeypair:
    pubkey: str
    secret: str


@dataclass(frozen=True)
class SignedMessage:
    signature: str
    public_key: str
    message: str


def _message_bytes(message: str) -> bytes:
    # JSON allows lone surrogate escapes ("\ud800") that have no UTF-8 form
    try:
        return message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ApiError(INVALID_MESSAGE_ENCODING) from e


def generate_keypair() -> GeneratedKeypair:
    """New random keypair; pubkey and secret both base58."""
    keypair = Keypair()
    return GeneratedKeypair(pubkey=str(keypair.pubkey()), secret=keypair_to_base58(keypair))


def sign_message(message: str, secret: str) -> SignedMessage:
    if not message.strip() or not secret.strip():
        raise ApiError("Missing required fields")
    payload = _message_bytes(message)
    keypair = keypair_from_base58(secret)
    signature = keypair.sign_message(payload)
    return SignedMessage(
        signature=b64encode(bytes(signature)),
        public_key=str(keypair.pubkey()),
        message=message,
    )


def verify_message(message: str, signature: str, pubkey: str) -> bool:
    """True when `signature` (base64) is a valid signature of `message` by `pubkey`."""
    public_key = parse_pubkey(pubkey, "Invalid public key")
    sig = signature_from_base64(signature)
    return sig.verify(public_key, _message_bytes(message))
