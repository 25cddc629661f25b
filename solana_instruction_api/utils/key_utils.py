"""Key, signature and blob parsing helpers shared by the builders and signing code."""

from __future__ import annotations

import base64
import binascii

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from solana_instruction_api.core.exceptions import (
    InvalidPubkeyError,
    InvalidSecretKeyError,
    InvalidSignatureError,
)

KEYPAIR_LENGTH = 64
SIGNATURE_LENGTH = 64


def parse_pubkey(value: str, error_message: str) -> Pubkey:
    """Parse a base58 public key; raise InvalidPubkeyError(error_message) if it is not one."""
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidPubkeyError(error_message) from e


def keypair_to_base58(keypair: Keypair) -> str:
    """base58 of the 64-byte keypair (secret seed followed by public key)."""
    return base58.b58encode(bytes(keypair)).decode("ascii")


def keypair_from_base58(secret: str) -> Keypair:
    # base58 strips trailing whitespace; a secret carrying any is not valid base58
    if secret != secret.rstrip():
        raise InvalidSecretKeyError("Invalid base58-encoded secret key")
    try:
        raw = base58.b58decode(secret)
    except ValueError as e:
        raise InvalidSecretKeyError("Invalid base58-encoded secret key") from e
    if len(raw) != KEYPAIR_LENGTH:
        raise InvalidSecretKeyError("Invalid secret key format (must be 64 bytes)")
    try:
        return Keypair.from_bytes(raw)
    except ValueError as e:
        raise InvalidSecretKeyError("Invalid secret key format (must be 64 bytes)") from e


def b64encode(data: bytes) -> str:
    """Standard (padded) base64 as text."""
    return base64.b64encode(data).decode("ascii")


def b64decode(value: str) -> bytes:
    """
    Strict standard base64 decode. Raises ValueError on any non-alphabet
    character, bad padding, or non-zero unused trailing bits (non-canonical input).
    """
    try:
        raw = base64.b64decode(value, validate=True)
    except binascii.Error as e:
        raise ValueError(str(e)) from e
    if b64encode(raw) != value:
        raise ValueError("non-canonical base64")
    return raw


def signature_from_base64(value: str) -> Signature:
    try:
        raw = b64decode(value)
    except ValueError as e:
        raise InvalidSignatureError("Invalid base64 signature") from e
    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidSignatureError("Failed to parse signature")
    try:
        return Signature.from_bytes(raw)
    except ValueError as e:
        raise InvalidSignatureError("Failed to parse signature") from e
