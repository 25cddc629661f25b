"""Keypair generation and message sign/verify."""

from solana_instruction_api.signing.messages import (
    GeneratedKeypair,
    SignedMessage,
    generate_keypair,
    sign_message,
    verify_message,
)

__all__ = ["GeneratedKeypair", "SignedMessage", "generate_keypair", "sign_message", "verify_message"]
