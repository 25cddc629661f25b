"""
Instruction → JSON-friendly dicts.

program_id and account pubkeys are base58 strings; instruction data is standard base64.
"""

from __future__ import annotations

from typing import Any

from solders.instruction import Instruction

from solana_instruction_api.utils.key_utils import b64encode


def account_metas(ix: Instruction) -> list[dict[str, Any]]:
    """Full account metas: pubkey, is_signer, is_writable (in instruction order)."""
    return [
        {"pubkey": str(meta.pubkey), "is_signer": meta.is_signer, "is_writable": meta.is_writable}
        for meta in ix.accounts
    ]


def account_signers(ix: Instruction) -> list[dict[str, Any]]:
    return [{"pubkey": str(meta.pubkey), "is_signer": meta.is_signer} for meta in ix.accounts]


def account_keys(ix: Instruction) -> list[str]:
    return [str(meta.pubkey) for meta in ix.accounts]


def instruction_to_dict(ix: Instruction, accounts: list[Any] | None = None) -> dict[str, Any]:
    """
    Serialize an instruction. accounts defaults to account_metas(ix); pass
    account_keys(ix) or account_signers(ix) for the narrower shapes.
    """
    return {
        "program_id": str(ix.program_id),
        "accounts": account_metas(ix) if accounts is None else accounts,
        "instruction_data": b64encode(bytes(ix.data)),
    }
