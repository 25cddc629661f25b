"""System program transfer (SOL) builder."""

from __future__ import annotations

from solders.instruction import Instruction
from solders.system_program import TransferParams, transfer

from solana_instruction_api.core.exceptions import ApiError
from solana_instruction_api.utils.key_utils import parse_pubkey


def build_sol_transfer(from_address: str, to_address: str, lamports: int) -> Instruction:
    """
    Transfer `lamports` from `from_address` to `to_address`.
    Zero lamports is rejected before either key is parsed.
    """
    if lamports == 0:
        raise ApiError("Lamports must be greater than 0")
    from_pubkey = parse_pubkey(from_address, "Invalid 'from' pubkey")
    to_pubkey = parse_pubkey(to_address, "Invalid 'to' pubkey")
    return transfer(TransferParams(from_pubkey=from_pubkey, to_pubkey=to_pubkey, lamports=lamports))
