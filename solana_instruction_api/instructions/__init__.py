"""
Instruction builders: SPL Token (initialize_mint, mint_to, transfer) and
System program transfer, plus JSON serialization of the built instructions.
"""

from solana_instruction_api.instructions.serialize import (
    account_keys,
    account_metas,
    account_signers,
    instruction_to_dict,
)
from solana_instruction_api.instructions.system import build_sol_transfer
from solana_instruction_api.instructions.token import (
    build_initialize_mint,
    build_mint_to,
    build_token_transfer,
)

__all__ = [
    "account_keys",
    "account_metas",
    "account_signers",
    "build_initialize_mint",
    "build_mint_to",
    "build_sol_transfer",
    "build_token_transfer",
    "instruction_to_dict",
]
