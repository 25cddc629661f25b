"""
SPL Token instruction builders (initialize_mint, mint_to, transfer).

Thin wrappers over spl.token.instructions: parse the base58 inputs, call the
builder once against the SPL Token program, and report builder failures as
InstructionBuildError. No multisig signers and no freeze authority.
"""

from __future__ import annotations

from solders.instruction import Instruction
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.instructions import initialize_mint, mint_to, transfer
from spl.token.models import InitializeMintParams, MintToParams, TransferParams

from solana_instruction_api.api_logging import get_logger
from solana_instruction_api.core.exceptions import InstructionBuildError
from solana_instruction_api.utils.key_utils import parse_pubkey

logger = get_logger(__name__)


def build_initialize_mint(mint: str, mint_authority: str, decimals: int) -> Instruction:
    """
    InitializeMint for `mint` with `mint_authority` and `decimals`.
    Accounts: [mint (writable), rent sysvar].
    """
    mint_pubkey = parse_pubkey(mint, "Invalid mint public key")
    authority_pubkey = parse_pubkey(mint_authority, "Invalid mint authority public key")
    try:
        ix = initialize_mint(
            InitializeMintParams(
                decimals=decimals,
                program_id=TOKEN_PROGRAM_ID,
                mint=mint_pubkey,
                mint_authority=authority_pubkey,
                freeze_authority=None,
            )
        )
    except Exception as e:
        logger.warning("initialize_mint_build_failed", mint=mint, error=str(e))
        raise InstructionBuildError(str(e)) from e
    logger.debug("initialize_mint_built", mint=mint, decimals=decimals)
    return ix


def build_mint_to(mint: str, destination: str, authority: str, amount: int) -> Instruction:
    """MintTo `amount` base units into `destination`. Accounts: [mint w, destination w, authority signer]."""
    mint_pubkey = parse_pubkey(mint, "Invalid mint pubkey")
    dest_pubkey = parse_pubkey(destination, "Invalid destination pubkey")
    authority_pubkey = parse_pubkey(authority, "Invalid authority pubkey")
    try:
        ix = mint_to(
            MintToParams(
                program_id=TOKEN_PROGRAM_ID,
                mint=mint_pubkey,
                dest=dest_pubkey,
                mint_authority=authority_pubkey,
                amount=amount,
                signers=[],
            )
        )
    except Exception as e:
        logger.warning("mint_to_build_failed", mint=mint, error=str(e))
        raise InstructionBuildError(str(e)) from e
    logger.debug("mint_to_built", mint=mint, amount=amount)
    return ix


def build_token_transfer(destination: str, mint: str, owner: str, amount: int) -> Instruction:
    """
    Transfer `amount` base units. The source account is `mint`, the destination
    is `destination` and `owner` signs. Inputs are validated in the order
    destination, mint, owner.
    """
    dest_pubkey = parse_pubkey(destination, "Invalid destination pubkey")
    mint_pubkey = parse_pubkey(mint, "Invalid mint pubkey")
    owner_pubkey = parse_pubkey(owner, "Invalid owner pubkey")
    try:
        ix = transfer(
            TransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=mint_pubkey,
                dest=dest_pubkey,
                owner=owner_pubkey,
                amount=amount,
                signers=[],
            )
        )
    except Exception as e:
        logger.warning("token_transfer_build_failed", mint=mint, error=str(e))
        raise InstructionBuildError(str(e)) from e
    logger.debug("token_transfer_built", mint=mint, amount=amount)
    return ix
