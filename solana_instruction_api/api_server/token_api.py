"""
SPL Token routes: POST /token/create (InitializeMint) and POST /token/mint (MintTo).

Both return the built instruction with full account metas; nothing is sent on-chain.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_instruction_api.api_logging import get_logger
from solana_instruction_api.api_server.schemas import (
    ERROR_RESPONSES,
    CreateTokenRequest,
    MintTokenRequest,
    SuccessResponse,
    TokenInstructionResponse,
)
from solana_instruction_api.instructions import build_initialize_mint, build_mint_to, instruction_to_dict

logger = get_logger(__name__)

router = APIRouter(prefix="/token", tags=["token"])


@router.post(
    "/create",
    response_model=SuccessResponse[TokenInstructionResponse],
    responses=ERROR_RESPONSES,
)
def create_token(body: CreateTokenRequest) -> SuccessResponse[TokenInstructionResponse]:
    ix = build_initialize_mint(body.mint, body.mint_authority, body.decimals)
    logger.info("token_create_built", mint=body.mint, decimals=body.decimals)
    return SuccessResponse[TokenInstructionResponse](
        data=TokenInstructionResponse(**instruction_to_dict(ix)),
    )


@router.post(
    "/mint",
    response_model=SuccessResponse[TokenInstructionResponse],
    responses=ERROR_RESPONSES,
)
def mint_token(body: MintTokenRequest) -> SuccessResponse[TokenInstructionResponse]:
    """MintTo instruction; the authority is the only signer (no multisig)."""
    ix = build_mint_to(body.mint, body.destination, body.authority, body.amount)
    logger.info("token_mint_built", mint=body.mint, amount=body.amount)
    return SuccessResponse[TokenInstructionResponse](
        data=TokenInstructionResponse(**instruction_to_dict(ix)),
    )
