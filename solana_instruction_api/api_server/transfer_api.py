"""
Transfer routes: POST /send/sol (System transfer) and POST /send/token (SPL Token transfer).

/send/sol lists accounts as bare pubkey strings; /send/token as {pubkey, is_signer}.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_instruction_api.api_logging import get_logger
from solana_instruction_api.api_server.schemas import (
    ERROR_RESPONSES,
    SendSolRequest,
    SendSolResponse,
    SendTokenRequest,
    SendTokenResponse,
    SuccessResponse,
)
from solana_instruction_api.instructions import (
    account_keys,
    account_signers,
    build_sol_transfer,
    build_token_transfer,
    instruction_to_dict,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/send", tags=["send"])


@router.post("/sol", response_model=SuccessResponse[SendSolResponse], responses=ERROR_RESPONSES)
def send_sol(body: SendSolRequest) -> SuccessResponse[SendSolResponse]:
    ix = build_sol_transfer(body.from_, body.to, body.lamports)
    logger.info("send_sol_built", lamports=body.lamports)
    return SuccessResponse[SendSolResponse](
        data=SendSolResponse(**instruction_to_dict(ix, accounts=account_keys(ix))),
    )


@router.post("/token", response_model=SuccessResponse[SendTokenResponse], responses=ERROR_RESPONSES)
def send_token(body: SendTokenRequest) -> SuccessResponse[SendTokenResponse]:
    ix = build_token_transfer(body.destination, body.mint, body.owner, body.amount)
    logger.info("send_token_built", mint=body.mint, amount=body.amount)
    return SuccessResponse[SendTokenResponse](
        data=SendTokenResponse(**instruction_to_dict(ix, accounts=account_signers(ix))),
    )
