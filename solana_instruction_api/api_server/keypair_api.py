"""POST /keypair: generate a fresh Solana keypair."""

from __future__ import annotations

from fastapi import APIRouter

from solana_instruction_api.api_logging import get_logger
from solana_instruction_api.api_server.schemas import ERROR_RESPONSES, KeypairData, SuccessResponse
from solana_instruction_api.signing import generate_keypair

logger = get_logger(__name__)

router = APIRouter(tags=["keypair"])


@router.post("/keypair", response_model=SuccessResponse[KeypairData], responses=ERROR_RESPONSES)
def create_keypair() -> SuccessResponse[KeypairData]:
    """Generate a keypair. The secret is base58 of the 64-byte keypair and is never logged."""
    generated = generate_keypair()
    logger.info("keypair_generated", pubkey=generated.pubkey)
    return SuccessResponse[KeypairData](data=KeypairData(pubkey=generated.pubkey, secret=generated.secret))
