"""
Message routes: POST /message/sign and POST /message/verify.

A bad signature is not an error: verify returns 200 with valid=false. Only
unparsable inputs give 400.
"""

from __future__ import annotations

from fastapi import APIRouter

from solana_instruction_api.api_logging import get_logger
from solana_instruction_api.api_server.schemas import (
    ERROR_RESPONSES,
    SignMessageRequest,
    SignMessageResponse,
    SuccessResponse,
    VerifyMessageRequest,
    VerifyMessageResponse,
)
from solana_instruction_api.signing import sign_message as sign, verify_message as verify

logger = get_logger(__name__)

router = APIRouter(prefix="/message", tags=["message"])


@router.post("/sign", response_model=SuccessResponse[SignMessageResponse], responses=ERROR_RESPONSES)
def sign_message(body: SignMessageRequest) -> SuccessResponse[SignMessageResponse]:
    signed = sign(body.message, body.secret)
    logger.info("message_signed", public_key=signed.public_key, message_len=len(body.message))
    return SuccessResponse[SignMessageResponse](
        data=SignMessageResponse(
            signature=signed.signature,
            public_key=signed.public_key,
            message=signed.message,
        ),
    )


@router.post("/verify", response_model=SuccessResponse[VerifyMessageResponse], responses=ERROR_RESPONSES)
def verify_message(body: VerifyMessageRequest) -> SuccessResponse[VerifyMessageResponse]:
    valid = verify(body.message, body.signature, body.pubkey)
    logger.info("message_verified", pubkey=body.pubkey, valid=valid)
    return SuccessResponse[VerifyMessageResponse](
        data=VerifyMessageResponse(valid=valid, message=body.message, pubkey=body.pubkey),
    )
