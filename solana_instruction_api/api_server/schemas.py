"""
Request and response models for every route.

Responses share one envelope: {"success": true, "data": ...} on success and
{"success": false, "error": "..."} on failure. Integer fields are strict so
"5" or 5.0 are rejected rather than coerced.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

U8_MAX = 255
U64_MAX = 2**64 - 1

T = TypeVar("T")


# -----------------------------------------------------------------------------
# Envelope
# -----------------------------------------------------------------------------


class SuccessResponse(BaseModel, Generic[T]):
    success: bool = Field(True, description="Always true")
    data: T


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Always false")
    error: str = Field(..., description="Human-readable reason")


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------


class CreateTokenRequest(BaseModel):
    """POST /token/create body."""

    mint: str = Field(..., description="Mint account (base58)")
    mint_authority: str = Field(..., description="Mint authority (base58)")
    decimals: int = Field(..., ge=0, le=U8_MAX, strict=True, description="Token decimals (u8)")


class MintTokenRequest(BaseModel):
    """POST /token/mint body."""

    mint: str = Field(..., description="Mint account (base58)")
    destination: str = Field(..., description="Destination token account (base58)")
    authority: str = Field(..., description="Mint authority (base58)")
    amount: int = Field(..., ge=0, le=U64_MAX, strict=True, description="Base units to mint (u64)")


class SignMessageRequest(BaseModel):
    message: str = Field(..., description="UTF-8 message to sign")
    secret: str = Field(..., description="base58 of the 64-byte keypair")


class VerifyMessageRequest(BaseModel):
    message: str = Field(..., description="UTF-8 message that was signed")
    signature: str = Field(..., description="Signature (base64)")
    pubkey: str = Field(..., description="Signer public key (base58)")


class SendSolRequest(BaseModel):
    """POST /send/sol body. `from` is a Python keyword, so the field is from_ with alias."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="Sender (base58)")
    to: str = Field(..., description="Recipient (base58)")
    lamports: int = Field(..., ge=0, le=U64_MAX, strict=True, description="Lamports to send (u64, > 0)")


class SendTokenRequest(BaseModel):
    destination: str = Field(..., description="Destination token account (base58)")
    mint: str = Field(..., description="Source account (base58)")
    owner: str = Field(..., description="Owner and signer (base58)")
    amount: int = Field(..., ge=0, le=U64_MAX, strict=True, description="Base units to send (u64)")


# -----------------------------------------------------------------------------
# Response payloads
# -----------------------------------------------------------------------------


class KeypairData(BaseModel):
    pubkey: str = Field(..., description="Public key (base58)")
    secret: str = Field(..., description="64-byte keypair (base58)")


class AccountMetaInfo(BaseModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class AccountInfo(BaseModel):
    pubkey: str
    is_signer: bool


class TokenInstructionResponse(BaseModel):
    """Instruction built by /token/create and /token/mint."""

    program_id: str = Field(..., description="SPL Token program id")
    accounts: list[AccountMetaInfo]
    instruction_data: str = Field(
        ...,
        description=(
            "Instruction data (base64). InitializeMint data is always 67 bytes: "
            "the freeze-authority option tag is followed by 32 freeze-authority bytes "
            "(zeroed when unset). MintTo data is 9 bytes."
        ),
    )


class SignMessageResponse(BaseModel):
    signature: str = Field(..., description="Signature (base64)")
    public_key: str = Field(..., description="Signer public key (base58)")
    message: str


class VerifyMessageResponse(BaseModel):
    valid: bool
    message: str
    pubkey: str


class SendSolResponse(BaseModel):
    program_id: str = Field(..., description="System program id")
    accounts: list[str] = Field(..., description="[from, to]")
    instruction_data: str = Field(..., description="Instruction data (base64)")


class SendTokenResponse(BaseModel):
    program_id: str = Field(..., description="SPL Token program id")
    accounts: list[AccountInfo]
    instruction_data: str = Field(..., description="Instruction data (base64)")


ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid input"}}
