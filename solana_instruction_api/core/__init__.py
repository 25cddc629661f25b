"""
Core cross-cutting pieces: domain exceptions shared by the builders and the API.
"""

from solana_instruction_api.core.exceptions import (
    ApiError,
    InstructionBuildError,
    InvalidPubkeyError,
    InvalidSecretKeyError,
    InvalidSignatureError,
)

__all__ = [
    "ApiError",
    "InstructionBuildError",
    "InvalidPubkeyError",
    "InvalidSecretKeyError",
    "InvalidSignatureError",
]
