"""
Application-level exceptions.

Every input or SDK failure surfaces as ApiError; the API server renders it as
HTTP 400 with {"success": false, "error": message}.
"""

from __future__ import annotations


class ApiError(Exception):
    """Request could not be served; message is returned to the client verbatim."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPubkeyError(ApiError):
    """A public key string is not valid base58 for 32 bytes."""


class InvalidSecretKeyError(ApiError):
    """A secret key is not base58 or not a valid 64-byte keypair."""


class InvalidSignatureError(ApiError):
    """A signature is not base64 or not 64 bytes."""


class InstructionBuildError(ApiError):
    """The token program builder rejected its arguments."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to build instruction: {reason}")
        self.reason = reason
