"""
Global exception handlers. Every failure is rendered as {"success": false, "error": "..."}.

- ApiError → 400 with the error's message
- RequestValidationError (bad JSON, missing/mistyped fields) → 400
- HTTPException (unknown route, wrong method) → its own status code
- anything else → 500 with a generic message and the X-Request-ID header; details only go to the log
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from solana_instruction_api.api_logging import get_logger
from solana_instruction_api.api_server.middleware import REQUEST_ID_HEADER
from solana_instruction_api.core.exceptions import ApiError

logger = get_logger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_body(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


def validation_error_message(errors: list[dict[str, Any]]) -> str:
    """One human-readable line for a list of pydantic errors."""
    if not errors:
        return "Invalid request body"
    if any(e.get("type") == "missing" for e in errors):
        return MISSING_FIELDS_MESSAGE
    first = errors[0]
    field = ".".join(str(loc) for loc in first.get("loc", ()) if loc != "body")
    msg = first.get("msg", "invalid value")
    return f"Invalid request body: {field}: {msg}" if field else f"Invalid request body: {msg}"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        logger.warning("request_rejected", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = validation_error_message(list(exc.errors()))
        logger.warning("request_invalid", path=request.url.path, error=message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request_failed", path=request.url.path, error=str(exc))
        request_id = getattr(request.state, "request_id", None)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(INTERNAL_ERROR_MESSAGE),
            headers={REQUEST_ID_HEADER: request_id} if request_id else None,
        )
