"""
HTTP middleware: request id and access logging.

Each request gets a request_id (X-Request-ID header if the client sent one,
otherwise a fresh uuid4 hex) bound into the structlog context, an
`http_request` log line with status and duration_ms, and the id echoed back.
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from solana_instruction_api.api_logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = (request.headers.get(REQUEST_ID_HEADER) or "").strip() or uuid.uuid4().hex
    clear_request_context()
    bind_request_context(request_id=request_id)
    # the 500 handler runs outside this middleware and reads the id from here
    request.state.request_id = request_id
    t_start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        # traceback is logged once by the 500 handler
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=500,
            duration_ms=round((time.perf_counter() - t_start) * 1000, 2),
        )
        raise
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - t_start) * 1000, 2),
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(request_logging_middleware)
