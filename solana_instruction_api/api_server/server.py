"""
FastAPI server: stateless instruction endpoints.

Routes:
  POST /keypair, /token/create, /token/mint, /message/sign, /message/verify,
       /send/sol, /send/token
  GET  /health
  GET  /docs (Swagger UI) and /api-docs/openapi.json when DOCS_ENABLED

Nothing is persisted and nothing is sent to an RPC node; each handler parses
its body, calls one SDK function and returns the envelope.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from solana_instruction_api import __version__
from solana_instruction_api.api_logging import configure_logging, get_logger
from solana_instruction_api.api_server.error_handlers import register_error_handlers
from solana_instruction_api.api_server.keypair_api import router as keypair_router
from solana_instruction_api.api_server.message_api import router as message_router
from solana_instruction_api.api_server.middleware import register_middleware
from solana_instruction_api.api_server.token_api import router as token_router
from solana_instruction_api.api_server.transfer_api import router as transfer_router
from solana_instruction_api.config import Settings, get_settings

logger = get_logger(__name__)

DOCS_URL = "/docs"
OPENAPI_URL = "/api-docs/openapi.json"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("api_started", version=__version__)
    yield
    logger.info("api_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_format, settings.log_level)
    app = FastAPI(
        title="Solana Instruction API",
        description="Build SPL Token and System program instructions, generate keypairs, sign and verify messages.",
        version=__version__,
        docs_url=DOCS_URL if settings.docs_enabled else None,
        redoc_url=None,
        openapi_url=OPENAPI_URL if settings.docs_enabled else None,
        lifespan=lifespan,
    )

    register_middleware(app)
    register_error_handlers(app)

    app.include_router(keypair_router)
    app.include_router(token_router)
    app.include_router(message_router)
    app.include_router(transfer_router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        """Liveness check: API is up."""
        return {"status": "ok"}

    return app


app = create_app()
