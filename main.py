"""
Main entrypoint: run the instruction API with uvicorn.

Env: API_HOST (default 0.0.0.0), PORT (default 3000), LOG_LEVEL, LOG_FORMAT, DOCS_ENABLED.
A .env file in the project root is loaded first.

Equivalent: uvicorn solana_instruction_api.api_server.app:app --host 0.0.0.0 --port 3000
"""

from solana_instruction_api.api_logging import configure_logging, get_logger
from solana_instruction_api.config import get_settings

logger = get_logger("main")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_format, settings.log_level)

    from solana_instruction_api.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", url=f"http://{settings.api_host}:{settings.port}")
    uvicorn.run(app, host=settings.api_host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
