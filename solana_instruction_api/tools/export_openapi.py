#!/usr/bin/env python3
"""
Write the API's OpenAPI document to a JSON file.

Usage:
  python -m solana_instruction_api.tools.export_openapi
  python -m solana_instruction_api.tools.export_openapi --output build/openapi.json

Default output: docs/openapi.json under the project root.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from solana_instruction_api.api_logging import get_logger

logger = get_logger(__name__)

_TOOLS_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _TOOLS_DIR.parent
_PROJECT_ROOT = _PACKAGE_DIR.parent
DEFAULT_OUTPUT_PATH = _PROJECT_ROOT / "docs" / "openapi.json"


def build_openapi() -> dict:
    from solana_instruction_api.api_server.server import create_app
    from solana_instruction_api.config import Settings, get_settings

    base = get_settings()
    # Schema is generated even when the served docs route is disabled.
    settings = Settings(
        api_host=base.api_host,
        port=base.port,
        log_level=base.log_level,
        docs_enabled=True,
        log_format=base.log_format,
    )
    return create_app(settings).openapi()


def write_openapi(output: Path, indent: int = 2) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    doc = build_openapi()
    output.write_text(json.dumps(doc, indent=indent) + "\n", encoding="utf-8")
    logger.info("openapi_written", path=str(output), paths=len(doc.get("paths", {})))
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the OpenAPI document as JSON")
    parser.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT_PATH, help="Output JSON path")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default 2)")
    args = parser.parse_args(argv)
    write_openapi(args.output, indent=args.indent)
    return 0


if __name__ == "__main__":
    sys.exit(main())
