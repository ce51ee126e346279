#!/usr/bin/env python3
"""
Entry point for the CHUK Fretboard MCP Server.

Serves the catalog and tuning tools over stdio (default) or http.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_fretboard.constants import TUNINGS_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the MCP server."""
    parser = argparse.ArgumentParser(description="CHUK Fretboard MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tunings-dir",
        type=Path,
        default=None,
        help="Project directory with extra tuning YAML files (default: ./tunings)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, configure the tuning directory and run the server."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # async_server builds its TuningLoader at import time, so set the directory first
    if args.tunings_dir is not None:
        os.environ[TUNINGS_DIR_ENV] = str(args.tunings_dir.resolve())

    from chuk_mcp_fretboard.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Fretboard MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Fretboard MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
