"""Filament MCP Server - Filament, Laravel and Livewire documentation over MCP."""

import argparse
import asyncio
import logging

from fastmcp import FastMCP

from filament_mcp import __version__
from filament_mcp.config import get_log_config
from filament_mcp.logs import configure_logging
from filament_mcp.remote.service import close_field_service
from filament_mcp.tools import (
    filament_docs,
    form_field,
    laravel_docs,
    livewire_docs,
)

mcp = FastMCP(
    "Filament MCP Server",
    instructions=(
        "Documentation server for the Filament PHP admin framework and its "
        "Laravel/Livewire foundations. Provides tools for browsing and searching "
        "local Markdown documentation, and for extracting structured form field "
        "references from the Filament documentation website."
    ),
)

logger = logging.getLogger("filament-mcp.server")

# Register remote field reference tool
form_field.register(mcp)

# Register local documentation tools
filament_docs.register(mcp)
laravel_docs.register(mcp)
livewire_docs.register(mcp)


def main():
    """Entry point for the Filament MCP server."""
    parser = argparse.ArgumentParser(
        prog="filament-mcp",
        description="Filament MCP Server - Filament, Laravel and Livewire documentation over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"filament-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    configure_logging(get_log_config())
    logger.info("Starting filament-mcp %s (transport=%s)", __version__, args.transport)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass
    finally:
        try:
            asyncio.run(close_field_service())
        except Exception as exc:
            logger.debug("HTTP client cleanup skipped: %s", exc)


if __name__ == "__main__":
    main()
