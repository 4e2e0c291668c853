"""marimo Docs MCP Server - marimo API documentation exposed over MCP."""

import argparse
import asyncio
import logging
import sys

from fastmcp import FastMCP

from marimo_docs_mcp import __version__
from marimo_docs_mcp.config import get_docs_config
from marimo_docs_mcp.docs import close_docs_fetcher
from marimo_docs_mcp.tools import get_element_api, search_api

mcp = FastMCP(
    "marimo-docs",
    instructions=(
        "marimo documentation MCP server. "
        "Provides tools for fetching the API documentation of marimo UI elements, "
        "layouts, media and core features from docs.marimo.io, and for searching "
        "across all of them."
    ),
)

logger = logging.getLogger("marimo-docs-mcp.server")

get_element_api.register(mcp)
search_api.register(mcp)


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr so they never mix with stdio responses."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root = logging.getLogger("marimo-docs-mcp")
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.propagate = False


def main():
    """Entry point for the marimo docs MCP server."""
    config = get_docs_config()
    parser = argparse.ArgumentParser(
        prog="marimo-docs-mcp",
        description="marimo Docs MCP Server - marimo API documentation exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"marimo-docs-mcp {__version__}")
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
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Diagnostic log level on stderr (default: {config.log_level})",
    )
    args = parser.parse_args()

    configure_logging(args.log_level)

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages (e.g. "Cancel N running task(s)")
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.info("marimo docs MCP server starting (transport=%s, base_url=%s)", args.transport, config.base_url)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass
    finally:
        try:
            asyncio.run(close_docs_fetcher())
        except Exception as exc:
            logger.debug("Docs fetcher cleanup skipped: %s", exc)


if __name__ == "__main__":
    main()
