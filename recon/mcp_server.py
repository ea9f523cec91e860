"""MCP server exposing recon's page parser as a tool."""

from __future__ import annotations

import asyncio
import logging

from mcp.server.fastmcp import FastMCP

from .parser import Parser

logger = logging.getLogger("recon.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="recon")


@mcp.tool()
async def recon(
    url: str,
    min_confidence: float = 0.0,
) -> str:
    """Fetch a web page and return its OpenGraph summary and ranked images as JSON."""

    parser = Parser()
    # Parsing blocks on network I/O; keep the event loop free.
    result = await asyncio.to_thread(parser.parse_with_confidence, url, min_confidence)
    return result.to_json(indent=2)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
