"""ImageKit MCP server over stdio.

Run:
  imagekit-mcp
  or: python -m modules.imagekit.server_mcp

stdout carries protocol frames only; all logging goes to stderr.
"""

from __future__ import annotations

import asyncio
import logging
import sys

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from modules.imagekit.client import close_client
from modules.imagekit.dispatcher import dispatch
from modules.imagekit.manifest import MANIFEST
from modules.imagekit.tools import ImageKitTools
from shared.config import get_settings

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().log_level.upper())
    ),
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
)

logger = structlog.get_logger()

SERVER_NAME = "imagekit-mcp-server"

server = Server(SERVER_NAME, version=MANIFEST.version)
tools = ImageKitTools()


class ToolCallFailed(Exception):
    """Carries an error envelope's text to the SDK, which marks the result isError."""


def build_tool_list() -> list[types.Tool]:
    return [
        types.Tool(
            name=tool.short_name,
            description=tool.description,
            inputSchema=tool.input_schema(),
        )
        for tool in MANIFEST.tools
    ]


async def handle_call(name: str, arguments: dict | None) -> list[types.TextContent]:
    """Dispatch one call and translate the envelope for the SDK."""
    result = await dispatch(tools, name, arguments)
    if result.is_error:
        raise ToolCallFailed(result.text)
    return [types.TextContent(type="text", text=part.text) for part in result.content]


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return build_tool_list()


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[types.TextContent]:
    return await handle_call(name, arguments)


async def serve() -> None:
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("imagekit_mcp_running", transport="stdio", tools=len(MANIFEST.tools))
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await close_client()


def main() -> None:
    asyncio.run(serve())


if __name__ == "__main__":  # pragma: no cover
    main()
