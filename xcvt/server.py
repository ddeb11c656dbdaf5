import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from xcvt.config import config
from xcvt.tools.conversion import CONVERSION_TOOLS, handle_conversion_tool

logger = logging.getLogger(__name__)

# Create the MCP server
server = Server("xcvt")


def get_enabled_tools() -> list[Tool]:
    """Get all tools from enabled tool groups."""
    tools: list[Tool] = []

    if config.is_enabled("conversion"):
        tools.extend(CONVERSION_TOOLS)
        logger.info("Enabled tool group: conversion (%d tools)", len(CONVERSION_TOOLS))

    return tools


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools based on configuration."""
    return get_enabled_tools()


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Route tool calls to the appropriate handler."""
    logger.info("Tool call: %s with args: %s", name, arguments)

    if name.startswith("unit_"):
        if not config.is_enabled("conversion"):
            return [TextContent(type="text", text="Conversion tools are not enabled")]
        return await handle_conversion_tool(name, arguments)

    else:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]


async def _serve_stdio() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Run the xcvt MCP server over stdio."""
    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.info("Starting xcvt MCP server")
    logger.info("Enabled tool groups: %s", ", ".join(sorted(config.enabled_tools)))
    asyncio.run(_serve_stdio())


if __name__ == "__main__":
    main()
