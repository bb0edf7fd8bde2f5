"""
YAPI MCP Server

Serves the YAPI resources and tools over MCP stdio. Each request is
answered by one provider call, which runs in a worker thread so the
blocking registry request doesn't stall the stdio loop.

Environment variables:
    YAPI_BASE_URL: Registry base URL (default: "")
    YAPI_TOKEN: Project token (required)
    YAPI_TIMEOUT: Per-request timeout in seconds (default: none)
    YAPI_MCP_DEBUG: Enable debug logging (default: false)
    YAPI_MCP_LOG_FILE: Optional log file path
"""

import asyncio
import sys
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from yapi_mcp import resources, tools
from yapi_mcp.configs import YapiSettings, get_logger, load_settings, setup_logging
from yapi_mcp.configs.constants import SERVER_NAME, SERVER_VERSION
from yapi_mcp.exceptions import ConfigurationError
from yapi_mcp.utils.http_client import YapiClient

logger = get_logger("server")


def create_server(client: YapiClient) -> Server:
    """
    Build the MCP server with the four YAPI request handlers registered.

    Args:
        client: Registry client shared by all handlers

    Returns:
        Configured low-level MCP Server
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_resources()
    async def handle_list_resources() -> list[types.Resource]:
        result = resources.list_resources()
        return [types.Resource(**descriptor) for descriptor in result["resources"]]

    @server.read_resource()
    async def handle_read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        try:
            result = await asyncio.to_thread(resources.read_resource, client, str(uri))
        except Exception as e:
            logger.error(f"[MCP Error] read_resource {uri}: {e}")
            raise
        return [
            ReadResourceContents(content=item["text"], mime_type=item["mimeType"])
            for item in result["contents"]
        ]

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        result = tools.list_tools()
        return [types.Tool(**schema) for schema in result["tools"]]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        try:
            result = await asyncio.to_thread(tools.call_tool, client, name, arguments)
        except Exception as e:
            logger.error(f"[MCP Error] call_tool {name}: {e}")
            raise
        return [types.TextContent(**item) for item in result["content"]]

    return server


async def run(settings: YapiSettings) -> None:
    """Serve MCP over stdio until the stream closes or the task is cancelled."""
    server = create_server(YapiClient(settings))
    async with stdio_server() as (read_stream, write_stream):
        logger.info("YAPI MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> None:
    """Main entry point for the MCP server."""
    setup_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    logger.info(f"Starting YAPI MCP server (base_url={settings.base_url or '<relative>'})")

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Server interrupted")
        sys.exit(0)


if __name__ == "__main__":
    main()
