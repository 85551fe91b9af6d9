"""
D&D 5e MCP Server using FastMCP
Supports all transport methods: stdio, SSE, and streamable-http
"""
import argparse
import asyncio
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .api import DndApiClient
from .config import ServerConfig
from .fnc_tools import (
    initialize_tools,
    handle_list_tools,
    handle_tool_call
)
from .fnc_resources import (
    set_resource_client,
    handle_list_resources,
    handle_read_resource
)

logger = logging.getLogger(__name__)

# Create FastMCP app
app = FastMCP("dnd5e-mcp")

# Set up the handlers using the internal MCP server for dynamic resources and tools
app._mcp_server.list_tools()(handle_list_tools)
app._mcp_server.call_tool(validate_input=False)(handle_tool_call)
app._mcp_server.list_resources()(handle_list_resources)
app._mcp_server.read_resource()(handle_read_resource)


def load_config(argv: Optional[list] = None) -> ServerConfig:
    """Build the server configuration from the command line and environment."""
    parser = argparse.ArgumentParser(description="D&D 5e MCP Server")
    parser.add_argument("api_base_url", help="D&D 5e API base URL", nargs="?")
    args = parser.parse_args(argv)
    return ServerConfig.from_environment(api_base_url=args.api_base_url)


def initialize_api(config: ServerConfig) -> DndApiClient:
    """Create the shared API client and hand it to the tool and resource modules."""
    client = DndApiClient(config.api_base_url, timeout=config.request_timeout)
    initialize_tools(client)
    set_resource_client(client)
    return client


async def main():
    """Main entry point for the server."""
    config = load_config()

    # Configure logging
    logging.basicConfig(level=getattr(logging, config.log_level))
    logger.info(f"Using D&D 5e API at {config.api_base_url}")

    client = initialize_api(config)
    logger.info(f"MCP_TRANSPORT: {config.transport}")

    try:
        if config.transport == "sse":
            if config.host:
                app.settings.host = config.host
            app.settings.port = config.port
            logger.info(f"Starting MCP server on {app.settings.host}:{app.settings.port}")
            await app.run_sse_async()
        elif config.transport == "streamable-http":
            if config.host:
                app.settings.host = config.host
            app.settings.port = config.port
            app.settings.streamable_http_path = config.path
            logger.info(f"Starting MCP server on {app.settings.host}:{app.settings.port} with path {app.settings.streamable_http_path}")
            await app.run_streamable_http_async()
        else:
            logger.info("Starting MCP server on stdin/stdout")
            await app.run_stdio_async()
    finally:
        await client.aclose()
        logger.info("MCP server stopped")


if __name__ == "__main__":
    asyncio.run(main())
