"""
MCP Tool Functions for D&D 5e API lookups

This module wires the discovered tools into the MCP server. Tool results are
returned as JSON text; failures come back as "Error: ..." text results rather
than protocol errors.
"""

import logging
from typing import Any, List, Optional

import mcp.types as types

from .tools import ToolExecutor

logger = logging.getLogger(__name__)

ResponseType = List[types.TextContent | types.ImageContent | types.EmbeddedResource]

# Global executor
_tool_executor: Optional[ToolExecutor] = None


def initialize_tools(client) -> ToolExecutor:
    """
    Discover the tools and bind them to the shared API client.

    Args:
        client: DndApiClient used by every tool

    Returns:
        The initialized executor
    """
    global _tool_executor

    _tool_executor = ToolExecutor(client)
    tools = _tool_executor.discover_all_tools()
    logger.info(f"Discovered {len(tools)} tools:")
    for tool_meta in tools:
        logger.info(f"  - {tool_meta.name} ({tool_meta.category}): {tool_meta.description}")
    return _tool_executor


def format_text_response(text: Any) -> ResponseType:
    """Format a text response."""
    return [types.TextContent(type="text", text=str(text))]


def format_error_response(error: str) -> ResponseType:
    """Format an error response."""
    return format_text_response(f"Error: {error}")


async def handle_list_tools() -> list[types.Tool]:
    """
    List available tools.
    Each tool specifies its arguments using JSON Schema.
    """
    logger.info("Listing tools")
    if not _tool_executor:
        logger.warning("Tool executor not initialized")
        return []
    return _tool_executor.list_mcp_tools()


async def handle_tool_call(
    name: str, arguments: dict | None
) -> ResponseType:
    """Handle tool execution requests."""
    logger.info(f"Calling tool: {name}::{arguments}")

    if not _tool_executor:
        logger.error("Tool executor not initialized")
        return format_error_response("Tool system not initialized")

    result = await _tool_executor.execute_tool(name, arguments or {})
    if result.get("success"):
        return format_text_response(result["text"])
    return format_error_response(result.get("error", "Unknown error"))
