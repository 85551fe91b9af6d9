"""
Tool Executor - Discovers tools from the tools package and executes them.
"""

import importlib
import inspect
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import mcp.types as types
from pydantic import ValidationError

from .base import ToolBase, ToolMetadata

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Manages discovery and execution of tools.

    Features:
    - Discovers tools from filesystem
    - Rejects duplicate tool names
    - Attaches the shared API client to each tool instance
    - Validates tool arguments against the tool's InputSchema
    """

    def __init__(self, client=None, tools_dir: Optional[Path] = None):
        """
        Initialize the tool executor.

        Args:
            client: DndApiClient shared by all tools
            tools_dir: Directory containing tool modules (defaults to ./tools/)
        """
        if tools_dir is None:
            tools_dir = Path(__file__).parent
        self.tools_dir = tools_dir
        self.client = client
        self._tool_cache: Dict[str, Type[ToolBase]] = {}

    def _module_paths(self) -> List[str]:
        """Dotted module paths of every tool module under tools_dir."""
        paths = []
        for py_file in sorted(self.tools_dir.rglob("*.py")):
            if py_file.name.startswith("_") or py_file.name in ["base.py", "executor.py"]:
                continue
            rel_path = py_file.relative_to(self.tools_dir).with_suffix("")
            paths.append(".".join((__package__,) + rel_path.parts))
        return paths

    def discover_all_tools(self) -> List[ToolMetadata]:
        """
        Discover all available tools by scanning the tools directory.

        Returns:
            List of tool metadata for all discovered tools

        Raises:
            ValueError: If two tools share a name
        """
        if self._tool_cache:
            return [tool_class.METADATA for tool_class in self._tool_cache.values()]

        for module_path in self._module_paths():
            module = importlib.import_module(module_path)

            for _, obj in inspect.getmembers(module, inspect.isclass):
                if (issubclass(obj, ToolBase) and
                        obj.__module__ == module.__name__ and
                        not inspect.isabstract(obj) and
                        hasattr(obj, 'METADATA')):
                    name = obj.METADATA.name
                    if name in self._tool_cache:
                        raise ValueError(
                            f"Duplicate tool name {name} in {module_path} "
                            f"and {self._tool_cache[name].__module__}"
                        )
                    self._tool_cache[name] = obj
                    logger.debug(f"Discovered tool: {name} from {module_path}")

        return [tool_class.METADATA for tool_class in self._tool_cache.values()]

    def load_tool(self, tool_name: str) -> Optional[Type[ToolBase]]:
        """
        Look up a tool class by name.

        Returns:
            Tool class or None if not found
        """
        self.discover_all_tools()
        tool_class = self._tool_cache.get(tool_name)
        if tool_class is None:
            logger.warning(f"Tool not found: {tool_name}")
        return tool_class

    def list_mcp_tools(self) -> List[types.Tool]:
        """All discovered tools in MCP format."""
        self.discover_all_tools()
        return [tool_class.to_mcp_tool() for tool_class in self._tool_cache.values()]

    async def execute_tool(self, tool_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate arguments and execute a tool.

        Args:
            tool_name: Name of the tool to execute
            arguments: Tool input arguments

        Returns:
            {"success": True, "text": <JSON payload>} or
            {"success": False, "error": <message>}
        """
        tool_class = self.load_tool(tool_name)
        if not tool_class:
            return {
                "success": False,
                "error": f"Tool not found: {tool_name}"
            }

        try:
            input_data = tool_class.InputSchema(**arguments)
        except ValidationError as e:
            logger.warning(f"Invalid arguments for tool {tool_name}: {e}")
            return {
                "success": False,
                "error": f"Invalid arguments for {tool_name}: {e}"
            }

        tool_instance = tool_class()
        tool_instance.attach_client(self.client)
        output = await tool_instance.execute(input_data)

        if not output.success:
            return {"success": False, "error": output.error or "Unknown error"}
        return {"success": True, "text": output.render()}
