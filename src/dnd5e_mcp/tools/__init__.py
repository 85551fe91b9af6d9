"""
D&D 5e tools.

Each tool is a ToolBase subclass with typed InputSchema and OutputSchema
models, discovered at startup by the ToolExecutor:
- reference/ holds one typed tool per API category (spells, monsters, ...)
- catalog/ holds browsing, filtering, random and digest tools
"""

from .base import ToolBase, ToolMetadata, ToolInput, ToolOutput
from .executor import ToolExecutor

__all__ = [
    "ToolBase",
    "ToolMetadata",
    "ToolInput",
    "ToolOutput",
    "ToolExecutor",
]
