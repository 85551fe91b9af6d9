"""
Base classes and types for the D&D 5e tools.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar

import mcp.types as types
from pydantic import BaseModel, Field

from ..schema import model_to_input_schema


class ToolMetadata(BaseModel):
    """Metadata describing a tool."""
    name: str = Field(..., description="Unique identifier for the tool")
    description: str = Field(..., description="Human-readable description of what the tool does")
    category: str = Field(..., description="Group this tool belongs to (e.g., 'reference', 'catalog')")
    version: str = Field(default="1.0.0", description="Tool version")


class ToolInput(BaseModel):
    """Base class for tool input schemas."""
    pass


class ToolOutput(BaseModel):
    """Base class for tool output schemas."""
    success: bool = Field(default=True, description="Whether the tool execution was successful")
    error: Optional[str] = Field(default=None, description="Error message if execution failed")

    def render(self) -> str:
        """Serialize the payload returned to the agent as JSON text."""
        return json.dumps(self.model_dump(mode="json", exclude={"success", "error"}, exclude_none=True, by_alias=True))


TInput = TypeVar('TInput', bound=ToolInput)
TOutput = TypeVar('TOutput', bound=ToolOutput)


class ToolBase(ABC):
    """
    Base class for all D&D 5e tools.

    Each tool should:
    1. Define METADATA as a class attribute
    2. Define InputSchema and OutputSchema as nested classes
    3. Implement the execute() method

    The shared API client is attached by the executor before execution.
    """

    # Each tool must define these
    METADATA: ToolMetadata

    def __init__(self):
        self._client = None

    def attach_client(self, client):
        """Attach the DndApiClient this tool fetches through."""
        self._client = client

    def get_client(self):
        """
        Get the attached API client.

        Raises:
            RuntimeError: If no client has been attached
        """
        if self._client is None:
            raise RuntimeError(f"No API client attached to tool {self.METADATA.name}")
        return self._client

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the tool with the given input.

        Args:
            input_data: Validated input matching InputSchema

        Returns:
            Output matching OutputSchema. Failures are reported through
            success=False and error rather than raised.
        """
        pass

    @classmethod
    def get_input_schema(cls) -> Dict[str, Any]:
        """Get JSON Schema for tool input."""
        return model_to_input_schema(cls.InputSchema)

    @classmethod
    def to_mcp_tool(cls) -> types.Tool:
        """Convert to MCP tool format."""
        return types.Tool(
            name=cls.METADATA.name,
            description=cls.METADATA.description,
            inputSchema=cls.get_input_schema(),
            annotations=types.ToolAnnotations(readOnlyHint=True, openWorldHint=True),
        )
