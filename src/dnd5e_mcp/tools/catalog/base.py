"""
Shared plumbing for the catalog tools.
"""

import json
import logging
from abc import abstractmethod
from typing import Any, Dict

import httpx
from pydantic import Field

from ...api import APIError
from ..base import ToolBase, ToolInput, ToolOutput

logger = logging.getLogger(__name__)


class ToolError(Exception):
    """A catalog tool could not produce a result from otherwise valid data."""


class RawOutput(ToolOutput):
    """Output that passes an upstream object through unchanged, nulls included."""
    data: Dict[str, Any] = Field(default_factory=dict)

    def render(self) -> str:
        return json.dumps(self.data)


class CatalogTool(ToolBase):
    """
    Catalog tool whose run() may raise.

    execute() turns upstream, decoding and ToolError failures into an error
    output so the MCP layer can report them as tool results.
    """

    async def execute(self, input_data: ToolInput) -> ToolOutput:
        logger.debug(f"{self.METADATA.name} called with {input_data!r}")
        try:
            return await self.run(input_data)
        except (ToolError, APIError, httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"Error executing tool {self.METADATA.name}: {e}")
            return self.OutputSchema(success=False, error=str(e))

    @abstractmethod
    async def run(self, input_data: ToolInput) -> ToolOutput:
        pass
