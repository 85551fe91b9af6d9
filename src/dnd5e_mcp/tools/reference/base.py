"""
Shared plumbing for the per-category reference tools.

Every reference tool follows the same shape: given a name it fetches one
typed detail object, otherwise it lists the category, optionally filtered by
a query string built from the input.
"""

import logging
from typing import Optional, Type

import httpx
from pydantic import BaseModel, Field

from ...api import APIError, Endpoint
from ..base import ToolBase, ToolInput, ToolOutput

logger = logging.getLogger(__name__)


class CategoryInput(ToolInput):
    """Input shared by all reference tools."""
    name: str = Field(
        default="",
        description="The index of the item to retrieve. Leave empty to list the category."
    )

    def build_query_string(self) -> str:
        """Query string appended to the list request; empty means no filter."""
        return ""


class CategoryOutput(ToolOutput):
    """Envelope shared by all reference tools."""
    count: Optional[int] = Field(default=None, description="Number of results in a list response")


class CategoryTool(ToolBase):
    """
    Reference tool backed by a single API category.

    Subclasses set ENDPOINT, NOUN, DETAIL_KEY, LIST_MODEL and DETAIL_MODEL.
    DETAIL_KEY is the JSON key of the detail object in the output envelope.
    """

    ENDPOINT: Endpoint
    NOUN: str
    DETAIL_KEY: str
    LIST_MODEL: Type[BaseModel]
    DETAIL_MODEL: Type[BaseModel]

    async def execute(self, input_data: CategoryInput) -> CategoryOutput:
        logger.debug(f"{self.METADATA.name} called with {input_data!r}")
        if input_data.name:
            return await self.fetch_by_name_result(input_data)
        return await self.fetch_list_result(input_data)

    async def fetch_by_name_result(self, input_data: CategoryInput) -> CategoryOutput:
        """Fetch one item by name and wrap it in the output envelope."""
        client = self.get_client()
        try:
            detail = await client.fetch_by_name(self.ENDPOINT, input_data.name, self.DETAIL_MODEL)
        except (APIError, httpx.HTTPError, ValueError) as e:
            return self.OutputSchema(success=False, error=f"failed to fetch {self.NOUN}: {e}")
        return self.OutputSchema(**{self.DETAIL_KEY: detail})

    async def fetch_list_result(self, input_data: CategoryInput) -> CategoryOutput:
        """Fetch the (optionally filtered) category list."""
        client = self.get_client()
        try:
            results = await client.fetch_list(self.ENDPOINT, self.LIST_MODEL, input_data.build_query_string())
        except (APIError, httpx.HTTPError, ValueError) as e:
            return self.OutputSchema(success=False, error=f"Failed to fetch {self.NOUN} list: {e}")
        return self.OutputSchema(count=len(results), results=results)
