"""
Browse Tools - Walk the API root, category listings and individual resources.
"""

from typing import Any, Dict, List
from pydantic import Field

from ...api import APIReference, Endpoint
from ..base import ToolInput, ToolMetadata, ToolOutput
from .base import CatalogTool, RawOutput


class CategoryArgument(ToolInput):
    category: Endpoint = Field(
        ...,
        description="The D&D API category to retrieve items from (e.g., 'spells', 'monsters', 'equipment')"
    )


class CategoryListing(ToolOutput):
    category: str = ""
    count: int = 0
    items: List[APIReference] = Field(default_factory=list)


class ListResourcesTool(CatalogTool):
    """Lists the API root: every resource category with a short description."""

    METADATA = ToolMetadata(
        name="list_resources",
        description="List all available D&D 5e API resource categories (API root).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(ToolOutput):
        count: int = 0
        categories: List[Dict[str, str]] = Field(default_factory=list)

    async def run(self, input_data: ToolInput) -> ToolOutput:
        return self.OutputSchema(**await self.get_client().fetch_categories())


class ListCategoryItemsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="list_category_items",
        description="List all items/resources in a D&D 5e API category (e.g., spells, monsters, equipment).",
        category="catalog",
    )

    class InputSchema(CategoryArgument):
        pass

    class OutputSchema(CategoryListing):
        pass

    async def run(self, input_data: CategoryArgument) -> ToolOutput:
        return self.OutputSchema(**await self.get_client().fetch_items(input_data.category))


class GetResourceByIndexTool(CatalogTool):
    METADATA = ToolMetadata(
        name="get_resource_by_index",
        description="Get a specific D&D 5e resource by category and index (e.g., a spell, monster, or item).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        category: Endpoint = Field(
            ...,
            description="The D&D API category the item belongs to (e.g., 'spells', 'monsters', 'equipment')"
        )
        index: str = Field(
            ...,
            description="The unique identifier for the specific item (e.g., 'fireball', 'adult-red-dragon')"
        )

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        data: Dict[str, Any] = await self.get_client().fetch_item(input_data.category, input_data.index)
        return self.OutputSchema(data=data)


class ListNamesInCategoryTool(CatalogTool):
    METADATA = ToolMetadata(
        name="list_names_in_category",
        description="List all names in a D&D 5e API category (e.g., all monster names, spell names, etc.).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        category: Endpoint = Field(
            ...,
            description="The D&D API category to retrieve names from (e.g., 'spells', 'monsters', 'equipment')"
        )

    class OutputSchema(ToolOutput):
        category: str = ""
        names: List[str] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        listing = await self.get_client().fetch_items(input_data.category)
        return self.OutputSchema(
            category=listing["category"],
            names=[item.name for item in listing["items"]],
        )
