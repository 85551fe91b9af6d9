"""
Filter Tools - Narrow spells, monsters and items by their attributes.

The filter_* tools pass a raw query string straight through to the API; the
others build the query (or walk the category) from typed arguments.
"""

import logging
from typing import List
from urllib.parse import urlencode

import httpx
from pydantic import Field

from ...api import APIError, APIReference, Endpoint
from ..base import ToolInput, ToolMetadata, ToolOutput
from .base import CatalogTool, RawOutput, ToolError

logger = logging.getLogger(__name__)


class FilterSpellsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="filter_spells",
        description="List spells with optional filters (e.g., by class, level, school, etc.).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        filter: str = Field(
            default="",
            description="Query string for filtering spells, e.g., 'level=3&school=evocation'"
        )

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(data=await self.get_client().fetch_raw(Endpoint.SPELLS, input_data.filter))


class FilterMonstersTool(CatalogTool):
    METADATA = ToolMetadata(
        name="filter_monsters",
        description="List monsters with optional filters (e.g., by type, challenge rating, etc.).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        filter: str = Field(
            default="",
            description="Query string for filtering monsters, e.g., 'challenge_rating=10'"
        )

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(data=await self.get_client().fetch_raw(Endpoint.MONSTERS, input_data.filter))


class FilterItemsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="filter_items",
        description="List items with optional filters (e.g., by equipment_category, cost, etc.).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        filter: str = Field(
            default="",
            description="Query string for filtering items, e.g., 'name=longsword'"
        )

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(data=await self.get_client().fetch_raw(Endpoint.EQUIPMENT, input_data.filter))


class MonsterByCRTool(CatalogTool):
    METADATA = ToolMetadata(
        name="monster_by_cr",
        description="List all monsters with a given challenge rating (CR).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        cr: float = Field(..., ge=0, description="The challenge rating (e.g., 0.25, 1, 2, 5, 10)")

    class OutputSchema(ToolOutput):
        cr: str = ""
        monsters: List[APIReference] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        cr = f"{input_data.cr:g}"
        monsters = await self.get_client().fetch_list(Endpoint.MONSTERS, APIReference, f"challenge_rating={cr}")
        return self.OutputSchema(cr=cr, monsters=monsters)


class SpellsBySchoolTool(CatalogTool):
    METADATA = ToolMetadata(
        name="spells_by_school",
        description="List all spells from a specific school of magic.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        school_index: str = Field(..., description="The school index, e.g., 'evocation', 'illusion'")

    class OutputSchema(ToolOutput):
        school_index: str = ""
        spells: List[APIReference] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        spells = await self.get_client().fetch_list(
            Endpoint.SPELLS, APIReference, urlencode({"school": input_data.school_index})
        )
        return self.OutputSchema(school_index=input_data.school_index, spells=spells)


class EquipmentByTypeTool(CatalogTool):
    """Lists the equipment filed under an equipment category (weapon, armor, tools, ...)."""

    METADATA = ToolMetadata(
        name="equipment_by_type",
        description="List all equipment of a specific type (e.g., weapons, armor, tools).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        equipment_type: str = Field(..., description="The equipment type, e.g., 'weapon', 'armor', 'tools'")

    class OutputSchema(ToolOutput):
        equipment_type: str = ""
        items: List[APIReference] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        category = await self.get_client().fetch_item(Endpoint.EQUIPMENT_CATEGORIES, input_data.equipment_type)
        equipment = category.get("equipment")
        if not isinstance(equipment, list):
            raise ToolError(f"no equipment found for type {input_data.equipment_type}")
        return self.OutputSchema(equipment_type=input_data.equipment_type, items=equipment)


class MagicItemsTool(CatalogTool):
    """
    Lists magic items, optionally filtered by rarity and equipment category.

    The list endpoint carries neither attribute, so when a filter is given
    each item's detail is fetched in turn. Items whose detail cannot be
    fetched are skipped.
    """

    METADATA = ToolMetadata(
        name="get_magic_items",
        description="List all magic items, optionally filterable by rarity or type.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        rarity: str = Field(default="", description="Optional rarity filter, e.g., 'rare', 'legendary'")
        type: str = Field(default="", description="Optional type filter, e.g., 'weapon', 'armor'")

    class OutputSchema(ToolOutput):
        rarity: str = ""
        type: str = ""
        items: List[APIReference] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        client = self.get_client()
        listing = await client.fetch_items(Endpoint.MAGIC_ITEMS)
        items = listing["items"]

        if input_data.rarity or input_data.type:
            filtered = []
            for item in items:
                try:
                    detail = await client.fetch_item(Endpoint.MAGIC_ITEMS, item.index)
                except (APIError, httpx.HTTPError, ValueError) as e:
                    logger.warning(f"Skipping magic item {item.index}: {e}")
                    continue
                if self._matches(detail, input_data.rarity, input_data.type):
                    filtered.append(item)
            items = filtered

        return self.OutputSchema(rarity=input_data.rarity, type=input_data.type, items=items)

    @staticmethod
    def _matches(detail: dict, rarity: str, type_filter: str) -> bool:
        if rarity:
            item_rarity = (detail.get("rarity") or {}).get("name", "")
            if item_rarity.lower() != rarity.lower():
                return False
        if type_filter:
            item_type = (detail.get("equipment_category") or {}).get("index", "")
            if item_type != type_filter:
                return False
        return True
