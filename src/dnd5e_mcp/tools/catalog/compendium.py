"""
Compendium Tools - Whole-category digests (races, backgrounds, feats, conditions, damage types).

Each tool lists a category and then fetches every entry's detail one at a
time. Entries whose detail cannot be fetched are logged and left out.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import Field

from ...api import APIError, Endpoint
from ..base import ToolInput, ToolMetadata, ToolOutput
from .base import CatalogTool

logger = logging.getLogger(__name__)


async def collect_details(
    client,
    category: Endpoint,
    project: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
) -> List[Dict[str, Any]]:
    """
    Fetch the detail of every entry in a category.

    Args:
        client: DndApiClient to fetch through
        category: Category to walk
        project: Optional function reducing each detail to the fields of interest

    Returns:
        Details (or projections) in listing order
    """
    listing = await client.fetch_items(category)
    details = []
    for item in listing["items"]:
        try:
            detail = await client.fetch_item(category, item.index)
        except (APIError, httpx.HTTPError, ValueError) as e:
            logger.warning(f"Skipping {category.value}/{item.index}: {e}")
            continue
        details.append(project(detail) if project else detail)
    return details


class RacesAndTraitsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="races_and_traits",
        description="List all playable races and their traits.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(ToolOutput):
        races: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        races = await collect_details(
            self.get_client(),
            Endpoint.RACES,
            lambda race: {"name": race.get("name"), "traits": race.get("traits")},
        )
        return self.OutputSchema(races=races)


class BackgroundsAndFeaturesTool(CatalogTool):
    METADATA = ToolMetadata(
        name="backgrounds_and_features",
        description="List all backgrounds and their features.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(ToolOutput):
        backgrounds: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        backgrounds = await collect_details(
            self.get_client(),
            Endpoint.BACKGROUNDS,
            lambda background: {"name": background.get("name"), "feature": background.get("feature")},
        )
        return self.OutputSchema(backgrounds=backgrounds)


class FeatsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="feats",
        description="List all feats and their details.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(ToolOutput):
        feats: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(feats=await collect_details(self.get_client(), Endpoint.FEATS))


class ConditionsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="conditions",
        description="List all conditions (e.g., blinded, stunned) and their effects.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(ToolOutput):
        conditions: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(conditions=await collect_details(self.get_client(), Endpoint.CONDITIONS))


class DamageTypesTool(CatalogTool):
    METADATA = ToolMetadata(
        name="damage_types",
        description="List all damage types and their descriptions.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(ToolOutput):
        damage_types: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(damage_types=await collect_details(self.get_client(), Endpoint.DAMAGE_TYPES))
