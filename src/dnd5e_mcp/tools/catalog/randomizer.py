"""
Random Tools - Pick a random monster or spell.
"""

import random

from ...api import Endpoint
from ..base import ToolInput, ToolMetadata, ToolOutput
from .base import CatalogTool, RawOutput, ToolError


async def fetch_random(client, category: Endpoint, noun: str) -> dict:
    """Pick a random entry of a category and return its full detail."""
    listing = await client.fetch_items(category)
    if not listing["items"]:
        raise ToolError(f"no {noun} found")
    choice = random.choice(listing["items"])
    return await client.fetch_item(category, choice.index)


class RandomMonsterTool(CatalogTool):
    METADATA = ToolMetadata(
        name="random_monster",
        description="Get a random monster from the D&D 5e API.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(data=await fetch_random(self.get_client(), Endpoint.MONSTERS, "monsters"))


class RandomSpellTool(CatalogTool):
    METADATA = ToolMetadata(
        name="random_spell",
        description="Get a random spell from the D&D 5e API.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        pass

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        return self.OutputSchema(data=await fetch_random(self.get_client(), Endpoint.SPELLS, "spells"))
