"""
Summary Tools - Condensed views of monsters, spells and classes.
"""

from typing import Any, Dict, List, Optional
from pydantic import Field

from ...api import Endpoint
from ..base import ToolInput, ToolMetadata, ToolOutput
from .base import CatalogTool, RawOutput, ToolError

MONSTER_SUMMARY_FIELDS = (
    "name", "size", "type", "alignment", "armor_class", "hit_points", "hit_dice",
    "challenge_rating", "xp", "speed",
)
MONSTER_DETAIL_FIELDS = (
    "proficiencies", "senses", "languages", "special_abilities", "actions", "legendary_actions",
)
ABILITIES = ("strength", "dexterity", "constitution", "intelligence", "wisdom", "charisma")
SPELL_SUMMARY_FIELDS = (
    "name", "level", "school", "casting_time", "range", "components", "duration",
    "concentration", "ritual", "desc", "higher_level",
)


class MonsterIndexInput(ToolInput):
    monster_index: str = Field(..., description="The monster index, e.g., 'adult-red-dragon'")


def summarize_monster(data: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a monster to a stat block, with the six abilities grouped."""
    summary = {key: data.get(key) for key in MONSTER_SUMMARY_FIELDS}
    summary["abilities"] = {ability: data.get(ability) for ability in ABILITIES}
    summary.update({key: data.get(key) for key in MONSTER_DETAIL_FIELDS})
    return summary


def summarize_spell(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: data.get(key) for key in SPELL_SUMMARY_FIELDS}


class SummarizeMonsterTool(CatalogTool):
    METADATA = ToolMetadata(
        name="summarize_monster",
        description="Get a concise stat block summary for a D&D 5e monster (by monster index).",
        category="catalog",
    )

    class InputSchema(MonsterIndexInput):
        pass

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        data = await self.get_client().fetch_item(Endpoint.MONSTERS, input_data.monster_index)
        return self.OutputSchema(data=summarize_monster(data))


class SummarizeSpellTool(CatalogTool):
    METADATA = ToolMetadata(
        name="summarize_spell",
        description="Get a concise summary for a D&D 5e spell (by spell index).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        spell_index: str = Field(..., description="The spell index, e.g., 'fireball'")

    class OutputSchema(RawOutput):
        pass

    async def run(self, input_data) -> ToolOutput:
        data = await self.get_client().fetch_item(Endpoint.SPELLS, input_data.spell_index)
        return self.OutputSchema(data=summarize_spell(data))


class GetMonsterActionsTool(CatalogTool):
    METADATA = ToolMetadata(
        name="get_monster_actions",
        description="Get all actions for a D&D 5e monster (by monster index).",
        category="catalog",
    )

    class InputSchema(MonsterIndexInput):
        pass

    class OutputSchema(ToolOutput):
        monster_index: str = ""
        actions: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        data = await self.get_client().fetch_item(Endpoint.MONSTERS, input_data.monster_index)
        actions = data.get("actions")
        if not isinstance(actions, list):
            raise ToolError(f"actions not found or invalid for monster {input_data.monster_index}")
        return self.OutputSchema(monster_index=input_data.monster_index, actions=actions)


class GetClassFeaturesTool(CatalogTool):
    METADATA = ToolMetadata(
        name="get_class_features",
        description="Get all features for a D&D 5e class (by class index).",
        category="catalog",
    )

    class InputSchema(ToolInput):
        class_index: str = Field(..., description="The class index, e.g., 'wizard', 'fighter'")

    class OutputSchema(ToolOutput):
        class_index: str = ""
        features: List[Dict[str, Any]] = Field(default_factory=list)

    async def run(self, input_data) -> ToolOutput:
        features = await self.get_client().fetch_class_features(input_data.class_index)
        return self.OutputSchema(class_index=input_data.class_index, features=features)


class SpellSlotsTableTool(CatalogTool):
    """Returns the spellcasting block (cantrips known, slots per spell level) of a class level."""

    METADATA = ToolMetadata(
        name="spell_slots_table",
        description="Return the spell slots table for a given class and level.",
        category="catalog",
    )

    class InputSchema(ToolInput):
        class_index: str = Field(..., description="The class index, e.g., 'wizard', 'cleric'")
        level: int = Field(..., ge=1, le=20, description="The class level (1-20)")

    class OutputSchema(ToolOutput):
        class_index: str = ""
        level: int = 0
        spell_slots: Optional[Dict[str, Any]] = None

    async def run(self, input_data) -> ToolOutput:
        level_data = await self.get_client().fetch_class_level(input_data.class_index, input_data.level)
        spellcasting = level_data.get("spellcasting")
        if not isinstance(spellcasting, dict):
            raise ToolError(
                f"spellcasting not found for class {input_data.class_index} at level {input_data.level}"
            )
        return self.OutputSchema(
            class_index=input_data.class_index,
            level=input_data.level,
            spell_slots=spellcasting,
        )
