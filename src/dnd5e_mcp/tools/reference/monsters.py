"""
Monsters Tool - Look up a monster or list monsters by challenge rating.
"""

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field

from ...api import APIReference, Endpoint
from ..base import ToolMetadata
from .base import CategoryInput, CategoryOutput, CategoryTool


def format_challenge_rating(cr: float) -> str:
    """Format a challenge rating the way the API expects it (0.25, 0.5, 1, 10)."""
    return f"{cr:.2f}".rstrip("0").rstrip(".")


class MonstersInput(CategoryInput):
    """Input schema for the monsters tool."""
    name: str = Field(default="", description="The index of the monster to retrieve.")
    challenge_rating: List[float] = Field(
        default_factory=list,
        description="The challenge rating(s) to filter on."
    )

    def build_query_string(self) -> str:
        if not self.challenge_rating:
            return ""
        return "challenge_rating=" + ",".join(format_challenge_rating(cr) for cr in self.challenge_rating)


class MonsterListEntry(BaseModel):
    """A single monster in the list response."""
    index: str = ""
    name: str = ""
    url: str = ""


class ArmorClass(BaseModel):
    type: str = ""
    value: int = 0


class MonsterProficiency(BaseModel):
    value: int = 0
    proficiency: APIReference = Field(default_factory=APIReference)


class MonsterDC(BaseModel):
    dc_type: APIReference = Field(default_factory=APIReference)
    dc_value: int = 0
    success_type: str = ""


class Damage(BaseModel):
    damage_type: Optional[APIReference] = None
    damage_dice: str = ""


class MultiattackAction(BaseModel):
    action_name: str = ""
    count: Union[int, str] = ""
    type: str = ""


class SpecialAbility(BaseModel):
    name: str = ""
    desc: str = ""
    dc: Optional[MonsterDC] = None
    damage: List[Damage] = Field(default_factory=list)


class MonsterAction(BaseModel):
    name: str = ""
    desc: str = ""
    attack_bonus: Optional[int] = None
    dc: Optional[MonsterDC] = None
    damage: List[Damage] = Field(default_factory=list)
    actions: List[MultiattackAction] = Field(default_factory=list)


class LegendaryAction(BaseModel):
    name: str = ""
    desc: str = ""
    damage: List[Damage] = Field(default_factory=list)


class MonsterDetail(BaseModel):
    """Detailed monster response."""
    index: str = ""
    name: str = ""
    size: str = ""
    type: str = ""
    alignment: str = ""
    armor_class: List[ArmorClass] = Field(default_factory=list)
    hit_points: int = 0
    hit_dice: str = ""
    hit_points_roll: str = ""
    speed: Dict[str, Union[str, bool]] = Field(default_factory=dict)
    strength: int = 0
    dexterity: int = 0
    constitution: int = 0
    intelligence: int = 0
    wisdom: int = 0
    charisma: int = 0
    proficiencies: List[MonsterProficiency] = Field(default_factory=list)
    damage_vulnerabilities: List[str] = Field(default_factory=list)
    damage_resistances: List[str] = Field(default_factory=list)
    damage_immunities: List[str] = Field(default_factory=list)
    condition_immunities: List[APIReference] = Field(default_factory=list)
    senses: Dict[str, Union[str, int]] = Field(default_factory=dict)
    languages: str = ""
    challenge_rating: float = 0
    proficiency_bonus: int = 0
    xp: int = 0
    special_abilities: List[SpecialAbility] = Field(default_factory=list)
    actions: List[MonsterAction] = Field(default_factory=list)
    legendary_actions: List[LegendaryAction] = Field(default_factory=list)
    image: str = ""
    url: str = ""
    updated_at: str = ""


class MonstersOutput(CategoryOutput):
    """Output schema for the monsters tool."""
    results: Optional[List[MonsterListEntry]] = None
    monster: Optional[MonsterDetail] = None


class MonstersTool(CategoryTool):
    """Fetches a monster by index, or lists monsters filtered by challenge rating."""

    METADATA = ToolMetadata(
        name="monsters",
        description="Fetches information about D&D 5e monsters.",
        category="reference",
    )

    ENDPOINT = Endpoint.MONSTERS
    NOUN = "monster"
    DETAIL_KEY = "monster"
    LIST_MODEL = MonsterListEntry
    DETAIL_MODEL = MonsterDetail

    class InputSchema(MonstersInput):
        pass

    class OutputSchema(MonstersOutput):
        pass
