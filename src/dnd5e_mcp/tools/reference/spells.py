"""
Spells Tool - Look up a spell by name or list spells by level and school.
"""

from typing import List, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from ...api import APIReference, Endpoint
from ..base import ToolMetadata
from .base import CategoryInput, CategoryOutput, CategoryTool


class SpellsInput(CategoryInput):
    """Input schema for the spells tool."""
    name: str = Field(default="", description="The name of the spell to retrieve.")
    level: Optional[int] = Field(default=None, ge=0, le=9, description="The level of the spell.")
    school: str = Field(default="", description="The school of magic the spell belongs to.")

    def build_query_string(self) -> str:
        params = []
        if self.level is not None:
            params.append(("level", self.level))
        if self.school:
            params.append(("school", self.school))
        return urlencode(params)


class SpellListEntry(BaseModel):
    """A single spell in the list response."""
    index: str = ""
    name: str = ""
    level: int = 0
    url: str = ""


class SpellDC(BaseModel):
    dc_type: APIReference = Field(default_factory=APIReference)
    dc_success: str = ""


class AreaOfEffect(BaseModel):
    type: str = ""
    size: int = 0


class SpellDetail(BaseModel):
    """Detailed spell response."""
    index: str = ""
    name: str = ""
    desc: List[str] = Field(default_factory=list)
    higher_level: List[str] = Field(default_factory=list)
    range: str = ""
    components: List[str] = Field(default_factory=list)
    material: Optional[str] = None
    ritual: bool = False
    duration: str = ""
    concentration: bool = False
    casting_time: str = ""
    level: int = 0
    attack_type: Optional[str] = None
    dc: Optional[SpellDC] = None
    area_of_effect: Optional[AreaOfEffect] = None
    school: APIReference = Field(default_factory=APIReference)
    classes: List[APIReference] = Field(default_factory=list)
    subclasses: List[APIReference] = Field(default_factory=list)
    url: str = ""
    updated_at: str = ""


class SpellsOutput(CategoryOutput):
    """Output schema for the spells tool."""
    results: Optional[List[SpellListEntry]] = None
    spell: Optional[SpellDetail] = None


class SpellsTool(CategoryTool):
    """
    Fetches a spell by name, or lists spells filtered by level and school.

    Names are converted to API indexes ("Magic Missile" -> "magic-missile").
    """

    METADATA = ToolMetadata(
        name="spells",
        description="Fetches information about D&D 5e spells.",
        category="reference",
    )

    ENDPOINT = Endpoint.SPELLS
    NOUN = "spell"
    DETAIL_KEY = "spell"
    LIST_MODEL = SpellListEntry
    DETAIL_MODEL = SpellDetail

    class InputSchema(SpellsInput):
        pass

    class OutputSchema(SpellsOutput):
        pass
