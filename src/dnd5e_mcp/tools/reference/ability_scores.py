"""
Ability Scores Tool - Look up or list the six ability scores.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from ...api import APIReference, Endpoint
from ..base import ToolMetadata
from .base import CategoryInput, CategoryOutput, CategoryTool


class AbilityScoresInput(CategoryInput):
    """Input schema for the ability-scores tool."""
    name: str = Field(
        default="",
        description="The index of the ability score to retrieve (e.g., 'str', 'dex')."
    )


class AbilityScoreDetail(BaseModel):
    """Detailed ability score response."""
    index: str = ""
    name: str = ""
    full_name: str = ""
    desc: List[str] = Field(default_factory=list)
    skills: List[APIReference] = Field(default_factory=list)
    url: str = ""


class AbilityScoresOutput(CategoryOutput):
    """Output schema for the ability-scores tool."""
    results: Optional[List[APIReference]] = None
    ability_score: Optional[AbilityScoreDetail] = None


class AbilityScoresTool(CategoryTool):
    METADATA = ToolMetadata(
        name="ability-scores",
        description="Fetches information about D&D 5e ability scores.",
        category="reference",
    )

    ENDPOINT = Endpoint.ABILITY_SCORES
    NOUN = "ability score"
    DETAIL_KEY = "ability_score"
    LIST_MODEL = APIReference
    DETAIL_MODEL = AbilityScoreDetail

    class InputSchema(AbilityScoresInput):
        pass

    class OutputSchema(AbilityScoresOutput):
        pass
