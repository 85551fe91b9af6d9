"""
Backgrounds Tool - Look up or list character backgrounds.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from ...api import APIReference, Endpoint
from ..base import ToolMetadata
from .base import CategoryInput, CategoryOutput, CategoryTool


class BackgroundsInput(CategoryInput):
    """Input schema for the backgrounds tool."""
    name: str = Field(
        default="",
        description="The index of the background to retrieve (e.g., 'acolyte')."
    )


class BackgroundFeature(BaseModel):
    name: str = ""
    desc: List[str] = Field(default_factory=list)


class BackgroundDetail(BaseModel):
    """Detailed background response."""
    index: str = ""
    name: str = ""
    starting_proficiencies: List[APIReference] = Field(default_factory=list)
    language_options: Optional[Dict[str, Any]] = None
    starting_equipment: List[Dict[str, Any]] = Field(default_factory=list)
    starting_equipment_options: List[Dict[str, Any]] = Field(default_factory=list)
    feature: Optional[BackgroundFeature] = None
    url: str = ""


class BackgroundsOutput(CategoryOutput):
    """Output schema for the backgrounds tool."""
    results: Optional[List[APIReference]] = None
    background: Optional[BackgroundDetail] = None


class BackgroundsTool(CategoryTool):
    METADATA = ToolMetadata(
        name="backgrounds",
        description="Fetches information about D&D 5e backgrounds.",
        category="reference",
    )

    ENDPOINT = Endpoint.BACKGROUNDS
    NOUN = "background"
    DETAIL_KEY = "background"
    LIST_MODEL = APIReference
    DETAIL_MODEL = BackgroundDetail

    class InputSchema(BackgroundsInput):
        pass

    class OutputSchema(BackgroundsOutput):
        pass
