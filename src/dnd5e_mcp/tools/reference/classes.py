"""
Classes Tool - Look up or list character classes.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ...api import APIReference, Endpoint
from ..base import ToolMetadata
from .base import CategoryInput, CategoryOutput, CategoryTool


class ClassesInput(CategoryInput):
    """Input schema for the classes tool."""
    name: str = Field(
        default="",
        description="The index of the class to retrieve (e.g., 'barbarian')."
    )


class ClassDetail(BaseModel):
    """Detailed class response. Nested option trees are passed through as-is."""
    index: str = ""
    name: str = ""
    hit_die: int = 0
    proficiency_choices: List[Dict[str, Any]] = Field(default_factory=list)
    proficiencies: List[APIReference] = Field(default_factory=list)
    saving_throws: List[APIReference] = Field(default_factory=list)
    starting_equipment: List[Dict[str, Any]] = Field(default_factory=list)
    starting_equipment_options: List[Dict[str, Any]] = Field(default_factory=list)
    class_levels: str = ""
    multi_classing: Optional[Dict[str, Any]] = None
    subclasses: List[APIReference] = Field(default_factory=list)
    spellcasting: Optional[Dict[str, Any]] = None
    spells: Optional[str] = None
    url: str = ""
    updated_at: str = ""


class ClassesOutput(CategoryOutput):
    """Output schema for the classes tool."""
    model_config = ConfigDict(populate_by_name=True)

    results: Optional[List[APIReference]] = None
    class_: Optional[ClassDetail] = Field(default=None, alias="class")


class ClassesTool(CategoryTool):
    METADATA = ToolMetadata(
        name="classes",
        description="Fetches information about D&D 5e classes.",
        category="reference",
    )

    ENDPOINT = Endpoint.CLASSES
    NOUN = "class"
    DETAIL_KEY = "class"
    LIST_MODEL = APIReference
    DETAIL_MODEL = ClassDetail

    class InputSchema(ClassesInput):
        pass

    class OutputSchema(ClassesOutput):
        pass
