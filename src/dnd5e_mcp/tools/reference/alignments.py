"""
Alignments Tool - Look up or list creature alignments.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from ...api import APIReference, Endpoint
from ..base import ToolMetadata
from .base import CategoryInput, CategoryOutput, CategoryTool


class AlignmentsInput(CategoryInput):
    """Input schema for the alignments tool."""
    name: str = Field(
        default="",
        description="The index of the alignment to retrieve (e.g., 'chaotic-good')."
    )


class AlignmentDetail(BaseModel):
    """Detailed alignment response."""
    index: str = ""
    name: str = ""
    abbreviation: str = ""
    desc: str = ""
    url: str = ""


class AlignmentsOutput(CategoryOutput):
    """Output schema for the alignments tool."""
    results: Optional[List[APIReference]] = None
    alignment: Optional[AlignmentDetail] = None


class AlignmentsTool(CategoryTool):
    METADATA = ToolMetadata(
        name="alignments",
        description="Fetches information about D&D 5e alignments.",
        category="reference",
    )

    ENDPOINT = Endpoint.ALIGNMENTS
    NOUN = "alignment"
    DETAIL_KEY = "alignment"
    LIST_MODEL = APIReference
    DETAIL_MODEL = AlignmentDetail

    class InputSchema(AlignmentsInput):
        pass

    class OutputSchema(AlignmentsOutput):
        pass
