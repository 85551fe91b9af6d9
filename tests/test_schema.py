"""
Unit tests for the pydantic-model-to-JSON-schema reflection used for tool inputs.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from dnd5e_mcp.schema import field_to_property, model_to_input_schema, model_to_properties
from dnd5e_mcp.tools.catalog.browse import GetResourceByIndexTool
from dnd5e_mcp.tools.reference.monsters import MonstersTool
from dnd5e_mcp.tools.reference.spells import SpellsTool


class School(str, Enum):
    EVOCATION = "evocation"
    ILLUSION = "illusion"


class Range(BaseModel):
    feet: int = Field(default=0, description="Distance in feet.")
    note: str = ""


class SampleInput(BaseModel):
    name: str = Field(default="", description="The name of the item.")
    count: int = Field(default=0, description="The number of items.")
    weight: Optional[float] = Field(default=None, description="The weight of the item.")
    active: bool = Field(default=False, description="Whether the item is active.")
    tags: List[str] = Field(default_factory=list, description="Tags associated with the item.")
    school: Optional[School] = Field(default=None, description="A school of magic.")
    range: Range = Field(default_factory=Range, description="The reach of the item.")
    internal: str = Field(default="", description="Hidden from callers.", exclude=True)
    undocumented: str = ""
    lookup: Dict[str, int] = Field(default_factory=dict, description="Unsupported map.")
    nested_list: List[Range] = Field(default_factory=list, description="Unsupported array of objects.")


class TestModelToProperties:

    def test_scalar_kinds(self):
        props = model_to_properties(SampleInput)
        assert props["name"] == {"description": "The name of the item.", "type": "string"}
        assert props["count"]["type"] == "number"
        assert props["weight"]["type"] == "number"
        assert props["active"]["type"] == "boolean"

    def test_sequence_of_scalars_becomes_array(self):
        props = model_to_properties(SampleInput)
        assert props["tags"] == {
            "description": "Tags associated with the item.",
            "type": "array",
            "items": {"type": "string"},
        }

    def test_enum_lists_members(self):
        props = model_to_properties(SampleInput)
        assert props["school"]["type"] == "string"
        assert props["school"]["enum"] == ["evocation", "illusion"]

    def test_nested_model_becomes_object(self):
        """Should recurse into nested models, again keeping only described fields."""
        props = model_to_properties(SampleInput)
        assert props["range"]["type"] == "object"
        assert props["range"]["properties"] == {
            "feet": {"description": "Distance in feet.", "type": "number"},
        }

    def test_excluded_and_undocumented_fields_are_skipped(self):
        props = model_to_properties(SampleInput)
        assert "internal" not in props
        assert "undocumented" not in props

    def test_unsupported_types_are_skipped(self):
        props = model_to_properties(SampleInput)
        assert "lookup" not in props
        assert "nested_list" not in props

    def test_alias_is_used_as_property_name(self):
        class Aliased(BaseModel):
            class_name: str = Field(default="", alias="class", description="A class index.")

        assert list(model_to_properties(Aliased)) == ["class"]


def test_field_to_property_returns_none_for_unsupported():
    assert field_to_property("blob", "Raw bytes.", bytes) is None


class TestModelToInputSchema:

    def test_wraps_properties_in_object(self):
        schema = model_to_input_schema(SampleInput)
        assert schema["type"] == "object"
        assert "name" in schema["properties"]
        assert "required" not in schema

    def test_required_fields_listed(self):
        schema = GetResourceByIndexTool.get_input_schema()
        assert schema["required"] == ["category", "index"]
        assert "spells" in schema["properties"]["category"]["enum"]

    def test_spells_tool_schema(self):
        """The spells tool should advertise name, level and school, all optional."""
        schema = SpellsTool.get_input_schema()
        assert set(schema["properties"]) == {"name", "level", "school"}
        assert schema["properties"]["level"]["type"] == "number"
        assert "required" not in schema

    def test_monsters_tool_schema(self):
        schema = MonstersTool.get_input_schema()
        assert schema["properties"]["challenge_rating"] == {
            "description": "The challenge rating(s) to filter on.",
            "type": "array",
            "items": {"type": "number"},
        }
