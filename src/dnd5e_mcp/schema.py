"""
Tool Input Schema Reflection

Derives MCP tool input schemas from pydantic models by inspecting their
fields. Only fields that carry a description become tool parameters.

Example:
    class MyInput(BaseModel):
        name: str = Field(default="", description="The name of the item.")
        count: int = Field(default=0, description="The number of items.")
        active: bool = Field(default=False, description="Whether the item is active.")
        tags: List[str] = Field(default_factory=list, description="Tags associated with the item.")
        internal: str = Field(default="", exclude=True)

    model_to_input_schema(MyInput)
    # {"type": "object", "properties": {"name": {"type": "string", ...}, ...}}
"""

import logging
import types
from enum import Enum
from typing import Any, Dict, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel

logger = logging.getLogger(__name__)

_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def _unwrap_optional(annotation: Any) -> Any:
    """Strip Optional[...] layers, the way a pointer type is dereferenced."""
    while get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) != 1:
            return annotation
        annotation = args[0]
    return annotation


def _scalar_type(annotation: Any) -> Optional[str]:
    """Return the JSON schema type of a scalar annotation, or None."""
    if not isinstance(annotation, type):
        return None
    # bool is a subclass of int, so it has to be checked first
    if issubclass(annotation, bool):
        return "boolean"
    if issubclass(annotation, Enum) and issubclass(annotation, str):
        return "string"
    if issubclass(annotation, str):
        return "string"
    if issubclass(annotation, (int, float)):
        return "number"
    return None


def field_to_property(name: str, description: str, annotation: Any) -> Optional[Dict[str, Any]]:
    """
    Convert a single model field into a JSON schema property.

    Supported kinds are string, number, boolean, nested models (object) and
    sequences of scalars (array). Anything else is logged and skipped.

    Args:
        name: JSON property name
        description: Property description
        annotation: Field type annotation

    Returns:
        Property schema, or None if the type is unsupported
    """
    logger.debug(f"Converting field '{name}' of type '{annotation}' to property")
    annotation = _unwrap_optional(annotation)
    prop: Dict[str, Any] = {"description": description}

    scalar = _scalar_type(annotation)
    if scalar is not None:
        prop["type"] = scalar
        if isinstance(annotation, type) and issubclass(annotation, Enum):
            prop["enum"] = [member.value for member in annotation]
        return prop

    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        prop["type"] = "object"
        prop["properties"] = model_to_properties(annotation)
        return prop

    if get_origin(annotation) in _SEQUENCE_ORIGINS:
        args = get_args(annotation)
        elem = _unwrap_optional(args[0]) if args else None
        item_type = _scalar_type(elem)
        if item_type is None:
            logger.warning(f"{name} is an unsupported array element type: {elem}")
            return None
        prop["type"] = "array"
        prop["items"] = {"type": item_type}
        return prop

    logger.warning(f"{name} is an unsupported type: {annotation}")
    return None


def model_to_properties(model: Type[BaseModel]) -> Dict[str, Dict[str, Any]]:
    """
    Convert a pydantic model into a map of JSON schema properties.

    Fields marked exclude=True or lacking a description are ignored.
    """
    logger.debug(f"Converting model {model.__name__} to properties")
    props: Dict[str, Dict[str, Any]] = {}
    for field_name, field in model.model_fields.items():
        if field.exclude:
            continue
        if not field.description:
            continue
        name = field.alias or field_name
        prop = field_to_property(name, field.description, field.annotation)
        if prop is not None:
            props[name] = prop
    return props


def model_to_input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """Build the complete MCP input schema for a tool input model."""
    properties = model_to_properties(model)
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    required = [
        field.alias or field_name
        for field_name, field in model.model_fields.items()
        if field.is_required() and (field.alias or field_name) in properties
    ]
    if required:
        schema["required"] = required
    return schema
