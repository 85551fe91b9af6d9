"""
MCP Resource Functions for D&D 5e API categories

Each API category is exposed as a resource whose contents are the
category's items rendered as YAML.
"""

import logging
from typing import Any

import yaml
from pydantic import AnyUrl

import mcp.types as types

from .config import CATEGORY_DESCRIPTIONS

logger = logging.getLogger(__name__)

RESOURCE_PREFIX = "dnd5e://category/"

# Global API client
_client = None


def set_resource_client(client):
    """Set the global API client used to read resources."""
    global _client
    _client = client


def data_to_yaml(data: Any) -> str:
    """Convert data to YAML format."""
    return yaml.dump(data, indent=2, sort_keys=False)


# --- Resource Handler Functions ---

async def handle_list_resources() -> list[types.Resource]:
    """Handle listing of available resources."""
    return [
        types.Resource(
            uri=AnyUrl(f"{RESOURCE_PREFIX}{name}"),
            name=f"{name} category",
            description=description,
            mimeType="text/yaml",
        )
        for name, description in CATEGORY_DESCRIPTIONS.items()
    ]


async def handle_read_resource(uri: AnyUrl) -> str:
    """Handle reading of a specific resource."""
    if not str(uri).startswith(RESOURCE_PREFIX):
        raise ValueError(f"Unknown resource: {uri}")

    category = str(uri)[len(RESOURCE_PREFIX):]
    if category not in CATEGORY_DESCRIPTIONS:
        raise ValueError(f"Unknown category: {category}")
    if _client is None:
        raise ConnectionError("API client not initialized")

    logger.info(f"Reading resource for category {category}")
    listing = await _client.fetch_items(category)
    return data_to_yaml({
        "category": listing["category"],
        "description": CATEGORY_DESCRIPTIONS[category],
        "count": listing["count"],
        "items": [item.model_dump() for item in listing["items"]],
    })
