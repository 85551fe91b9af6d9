"""
D&D 5e API Client
Fetches and decodes resources from the public D&D 5e REST API.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field, TypeAdapter

from .config import API_BASE_URL, CATEGORY_DESCRIPTIONS, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)


class Endpoint(str, Enum):
    """Resource categories exposed by the D&D 5e API."""
    ABILITY_SCORES = "ability-scores"
    ALIGNMENTS = "alignments"
    BACKGROUNDS = "backgrounds"
    CLASSES = "classes"
    CONDITIONS = "conditions"
    DAMAGE_TYPES = "damage-types"
    EQUIPMENT = "equipment"
    EQUIPMENT_CATEGORIES = "equipment-categories"
    FEATS = "feats"
    FEATURES = "features"
    LANGUAGES = "languages"
    MAGIC_ITEMS = "magic-items"
    MAGIC_SCHOOLS = "magic-schools"
    MONSTERS = "monsters"
    PROFICIENCIES = "proficiencies"
    RACES = "races"
    RULE_SECTIONS = "rule-sections"
    RULES = "rules"
    SKILLS = "skills"
    SPELLS = "spells"
    SUBCLASSES = "subclasses"
    SUBRACES = "subraces"
    TRAITS = "traits"
    WEAPON_PROPERTIES = "weapon-properties"


EndpointLike = Union[Endpoint, str]


class APIError(Exception):
    """Raised when the upstream API answers with a non-200 status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"API request failed with status {status_code}")
        self.status_code = status_code
        self.url = url


class APIReference(BaseModel):
    """The upstream's generic pointer to another resource."""
    index: str = ""
    name: str = ""
    url: str = ""


class ListResponse(BaseModel):
    """Body of a category list endpoint."""
    count: int = 0
    results: List[Dict[str, Any]] = Field(default_factory=list)


def to_kebab_case(s: str) -> str:
    """Convert a display name such as 'Magic Missile' into an API index."""
    return s.lower().strip().replace(" ", "-")


def _path(endpoint: EndpointLike) -> str:
    return endpoint.value if isinstance(endpoint, Endpoint) else endpoint


class DndApiClient:
    """Async client for the D&D 5e API with JSON decoding into pydantic models."""

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. https://www.dnd5eapi.co/api
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "DndApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    async def aclose(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()
        logger.debug("API client closed")

    async def _get_json(self, url: str) -> Any:
        logger.debug(f"GET {url}")
        try:
            response = await self._client.get(url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid request URL {url!r}: {e}") from e
        if response.status_code != 200:
            raise APIError(response.status_code, url)
        return response.json()

    async def _get_object(self, url: str) -> Dict[str, Any]:
        data = await self._get_json(url)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {url}, got {type(data).__name__}")
        return data

    def _list_url(self, endpoint: EndpointLike, filter: str = "") -> str:
        url = f"{self.base_url}/{_path(endpoint)}"
        if filter:
            url = f"{url}?{filter}"
        return url

    # --- Typed fetch helpers ---

    async def fetch_api_item(self, endpoint: EndpointLike, item: str) -> Dict[str, Any]:
        """Fetch a single item by endpoint and index."""
        return await self._get_object(f"{self.base_url}/{_path(endpoint)}/{quote(item, safe='')}")

    async def fetch_by_name(self, endpoint: EndpointLike, name: str, model: Type[TModel]) -> TModel:
        """
        Fetch an item by display name and decode it into the given model.

        The name is converted to kebab-case to form the API index.

        Raises:
            APIError: Upstream returned a non-200 status
            httpx.HTTPError: Transport failure
            ValueError: Request URL was invalid or the body could not be decoded into the model
        """
        logger.debug(f"fetch_by_name called: endpoint={_path(endpoint)} name={name}")
        try:
            data = await self.fetch_api_item(endpoint, to_kebab_case(name))
            result = model.model_validate(data)
        except Exception as e:
            logger.error(f"fetch_by_name failed for {_path(endpoint)}/{name}: {e}")
            raise
        logger.debug(f"fetch_by_name succeeded: name={name}")
        return result

    async def fetch_api_list(self, endpoint: EndpointLike, filter: str = "") -> ListResponse:
        """Fetch a category list, appending the raw query string when given."""
        data = await self._get_object(self._list_url(endpoint, filter))
        return ListResponse.model_validate(data)

    async def fetch_list(self, endpoint: EndpointLike, model: Type[TModel], filter: str = "") -> List[TModel]:
        """Fetch a category list and decode each result into the given model."""
        logger.debug(f"fetch_list called: endpoint={_path(endpoint)} filter={filter!r}")
        try:
            listing = await self.fetch_api_list(endpoint, filter)
            results = TypeAdapter(List[model]).validate_python(listing.results)
        except Exception as e:
            logger.error(f"fetch_list failed for {_path(endpoint)}: {e}")
            raise
        logger.debug(f"fetch_list succeeded: {len(results)} results")
        return results

    # --- Untyped catalogue helpers ---

    async def fetch_raw(self, endpoint: EndpointLike, filter: str = "") -> Dict[str, Any]:
        """Fetch a category list body without decoding it."""
        return await self._get_object(self._list_url(endpoint, filter))

    async def fetch_categories(self) -> Dict[str, Any]:
        """Fetch the API root and annotate each category with its description."""
        root = await self._get_object(self.base_url)
        categories = [
            {
                "name": name,
                "url": url,
                "description": CATEGORY_DESCRIPTIONS.get(name, ""),
            }
            for name, url in root.items()
        ]
        return {"count": len(categories), "categories": categories}

    async def fetch_items(self, category: EndpointLike) -> Dict[str, Any]:
        """Fetch every reference in a category."""
        listing = await self.fetch_api_list(category)
        items = [APIReference.model_validate(result) for result in listing.results]
        return {"category": _path(category), "count": len(items), "items": items}

    async def fetch_item(self, category: EndpointLike, index: str) -> Dict[str, Any]:
        """Fetch a raw resource by category and index."""
        return await self.fetch_api_item(category, index)

    async def fetch_class_features(self, class_index: str) -> List[Dict[str, Any]]:
        """Fetch the features of a class."""
        url = f"{self.base_url}/{Endpoint.CLASSES.value}/{quote(class_index, safe='')}/features"
        listing = ListResponse.model_validate(await self._get_object(url))
        return listing.results

    async def fetch_class_level(self, class_index: str, level: int) -> Dict[str, Any]:
        """Fetch the level table entry of a class."""
        url = f"{self.base_url}/{Endpoint.CLASSES.value}/{quote(class_index, safe='')}/levels/{level}"
        return await self._get_object(url)
