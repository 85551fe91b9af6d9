"""
Unit tests for DndApiClient: URL building, status handling and decoding.
"""

import httpx
import pytest
from pydantic import BaseModel

from conftest import BASE_URL, listing
from dnd5e_mcp.api import APIError, APIReference, DndApiClient, Endpoint, to_kebab_case
from dnd5e_mcp.tools.reference.spells import SpellDetail, SpellListEntry


class TestToKebabCase:

    @pytest.mark.parametrize("name, expected", [
        ("Magic Missile", "magic-missile"),
        ("  Fireball ", "fireball"),
        ("adult-red-dragon", "adult-red-dragon"),
        ("", ""),
    ])
    def test_conversion(self, name, expected):
        assert to_kebab_case(name) == expected


class TestFetchByName:

    @pytest.mark.asyncio
    async def test_converts_name_and_decodes(self, client, fake_api):
        """Should request the kebab-cased index and decode into the model."""
        fake_api.add("/spells/magic-missile", {"index": "magic-missile", "name": "Magic Missile", "level": 1})

        spell = await client.fetch_by_name(Endpoint.SPELLS, "Magic Missile", SpellDetail)

        assert isinstance(spell, SpellDetail)
        assert spell.name == "Magic Missile"
        assert spell.level == 1
        assert fake_api.paths() == ["/spells/magic-missile"]

    @pytest.mark.asyncio
    async def test_non_200_raises_api_error(self, client, fake_api):
        with pytest.raises(APIError) as exc_info:
            await client.fetch_by_name(Endpoint.SPELLS, "Nope", SpellDetail)
        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "API request failed with status 404"

    @pytest.mark.asyncio
    async def test_server_error_status_is_reported(self, client, fake_api):
        fake_api.add("/spells/fireball", {"error": "boom"}, status=500)
        with pytest.raises(APIError, match="status 500"):
            await client.fetch_by_name(Endpoint.SPELLS, "fireball", SpellDetail)

    @pytest.mark.asyncio
    async def test_malformed_body_raises_value_error(self, client, fake_api):
        """Should surface a decode failure for a body that is not JSON."""
        fake_api.add("/spells/fireball", "<html>not json</html>")
        with pytest.raises(ValueError):
            await client.fetch_by_name(Endpoint.SPELLS, "fireball", SpellDetail)

    @pytest.mark.asyncio
    async def test_wrong_shape_raises_value_error(self, client, fake_api):
        fake_api.add("/spells/fireball", {"index": "fireball", "level": "third"})
        with pytest.raises(ValueError):
            await client.fetch_by_name(Endpoint.SPELLS, "fireball", SpellDetail)

    @pytest.mark.asyncio
    async def test_transport_failure_raises_http_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with DndApiClient(BASE_URL, transport=httpx.MockTransport(refuse)) as api_client:
            with pytest.raises(httpx.HTTPError):
                await api_client.fetch_by_name(Endpoint.SPELLS, "fireball", SpellDetail)


class TestFetchList:

    @pytest.mark.asyncio
    async def test_decodes_each_result(self, client, fake_api):
        fake_api.add("/spells", {"count": 2, "results": [
            {"index": "acid-arrow", "name": "Acid Arrow", "level": 2, "url": "/api/spells/acid-arrow"},
            {"index": "aid", "name": "Aid", "level": 2, "url": "/api/spells/aid"},
        ]})

        spells = await client.fetch_list(Endpoint.SPELLS, SpellListEntry)

        assert [spell.index for spell in spells] == ["acid-arrow", "aid"]
        assert all(isinstance(spell, SpellListEntry) for spell in spells)

    @pytest.mark.asyncio
    async def test_appends_filter_query(self, client, fake_api):
        fake_api.add("/spells", {"count": 0, "results": []})

        await client.fetch_list(Endpoint.SPELLS, SpellListEntry, "level=3&school=evocation")

        params = fake_api.requests[0].url.params
        assert params["level"] == "3"
        assert params["school"] == "evocation"

    @pytest.mark.asyncio
    async def test_no_query_without_filter(self, client, fake_api):
        fake_api.add("/monsters", {"count": 0, "results": []})
        await client.fetch_list(Endpoint.MONSTERS, APIReference)
        assert str(fake_api.requests[0].url) == f"{BASE_URL}/monsters"

    @pytest.mark.asyncio
    async def test_non_object_body_rejected(self, client, fake_api):
        fake_api.add("/spells", [1, 2, 3])
        with pytest.raises(ValueError, match="Expected a JSON object"):
            await client.fetch_list(Endpoint.SPELLS, SpellListEntry)

    @pytest.mark.asyncio
    async def test_accepts_plain_category_string(self, client, fake_api):
        fake_api.add("/skills", listing("Acrobatics"))

        class Skill(BaseModel):
            index: str = ""

        skills = await client.fetch_list("skills", Skill)
        assert skills[0].index == "acrobatics"


class TestCatalogueHelpers:

    @pytest.mark.asyncio
    async def test_invalid_url_raises_value_error(self, client, fake_api):
        """Should report a query string that cannot form a URL as ValueError."""
        with pytest.raises(ValueError, match="Invalid request URL"):
            await client.fetch_raw(Endpoint.SPELLS, "level=3\nschool=evocation")
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_fetch_categories_adds_descriptions(self, client, fake_api):
        fake_api.add("", {"spells": "/api/spells", "homebrew": "/api/homebrew"})

        result = await client.fetch_categories()

        assert result["count"] == 2
        spells = result["categories"][0]
        assert spells == {
            "name": "spells",
            "url": "/api/spells",
            "description": "Magic spells with effects, components, and descriptions",
        }
        assert result["categories"][1]["description"] == ""

    @pytest.mark.asyncio
    async def test_fetch_items(self, client, fake_api):
        fake_api.add("/conditions", listing("Blinded", "Charmed"))

        result = await client.fetch_items(Endpoint.CONDITIONS)

        assert result["category"] == "conditions"
        assert result["count"] == 2
        assert [item.name for item in result["items"]] == ["Blinded", "Charmed"]

    @pytest.mark.asyncio
    async def test_fetch_item_quotes_index(self, client, fake_api):
        fake_api.add("/equipment/a b", {"index": "a b"})
        await client.fetch_item(Endpoint.EQUIPMENT, "a b")
        assert fake_api.requests[0].url.raw_path == b"/api/equipment/a%20b"

    @pytest.mark.asyncio
    async def test_fetch_class_features(self, client, fake_api):
        fake_api.add("/classes/wizard/features", listing("Arcane Recovery"))
        features = await client.fetch_class_features("wizard")
        assert features[0]["index"] == "arcane-recovery"

    @pytest.mark.asyncio
    async def test_fetch_class_level(self, client, fake_api):
        fake_api.add("/classes/wizard/levels/3", {"level": 3, "spellcasting": {"spell_slots_level_2": 2}})
        level = await client.fetch_class_level("wizard", 3)
        assert level["spellcasting"]["spell_slots_level_2"] == 2
