"""
Unit tests for the category resources and server wiring.
"""

import logging

import pytest
import yaml
from pydantic import AnyUrl

from conftest import listing
from dnd5e_mcp import fnc_resources, fnc_tools, server
from dnd5e_mcp.config import CATEGORY_DESCRIPTIONS, ServerConfig


@pytest.fixture
def resource_client(client, monkeypatch):
    monkeypatch.setattr(fnc_resources, "_client", None)
    fnc_resources.set_resource_client(client)
    return client


class TestResources:

    @pytest.mark.asyncio
    async def test_one_resource_per_category(self):
        resources = await fnc_resources.handle_list_resources()
        uris = {str(resource.uri) for resource in resources}
        assert len(resources) == len(CATEGORY_DESCRIPTIONS)
        assert "dnd5e://category/spells" in uris

    @pytest.mark.asyncio
    async def test_read_category_as_yaml(self, resource_client, fake_api):
        fake_api.add("/damage-types", listing("Acid", "Fire"))

        text = await fnc_resources.handle_read_resource(AnyUrl("dnd5e://category/damage-types"))

        data = yaml.safe_load(text)
        assert data["category"] == "damage-types"
        assert data["description"] == "Types of damage that can be dealt"
        assert data["count"] == 2
        assert [item["name"] for item in data["items"]] == ["Acid", "Fire"]

    @pytest.mark.asyncio
    async def test_unknown_category(self, resource_client):
        with pytest.raises(ValueError, match="Unknown category"):
            await fnc_resources.handle_read_resource(AnyUrl("dnd5e://category/dragons"))

    @pytest.mark.asyncio
    async def test_unknown_scheme(self, resource_client):
        with pytest.raises(ValueError, match="Unknown resource"):
            await fnc_resources.handle_read_resource(AnyUrl("https://www.dnd5eapi.co/api/spells"))

    @pytest.mark.asyncio
    async def test_read_before_initialization(self, monkeypatch):
        monkeypatch.setattr(fnc_resources, "_client", None)
        with pytest.raises(ConnectionError):
            await fnc_resources.handle_read_resource(AnyUrl("dnd5e://category/spells"))


def test_data_to_yaml_keeps_key_order():
    assert fnc_resources.data_to_yaml({"b": 1, "a": 2}) == "b: 1\na: 2\n"


class TestServerConfigLoading:

    def test_positional_base_url(self, monkeypatch):
        monkeypatch.delenv("DND5E_API_BASE_URL", raising=False)
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        config = server.load_config(["http://localhost:3000/api"])
        assert config.api_base_url == "http://localhost:3000/api"

    def test_defaults_without_arguments(self, monkeypatch):
        monkeypatch.delenv("DND5E_API_BASE_URL", raising=False)
        monkeypatch.delenv("MCP_TRANSPORT", raising=False)
        assert server.load_config([]).api_base_url == "https://www.dnd5eapi.co/api"


@pytest.mark.asyncio
async def test_initialize_api_logs_each_tool_once(monkeypatch, caplog):
    """Should wire the shared client into tools and resources, listing each tool once."""
    monkeypatch.setattr(fnc_tools, "_tool_executor", None)
    monkeypatch.setattr(fnc_resources, "_client", None)
    caplog.set_level(logging.INFO)

    client = server.initialize_api(ServerConfig())
    try:
        mentions = [record.getMessage() for record in caplog.records if "spell_slots_table" in record.getMessage()]
        assert len(mentions) == 1
        assert fnc_resources._client is client
        assert fnc_tools._tool_executor.client is client
    finally:
        await client.aclose()
