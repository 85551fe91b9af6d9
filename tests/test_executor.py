"""
Unit tests for ToolExecutor: discovery, MCP listing and execution.
"""

import json

import pytest

from dnd5e_mcp.tools import ToolExecutor

REFERENCE_TOOLS = {"spells", "monsters", "ability-scores", "alignments", "backgrounds", "classes"}
CATALOG_TOOLS = {
    "list_resources", "list_category_items", "get_resource_by_index", "list_names_in_category",
    "filter_spells", "filter_monsters", "filter_items", "random_monster", "random_spell",
    "summarize_monster", "summarize_spell", "get_monster_actions", "get_class_features",
    "spell_slots_table", "equipment_by_type", "monster_by_cr", "spells_by_school",
    "races_and_traits", "backgrounds_and_features", "feats", "conditions", "damage_types",
    "get_magic_items",
}


@pytest.fixture
def executor(client):
    return ToolExecutor(client)


@pytest.fixture
def bare_executor():
    return ToolExecutor()


class TestDiscovery:

    def test_discovers_every_tool(self, bare_executor):
        names = [meta.name for meta in bare_executor.discover_all_tools()]
        assert len(names) == len(set(names))
        assert set(names) == REFERENCE_TOOLS | CATALOG_TOOLS

    def test_categories(self, bare_executor):
        by_name = {meta.name: meta for meta in bare_executor.discover_all_tools()}
        assert by_name["spells"].category == "reference"
        assert by_name["feats"].category == "catalog"

    def test_duplicate_names_rejected(self, bare_executor, monkeypatch):
        """Should refuse to register two tools under one name."""
        module = "dnd5e_mcp.tools.catalog.browse"
        monkeypatch.setattr(bare_executor, "_module_paths", lambda: [module, module])
        with pytest.raises(ValueError, match="Duplicate tool name"):
            bare_executor.discover_all_tools()

    def test_load_unknown_tool(self, bare_executor):
        assert bare_executor.load_tool("teleport") is None

    def test_mcp_tools_are_read_only(self, bare_executor):
        tools = {tool.name: tool for tool in bare_executor.list_mcp_tools()}
        assert len(tools) == len(REFERENCE_TOOLS | CATALOG_TOOLS)
        spells = tools["spells"]
        assert spells.inputSchema["type"] == "object"
        assert spells.annotations.readOnlyHint is True
        assert spells.annotations.openWorldHint is True


class TestExecuteTool:

    @pytest.mark.asyncio
    async def test_success_returns_rendered_json(self, executor, fake_api):
        fake_api.add("/alignments", {"count": 1, "results": [
            {"index": "neutral", "name": "Neutral", "url": "/api/alignments/neutral"},
        ]})

        result = await executor.execute_tool("alignments", {})

        assert result["success"] is True
        assert json.loads(result["text"])["results"][0]["name"] == "Neutral"

    @pytest.mark.asyncio
    async def test_unknown_tool(self, executor):
        result = await executor.execute_tool("teleport", {})
        assert result == {"success": False, "error": "Tool not found: teleport"}

    @pytest.mark.asyncio
    async def test_invalid_arguments(self, executor, fake_api):
        """Should report validation failures without calling the API."""
        result = await executor.execute_tool("spell_slots_table", {"class_index": "wizard", "level": 42})

        assert result["success"] is False
        assert result["error"].startswith("Invalid arguments for spell_slots_table")
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_tool_failure_is_returned_as_error(self, executor, fake_api):
        result = await executor.execute_tool("spells", {"name": "Nope"})
        assert result == {"success": False, "error": "failed to fetch spell: API request failed with status 404"}

    @pytest.mark.asyncio
    async def test_unusable_url_is_returned_as_error(self, executor, fake_api):
        """Arguments that cannot form a request URL still produce an error result."""
        result = await executor.execute_tool("filter_monsters", {"filter": "type=dragon\n"})

        assert result["success"] is False
        assert result["error"].startswith("Invalid request URL")
