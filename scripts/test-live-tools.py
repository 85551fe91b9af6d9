#!/usr/bin/env python3
"""
Live Tool Check against the D&D 5e API

This script verifies that:
1. All tools are discovered and registered
2. A sample of tools return JSON against the real API
3. Upstream failures come back as "Error: ..." text

It needs network access. Set DND5E_API_BASE_URL to point at a mirror.
"""

import sys
import asyncio
import json
import os
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from dnd5e_mcp.api import DndApiClient
from dnd5e_mcp.config import API_BASE_URL
from dnd5e_mcp.fnc_tools import (
    initialize_tools,
    handle_list_tools,
    handle_tool_call
)

SAMPLE_CALLS = [
    ("spells", {"name": "Magic Missile"}),
    ("monsters", {"challenge_rating": [0.25]}),
    ("classes", {"name": "wizard"}),
    ("list_resources", {}),
    ("summarize_monster", {"monster_index": "owlbear"}),
    ("spell_slots_table", {"class_index": "wizard", "level": 5}),
    ("monster_by_cr", {"cr": 0.125}),
    ("equipment_by_type", {"equipment_type": "weapon"}),
]


async def test_registration():
    print("\n=== Test 1: Tool Registration ===")
    tools = await handle_list_tools()
    print(f"✓ Tools registered: {len(tools)}")
    for tool in tools:
        print(f"  - {tool.name}")
    assert tools, "No tools registered"


async def test_sample_calls():
    print("\n=== Test 2: Sample Tool Calls ===")
    for name, arguments in SAMPLE_CALLS:
        response = await handle_tool_call(name, arguments)
        text = response[0].text
        assert not text.startswith("Error:"), f"{name} failed: {text}"
        payload = json.loads(text)
        print(f"  ✓ {name}: keys {sorted(payload)}")


async def test_error_reporting():
    print("\n=== Test 3: Error Reporting ===")
    response = await handle_tool_call("spells", {"name": "Not A Real Spell"})
    text = response[0].text
    print(f"  {text}")
    assert text.startswith("Error: failed to fetch spell"), "Expected an error result"
    print("  ✓ Upstream 404 reported as tool result")


async def main():
    """Run all checks."""
    base_url = os.getenv("DND5E_API_BASE_URL", API_BASE_URL)
    print("=" * 70)
    print(f"Live Tool Check ({base_url})")
    print("=" * 70)

    async with DndApiClient(base_url) as client:
        initialize_tools(client)
        try:
            await test_registration()
            await test_sample_calls()
            await test_error_reporting()

            print("\n" + "=" * 70)
            print("✅ ALL CHECKS PASSED")
            print("=" * 70)
            return 0

        except Exception as e:
            print("\n" + "=" * 70)
            print(f"❌ CHECK FAILED: {e}")
            print("=" * 70)
            import traceback
            traceback.print_exc()
            return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
