"""Shared fixtures for the D&D 5e MCP tests.

Provides:
- ``fake_api``: an in-memory stand-in for the D&D 5e API, served through
  ``httpx.MockTransport`` so no test touches the network
- ``client``: a DndApiClient wired to ``fake_api``
- ``run_tool``: instantiate a tool, attach the client and execute it
"""

import httpx
import pytest
import pytest_asyncio

from dnd5e_mcp.api import DndApiClient

BASE_URL = "https://dnd.test/api"
BASE_PATH = "/api"


class FakeAPI:
    """Routes requests by path (below /api) to canned responses and records them."""

    def __init__(self):
        self.routes = {}
        self.unreachable = set()
        self.requests = []

    def add(self, path, body, status=200):
        self.routes[path] = (status, body)

    def refuse(self, path):
        """Make requests to path fail at the transport level."""
        self.unreachable.add(path)

    def paths(self):
        return [request.url.path[len(BASE_PATH):] for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len(BASE_PATH):]
        if path in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if path not in self.routes:
            return httpx.Response(404, json={"error": "Not found"})
        status, body = self.routes[path]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)


def listing(*names):
    """Build a category list body from display names."""
    results = [
        {"index": name.lower().replace(" ", "-"), "name": name, "url": f"/api/x/{name.lower().replace(' ', '-')}"}
        for name in names
    ]
    return {"count": len(results), "results": results}


@pytest.fixture
def fake_api():
    return FakeAPI()


@pytest_asyncio.fixture
async def client(fake_api):
    api_client = DndApiClient(BASE_URL, transport=httpx.MockTransport(fake_api.handler))
    yield api_client
    await api_client.aclose()


@pytest.fixture
def run_tool(client):
    async def _run(tool_class, **arguments):
        tool = tool_class()
        tool.attach_client(client)
        return await tool.execute(tool_class.InputSchema(**arguments))
    return _run
