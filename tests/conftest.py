"""Shared fixtures for the UseKeen MCP server tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from usekeen_mcp.core.dispatcher import ToolDispatcher
from usekeen_mcp.core.tool_registry import ToolRegistry
from usekeen_mcp.services.usekeen_client import UseKeenClient

TEST_API_KEY = "test-key-0123456789"
TEST_BASE_URL = "https://usekeen.test"


class StubClient:
    """Records every backend call and answers with canned results."""

    def __init__(self, doc_result: Any = None, package_result: Any = None, error: Exception = None):
        self.doc_result = doc_result if doc_result is not None else {"results": []}
        self.package_result = package_result if package_result is not None else {"packages": []}
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def fetch_documentation(self, package_name: str, query: str = "") -> Any:
        self.calls.append({"op": "fetch_documentation", "package_name": package_name, "query": query})
        if self.error:
            raise self.error
        return self.doc_result

    async def fetch_packages(self, query: str, max_results: int = 10) -> Any:
        self.calls.append({"op": "fetch_packages", "query": query, "max_results": max_results})
        if self.error:
            raise self.error
        return self.package_result


class RecordingTransport(httpx.MockTransport):
    """An httpx.MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def stub_client():
    return StubClient()


@pytest.fixture
def registry():
    return ToolRegistry()


@pytest.fixture
def make_dispatcher(registry):
    def _make(client) -> ToolDispatcher:
        return ToolDispatcher(client=client, registry=registry)
    return _make


@pytest.fixture
def make_http_client():
    """Builds a real UseKeenClient whose network is an in-memory handler."""
    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = UseKeenClient(api_key=TEST_API_KEY, base_url=TEST_BASE_URL, transport=transport)
        return client, transport
    return _make


def payload(response) -> Any:
    """Parses the single text block of a ToolCallResponse."""
    assert len(response.content) == 1
    assert response.content[0].type == "text"
    return json.loads(response.content[0].text)
