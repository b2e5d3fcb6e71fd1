"""Pytest hooks and fixtures."""

import json
import os
from typing import Any

import httpx
import pytest

from suirpc.client import SuiHttpClient
from suirpc.config import ClientConfig
from suirpc.endpoints import Endpoint

NODE_URL = "http://127.0.0.1:9000"


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "network: talks to a public Sui full node (skipped unless SUIRPC_NETWORK_TESTS=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip network tests unless explicitly enabled."""
    if os.environ.get("SUIRPC_NETWORK_TESTS") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a reachable Sui full node")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip)


class FakeNode:
    """httpx.MockTransport handler that records requests and replays one response."""

    def __init__(self, payload: Any = None, *, status: int = 200, raw: bytes | None = None):
        self.payload = payload
        self.status = status
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status, content=self.raw)
        if self.payload is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.payload)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


def make_config(handler, url: str = NODE_URL) -> ClientConfig:
    return ClientConfig(
        endpoint=Endpoint.CUSTOM,
        custom_url=url,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def make_client():
    """Build a SuiHttpClient against a FakeNode: ``client, node = make_client(payload)``."""

    def _make(payload: Any = None, *, status: int = 200, raw: bytes | None = None):
        node = FakeNode(payload, status=status, raw=raw)
        return SuiHttpClient(make_config(node)), node

    return _make


def ok(result: Any) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": 1, "result": result}


def rpc_error(message: str, code: int = -32602) -> dict[str, Any]:
    return {"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}}
