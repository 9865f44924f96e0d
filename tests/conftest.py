"""Shared fixtures for the Jules MCP Server tests."""

import httpx
import pytest

from helpers import FakeUpstream
from jules_mcp.registry import build_registry
from jules_mcp.router import ToolRouter


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def upstream_client(upstream: FakeUpstream) -> httpx.AsyncClient:
    return upstream.client_factory("abc123")


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def router(registry, upstream: FakeUpstream) -> ToolRouter:
    return ToolRouter(registry=registry, client_factory=upstream.client_factory)
