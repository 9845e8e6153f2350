"""Pytest config: add project root to path, provide a recording stand-in for the vault API."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to Python path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from vault_mcp.api_client import VaultAPIClient  # noqa: E402
from vault_mcp.dispatcher import ToolDispatcher  # noqa: E402

TEST_BASE_URL = "http://vault.test"


class RecordingVault:
    """Answers every request with a canned response and keeps the requests it saw"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"ok": True})

    def respond_with(self, response: httpx.Response | Exception) -> None:
        self.response = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "No request reached the vault"
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        """Raw (still percent-encoded) path of the last request, without query string"""
        return self.last.url.raw_path.decode("ascii").split("?", 1)[0]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params)

    @property
    def last_body(self):
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def vault():
    return RecordingVault()


@pytest.fixture
def api_client(vault):
    return VaultAPIClient(TEST_BASE_URL, api_key="test-key", transport=httpx.MockTransport(vault.handler))


@pytest.fixture
def dispatcher(api_client):
    return ToolDispatcher(api_client)
