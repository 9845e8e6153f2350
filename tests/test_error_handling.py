"""
Tests for error handling in the vault client and the dispatcher
"""

import httpx
import pytest

from vault_mcp.catalog import ToolDefinition
from vault_mcp.dispatcher import ToolDispatcher
from vault_mcp.exceptions import VaultAPIError, VaultResponseError
from vault_mcp.models import NoArguments
from vault_mcp.translator import EndpointRequest


class TestAPIErrorResponses:
    """Test that non-2xx responses raise VaultAPIError"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,reason",
        [
            (401, "Unauthorized"),
            (403, "Forbidden"),
            (404, "Not Found"),
            (422, "Unprocessable Entity"),
            (500, "Internal Server Error"),
        ],
    )
    async def test_non_success_status(self, api_client, vault, status_code, reason):
        vault.respond_with(httpx.Response(status_code, json={"message": "nope"}))

        with pytest.raises(VaultAPIError) as exc_info:
            await api_client.execute(EndpointRequest("GET", "/files"))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.reason == reason
        assert str(exc_info.value) == f"API request failed: {status_code} {reason}"

    @pytest.mark.asyncio
    async def test_single_attempt_per_call(self, api_client, vault):
        """Test that a failed call is not retried"""
        vault.respond_with(httpx.Response(503))

        with pytest.raises(VaultAPIError):
            await api_client.execute(EndpointRequest("GET", "/vault/notes/recent"))

        assert len(vault.requests) == 1

    @pytest.mark.asyncio
    async def test_invalid_json_body(self, api_client, vault):
        vault.respond_with(httpx.Response(200, text="<html>not json</html>"))

        with pytest.raises(VaultResponseError) as exc_info:
            await api_client.execute(EndpointRequest("GET", "/files"))

        assert "Invalid JSON" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, api_client, vault):
        vault.respond_with(httpx.ConnectError("Connection refused"))

        with pytest.raises(httpx.ConnectError):
            await api_client.execute(EndpointRequest("GET", "/files"))


class TestDispatcherErrorResults:
    """Test that every failure becomes an error result instead of an exception"""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher, vault):
        result = await dispatcher.call_tool("not_a_real_tool", {})

        assert result.isError is True
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert "not_a_real_tool" in result.content[0].text
        assert result.content[0].text.startswith("Error: ")
        assert vault.requests == []

    @pytest.mark.asyncio
    async def test_not_found_status(self, dispatcher, vault):
        vault.respond_with(httpx.Response(404))

        result = await dispatcher.call_tool("read_file", {"path": "missing.md"})

        assert result.isError is True
        assert result.content[0].text == "Error: API request failed: 404 Not Found"

    @pytest.mark.asyncio
    async def test_transport_error(self, dispatcher, vault):
        vault.respond_with(httpx.ConnectError("Connection refused"))

        result = await dispatcher.call_tool("get_recent_notes", {})

        assert result.isError is True
        assert result.content[0].text == "Error: Connection refused"

    @pytest.mark.asyncio
    async def test_invalid_json(self, dispatcher, vault):
        vault.respond_with(httpx.Response(200, text="not json"))

        result = await dispatcher.call_tool("list_files", {})

        assert result.isError is True
        assert "Invalid JSON" in result.content[0].text

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, dispatcher, vault):
        result = await dispatcher.call_tool("read_file", {})

        assert result.isError is True
        assert "Invalid arguments for read_file" in result.content[0].text
        assert "path" in result.content[0].text
        assert vault.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_exception(self, api_client):
        """Test that an exception from a request rule is caught at the dispatch boundary"""

        def broken_rule(args):
            raise RuntimeError("rule exploded")

        tool = ToolDefinition("broken", "Always fails", NoArguments, broken_rule)
        dispatcher = ToolDispatcher(api_client, {"broken": tool})

        result = await dispatcher.call_tool("broken", None)

        assert result.isError is True
        assert result.content[0].text == "Error: rule exploded"

    @pytest.mark.asyncio
    async def test_dispatcher_keeps_serving_after_error(self, dispatcher, vault):
        vault.respond_with(httpx.Response(500))
        failed = await dispatcher.call_tool("get_metadata_keys", {})

        vault.respond_with(httpx.Response(200, json=["tags", "status"]))
        succeeded = await dispatcher.call_tool("get_metadata_keys", {})

        assert failed.isError is True
        assert succeeded.isError is False
