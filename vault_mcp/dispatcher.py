import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx
import mcp.types as types
from pydantic import ValidationError

from .api_client import VaultAPIClient
from .catalog import TOOLS_BY_NAME, ToolDefinition
from .exceptions import UnknownToolError, VaultMCPError

logger = logging.getLogger(__name__)


def _format_validation_error(tool_name: str, error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(problems)


def success_result(value: Any) -> types.CallToolResult:
    """Wrap a JSON value as a pretty-printed text block"""
    text = json.dumps(value, indent=2, ensure_ascii=False)
    return types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=False)


def error_result(message: str) -> types.CallToolResult:
    return types.CallToolResult(content=[types.TextContent(type="text", text=f"Error: {message}")], isError=True)


class ToolDispatcher:
    """Publishes the tool catalog and routes tool calls to the vault API"""

    def __init__(self, api_client: VaultAPIClient, tools: Mapping[str, ToolDefinition] = TOOLS_BY_NAME):
        self.api_client = api_client
        self._tools = tools
        self._listing = tuple(tool.to_mcp_tool() for tool in tools.values())

    def list_tools(self) -> list[types.Tool]:
        return list(self._listing)

    def get_tool(self, name: str) -> ToolDefinition:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """
        Execute one tool call

        Never raises: every failure is reported as an error result so the
        server keeps serving the next call.

        Args:
            name: Tool name from the catalog
            arguments: Raw tool arguments (None is treated as no arguments)

        Returns:
            CallToolResult with one text block
        """
        try:
            tool = self.get_tool(name)
            parsed = tool.parse_arguments(arguments)
            request = tool.build_request(parsed)
            result = await self.api_client.execute(request)
        except UnknownToolError as e:
            logger.warning(f"⚠ {e}")
            return error_result(str(e))
        except ValidationError as e:
            message = _format_validation_error(name, e)
            logger.warning(f"⚠ {message}")
            return error_result(message)
        except (VaultMCPError, httpx.HTTPError) as e:
            message = str(e) or type(e).__name__
            logger.error(f"❌ Tool {name} failed: {message}")
            return error_result(message)
        except Exception as e:
            logger.exception(f"❌ Unexpected error in tool {name}")
            return error_result(str(e) or type(e).__name__)

        return success_result(result)

