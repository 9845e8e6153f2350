import logging
import sys

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .api_client import VaultAPIClient
from .config import Config
from .dispatcher import ToolDispatcher

SERVER_NAME = "obsidian-vault-mcp"
STARTUP_MESSAGE = "Obsidian MCP Server running on stdio"

logger = logging.getLogger(__name__)


def create_server(dispatcher: ToolDispatcher) -> Server:
    """
    Build the MCP server for a dispatcher

    tools/list publishes the dispatcher's catalog verbatim; tools/call returns
    the dispatcher's result envelope as built, so error results keep their
    "Error: ..." text.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(result)

    # Registered directly: argument validation happens in the dispatcher
    server.request_handlers[types.CallToolRequest] = call_tool

    return server


def create_dispatcher(config: Config) -> ToolDispatcher:
    api_client = VaultAPIClient(base_url=config.api_base_url, api_key=config.api_key, timeout=config.request_timeout)
    return ToolDispatcher(api_client)


async def run_stdio(config: Config) -> None:
    """Serve MCP on stdin/stdout until the client closes stdin"""
    server = create_server(create_dispatcher(config))

    async with stdio_server() as (read_stream, write_stream):
        # stdout is reserved for JSON-RPC
        print(STARTUP_MESSAGE, file=sys.stderr, flush=True)
        logger.info(f"Vault API: {config.api_base_url}")
        await server.run(read_stream, write_stream, server.create_initialization_options())
