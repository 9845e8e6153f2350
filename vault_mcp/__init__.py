"""
Obsidian Vault MCP Server
A Model Context Protocol server for the Obsidian Local REST API
"""

__version__ = "1.1.0"

from .api_client import VaultAPIClient
from .catalog import TOOLS, ToolDefinition
from .config import Config, load_config
from .dispatcher import ToolDispatcher

__all__ = [
    "TOOLS",
    "Config",
    "ToolDefinition",
    "ToolDispatcher",
    "VaultAPIClient",
    "load_config",
]
