"""
Tool catalog

Each ToolDefinition carries its own argument model and request rule, so the
published tool list and the dispatch table are the same object.
"""

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import mcp.types as types

from . import translator
from .models import (
    CreateFileArguments,
    CreateNoteArguments,
    CreateOrUpdateNoteArguments,
    DailyNoteArguments,
    FindRelatedNotesArguments,
    ListDirectoryArguments,
    ListNotesArguments,
    MetadataKeyArguments,
    NoArguments,
    PathArguments,
    RecentNotesArguments,
    SearchNotesArguments,
    SearchVaultArguments,
    ToolArguments,
    UpdateFileArguments,
    UpdateNoteArguments,
    WriteFileArguments,
)
from .translator import EndpointRequest


def _strip_titles(schema: Any) -> Any:
    """Drop pydantic's auto-generated "title" keys, keeping property names intact"""
    if isinstance(schema, dict):
        cleaned = {}
        for key, value in schema.items():
            if key == "title" and isinstance(value, str):
                continue
            if key == "properties" and isinstance(value, dict):
                cleaned[key] = {name: _strip_titles(prop) for name, prop in value.items()}
            else:
                cleaned[key] = _strip_titles(value)
        return cleaned
    if isinstance(schema, list):
        return [_strip_titles(item) for item in schema]
    return schema


@dataclass(frozen=True)
class ToolDefinition:
    """One MCP tool: its published shape and the request it translates to"""

    name: str
    description: str
    arguments: type[ToolArguments]
    build_request: Callable[[Any], EndpointRequest]

    @property
    def input_schema(self) -> dict[str, Any]:
        schema = _strip_titles(self.arguments.model_json_schema())
        schema.setdefault("properties", {})
        return schema

    def parse_arguments(self, arguments: dict[str, Any] | None) -> ToolArguments:
        """Validate raw arguments, applying declared defaults"""
        return self.arguments.model_validate(arguments or {})

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema)


TOOLS: tuple[ToolDefinition, ...] = (
    # Vault tools
    ToolDefinition(
        "list_directory",
        "List files and folders in a vault directory, paginated to keep responses small",
        ListDirectoryArguments,
        translator.list_directory,
    ),
    ToolDefinition(
        "read_file",
        "Read the content of a file in the vault",
        PathArguments,
        translator.read_file,
    ),
    ToolDefinition(
        "write_file",
        "Write a file in the vault: overwrite it, or append/prepend to it. Creates the file if needed",
        WriteFileArguments,
        translator.write_file,
    ),
    ToolDefinition(
        "delete_item",
        "Delete a file or folder from the vault",
        PathArguments,
        translator.delete_item,
    ),
    ToolDefinition(
        "create_or_update_note",
        "Create a note, or update it in place when it already exists, with optional front matter",
        CreateOrUpdateNoteArguments,
        translator.create_or_update_note,
    ),
    ToolDefinition(
        "get_daily_note",
        "Get the daily note for a date (today, yesterday, tomorrow or YYYY-MM-DD)",
        DailyNoteArguments,
        translator.get_daily_note,
    ),
    ToolDefinition(
        "get_recent_notes",
        "Get the most recently modified notes",
        RecentNotesArguments,
        translator.get_recent_notes,
    ),
    ToolDefinition(
        "search_vault",
        "Search the vault by content, filename and/or tags, optionally below a path",
        SearchVaultArguments,
        translator.search_vault,
    ),
    ToolDefinition(
        "find_related_notes",
        "Find notes related to a note through shared tags and/or links",
        FindRelatedNotesArguments,
        translator.find_related_notes,
    ),
    # Legacy tools, kept for existing clients
    ToolDefinition(
        "list_files",
        "List all files in the vault (legacy; prefer list_directory)",
        NoArguments,
        translator.list_files,
    ),
    ToolDefinition(
        "get_file",
        "Get content of a specific file from the vault (legacy; prefer read_file)",
        PathArguments,
        translator.get_file,
    ),
    ToolDefinition(
        "create_file",
        "Create a new file or directory in the vault (legacy; prefer write_file)",
        CreateFileArguments,
        translator.create_file,
    ),
    ToolDefinition(
        "update_file",
        "Update content of an existing file (legacy; prefer write_file)",
        UpdateFileArguments,
        translator.update_file,
    ),
    ToolDefinition(
        "delete_file",
        "Delete a file from the vault (legacy; prefer delete_item)",
        PathArguments,
        translator.delete_file,
    ),
    ToolDefinition(
        "list_notes",
        "List all notes in the vault, or search them when `search` is given (legacy; prefer search_vault)",
        ListNotesArguments,
        translator.list_notes,
    ),
    ToolDefinition(
        "get_note",
        "Get a specific note with its content and metadata",
        PathArguments,
        translator.get_note,
    ),
    ToolDefinition(
        "create_note",
        "Create a new note with optional frontmatter (legacy; prefer create_or_update_note)",
        CreateNoteArguments,
        translator.create_note,
    ),
    ToolDefinition(
        "update_note",
        "Update a note's content and/or frontmatter (legacy; prefer create_or_update_note)",
        UpdateNoteArguments,
        translator.update_note,
    ),
    ToolDefinition(
        "delete_note",
        "Delete a note from the vault (legacy; prefer delete_item)",
        PathArguments,
        translator.delete_note,
    ),
    ToolDefinition(
        "search_notes",
        "Search notes by content or metadata (legacy; prefer search_vault)",
        SearchNotesArguments,
        translator.search_notes,
    ),
    # Metadata tools
    ToolDefinition(
        "get_metadata_keys",
        "Get all frontmatter keys used across notes",
        NoArguments,
        translator.get_metadata_keys,
    ),
    ToolDefinition(
        "get_metadata_values",
        "Get all unique values for a specific frontmatter key",
        MetadataKeyArguments,
        translator.get_metadata_values,
    ),
)


def _index(tools: tuple[ToolDefinition, ...]) -> MappingProxyType:
    by_name: dict[str, ToolDefinition] = {}
    for tool in tools:
        if tool.name in by_name:
            raise ValueError(f"Duplicate tool name in catalog: {tool.name}")
        by_name[tool.name] = tool
    return MappingProxyType(by_name)


TOOLS_BY_NAME = _index(TOOLS)
