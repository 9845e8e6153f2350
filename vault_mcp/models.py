"""
Pydantic models for tool arguments

Each tool validates its arguments against one of these models before any
request is built. Models are strict and reject unknown fields, so a typo in an
argument name surfaces as an error instead of being silently dropped.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

WriteMode = Literal["overwrite", "append", "prepend"]
SearchScope = Literal["content", "filename", "tags"]
RelationKind = Literal["tags", "links"]
ItemType = Literal["file", "directory"]

DEFAULT_SEARCH_SCOPE: tuple[SearchScope, ...] = ("content", "filename", "tags")
DEFAULT_RELATED_ON: tuple[RelationKind, ...] = ("tags", "links")
DEFAULT_DIRECTORY_LIMIT = 50
DEFAULT_RECENT_LIMIT = 5


def _dedupe(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


class ToolArguments(BaseModel):
    """Base for all tool argument models"""

    model_config = ConfigDict(extra="forbid", strict=True)


class NoArguments(ToolArguments):
    """Tools that take no arguments"""


class PathArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path of the file or note inside the vault")


class ListDirectoryArguments(ToolArguments):
    path: str = Field(".", description="Directory path relative to the vault root")
    recursive: bool = Field(False, description="Include items from all subdirectories")
    limit: int = Field(DEFAULT_DIRECTORY_LIMIT, ge=1, description="Maximum number of items to return")
    offset: int = Field(0, ge=0, description="Number of items to skip for pagination")


class WriteFileArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path of the file to write")
    content: str = Field(description="Content to write")
    mode: WriteMode = Field("overwrite", description="overwrite replaces the file, append/prepend add to it")


class CreateOrUpdateNoteArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path of the note (extension optional)")
    content: str = Field(description="Markdown body of the note")
    front_matter: dict[str, Any] = Field({}, description="Front matter fields to store with the note")


class DailyNoteArguments(ToolArguments):
    date: str = Field("today", description="today, yesterday, tomorrow or a YYYY-MM-DD date")


class RecentNotesArguments(ToolArguments):
    limit: int = Field(DEFAULT_RECENT_LIMIT, ge=1, description="Number of recently modified notes to return")


class SearchVaultArguments(ToolArguments):
    query: str = Field(min_length=1, description="Text to search for")
    scope: list[SearchScope] = Field(
        list(DEFAULT_SEARCH_SCOPE),
        min_length=1,
        description="Fields to match the query against",
    )
    path_filter: str | None = Field(None, description="Only search below this path")

    @field_validator("scope")
    @classmethod
    def _unique_scope(cls, value: list[str]) -> list[str]:
        return _dedupe(value)


class FindRelatedNotesArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path of the note to find relations for")
    on: list[RelationKind] = Field(
        list(DEFAULT_RELATED_ON),
        min_length=1,
        description="Relation kinds to follow",
    )

    @field_validator("on")
    @classmethod
    def _unique_on(cls, value: list[str]) -> list[str]:
        return _dedupe(value)


class CreateFileArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path for the new file")
    content: str = Field(description="Content of the file")
    type: ItemType = Field("file", description="Type of item to create")


class UpdateFileArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path to the file")
    content: str = Field(description="New content of the file")


class ListNotesArguments(ToolArguments):
    search: str | None = Field(None, description="Optional text filter (runs a vault search)")


class CreateNoteArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path for the new note")
    content: str = Field(description="Content of the note")
    frontmatter: dict[str, Any] | None = Field(None, description="Optional frontmatter metadata")


class UpdateNoteArguments(ToolArguments):
    path: str = Field(min_length=1, description="Path to the note")
    content: str | None = Field(None, description="New content (optional)")
    frontmatter: dict[str, Any] | None = Field(None, description="New frontmatter (optional)")


class SearchNotesArguments(ToolArguments):
    query: str = Field(min_length=1, description="Search query")


class MetadataKeyArguments(ToolArguments):
    key: str = Field(min_length=1, description="Frontmatter key")

