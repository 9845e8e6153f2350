"""
Request rules for the vault REST API

Every tool maps its validated arguments to exactly one EndpointRequest. The
rules here are pure: they never touch the network, so the request a tool
produces can be inspected (and tested) without a running vault.
"""

from dataclasses import dataclass, field
from typing import Any, Literal
from urllib.parse import quote

from .models import (
    DEFAULT_SEARCH_SCOPE,
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
    UpdateFileArguments,
    UpdateNoteArguments,
    WriteFileArguments,
)

HTTPMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# Characters encodeURIComponent leaves alone besides the unreserved set
_SEGMENT_SAFE = "!'()*"


@dataclass(frozen=True)
class EndpointRequest:
    """One HTTP request against the vault API, relative to the API root"""

    method: HTTPMethod
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    json_body: Any | None = None


def encode_segment(value: str) -> str:
    """
    Percent-encode a value as a single opaque path segment

    Slashes are encoded too, so "folder/note" stays one segment:

        encode_segment("folder/note") -> "folder%2Fnote"
    """
    return quote(value, safe=_SEGMENT_SAFE)


def _join(values: list[str] | tuple[str, ...]) -> str:
    return ",".join(values)


# ============================================================================
# Vault tools
# ============================================================================


def list_directory(args: ListDirectoryArguments) -> EndpointRequest:
    return EndpointRequest(
        "GET",
        "/vault/directory",
        params={
            "path": args.path,
            "recursive": args.recursive,
            "limit": args.limit,
            "offset": args.offset,
        },
    )


def read_file(args: PathArguments) -> EndpointRequest:
    return EndpointRequest("GET", f"/files/{encode_segment(args.path)}")


def write_file(args: WriteFileArguments) -> EndpointRequest:
    return EndpointRequest(
        "POST",
        "/files/write",
        json_body={"path": args.path, "content": args.content, "mode": args.mode},
    )


def delete_item(args: PathArguments) -> EndpointRequest:
    return EndpointRequest("DELETE", f"/files/{encode_segment(args.path)}")


def create_or_update_note(args: CreateOrUpdateNoteArguments) -> EndpointRequest:
    return EndpointRequest(
        "POST",
        "/notes/upsert",
        json_body={"path": args.path, "content": args.content, "front_matter": args.front_matter},
    )


def get_daily_note(args: DailyNoteArguments) -> EndpointRequest:
    # Relative dates ("today", "yesterday") are resolved by the vault API
    return EndpointRequest("GET", "/vault/notes/daily", params={"date": args.date})


def get_recent_notes(args: RecentNotesArguments) -> EndpointRequest:
    return EndpointRequest("GET", "/vault/notes/recent", params={"limit": args.limit})


def search_vault(args: SearchVaultArguments) -> EndpointRequest:
    params: dict[str, Any] = {"query": args.query, "scope": _join(args.scope)}
    if args.path_filter:
        params["path_filter"] = args.path_filter
    return EndpointRequest("GET", "/vault/search", params=params)


def find_related_notes(args: FindRelatedNotesArguments) -> EndpointRequest:
    return EndpointRequest(
        "GET",
        f"/vault/notes/related/{encode_segment(args.path)}",
        params={"on": _join(args.on)},
    )


# ============================================================================
# Legacy file and note tools
# ============================================================================


def list_files(args: NoArguments) -> EndpointRequest:
    return EndpointRequest("GET", "/files")


def get_file(args: PathArguments) -> EndpointRequest:
    return EndpointRequest("GET", f"/files/{encode_segment(args.path)}")


def create_file(args: CreateFileArguments) -> EndpointRequest:
    return EndpointRequest(
        "POST",
        "/files",
        json_body={"path": args.path, "content": args.content, "type": args.type},
    )


def update_file(args: UpdateFileArguments) -> EndpointRequest:
    return EndpointRequest("PUT", f"/files/{encode_segment(args.path)}", json_body={"content": args.content})


def delete_file(args: PathArguments) -> EndpointRequest:
    return EndpointRequest("DELETE", f"/files/{encode_segment(args.path)}")


def list_notes(args: ListNotesArguments) -> EndpointRequest:
    """
    List notes, or search them when a filter is given

    A non-empty `search` goes to the multi-scope search endpoint with the
    default scope set. path_filter is not available on this path.
    """
    if args.search:
        return EndpointRequest(
            "GET",
            "/vault/search",
            params={"query": args.search, "scope": _join(DEFAULT_SEARCH_SCOPE)},
        )
    return EndpointRequest("GET", "/notes")


def get_note(args: PathArguments) -> EndpointRequest:
    return EndpointRequest("GET", f"/notes/{encode_segment(args.path)}")


def create_note(args: CreateNoteArguments) -> EndpointRequest:
    body: dict[str, Any] = {"path": args.path, "content": args.content}
    if args.frontmatter is not None:
        body["frontmatter"] = args.frontmatter
    return EndpointRequest("POST", "/notes", json_body=body)


def update_note(args: UpdateNoteArguments) -> EndpointRequest:
    # Only fields the caller actually sent end up in the PATCH body
    body = args.model_dump(include={"content", "frontmatter"}, exclude_unset=True)
    return EndpointRequest("PATCH", f"/notes/{encode_segment(args.path)}", json_body=body)


def delete_note(args: PathArguments) -> EndpointRequest:
    return EndpointRequest("DELETE", f"/notes/{encode_segment(args.path)}")


def search_notes(args: SearchNotesArguments) -> EndpointRequest:
    return EndpointRequest("GET", "/notes", params={"search": args.query})


# ============================================================================
# Metadata tools
# ============================================================================


def get_metadata_keys(args: NoArguments) -> EndpointRequest:
    return EndpointRequest("GET", "/metadata/keys")


def get_metadata_values(args: MetadataKeyArguments) -> EndpointRequest:
    return EndpointRequest("GET", f"/metadata/values/{encode_segment(args.key)}")
