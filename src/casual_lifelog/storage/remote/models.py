"""
Models for the remote mirror.

Defines the remote row layout and the mapping between it and Snippet. The
mapping is a pure renaming of fields, except for the creation time, which
is epoch milliseconds on a Snippet and an ISO-8601 string on a row.
"""

from typing import Literal, Optional

from pydantic import BaseModel

from casual_lifelog.models import Snippet, StatBlock
from casual_lifelog.utils.timestamps import epoch_ms_to_iso, iso_to_epoch_ms


class RemoteSnippetRow(BaseModel):
    """
    One row of the remote ``snippets`` table.

    Column names follow the remote schema (snake_case, ``created_at``).
    """

    id: str
    event_name: str
    stat_changes: StatBlock
    comment: str
    type: Literal["text", "voice", "image"]
    media_url: Optional[str] = None
    created_at: str  # ISO-8601


def to_remote_row(snippet: Snippet) -> RemoteSnippetRow:
    """Map a Snippet to its remote row."""
    return RemoteSnippetRow(
        id=snippet.id,
        event_name=snippet.event_name,
        stat_changes=snippet.stat_changes,
        comment=snippet.comment,
        type=snippet.type,
        media_url=snippet.media_url,
        created_at=epoch_ms_to_iso(snippet.timestamp),
    )


def from_remote_row(row: RemoteSnippetRow) -> Snippet:
    """Map a remote row back to a Snippet."""
    return Snippet(
        id=row.id,
        event_name=row.event_name,
        timestamp=iso_to_epoch_ms(row.created_at),
        stat_changes=row.stat_changes,
        comment=row.comment,
        type=row.type,
        media_url=row.media_url,
    )
