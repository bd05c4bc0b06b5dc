"""
In-memory remote mirror implementation.

Keeps rows in the remote schema (RemoteSnippetRow) so the field mapping is
exercised exactly as it is against a real database. Suitable for testing
and demos. Data is lost on restart.
"""

import logging
import threading
from typing import Dict, List

from casual_lifelog.models import Snippet
from casual_lifelog.storage.remote.models import (
    RemoteSnippetRow,
    from_remote_row,
    to_remote_row,
)
from casual_lifelog.storage.results import RemoteResult
from casual_lifelog.utils.timestamps import iso_to_epoch_ms

logger = logging.getLogger(__name__)


class InMemoryRemoteMirror:
    """
    In-memory implementation of the RemoteMirror protocol.
    """

    def __init__(self):
        # Rows by snippet id (primary key)
        self._rows: Dict[str, RemoteSnippetRow] = {}
        self._lock = threading.Lock()

        logger.info("InMemoryRemoteMirror initialized")

    def is_available(self) -> bool:
        return True

    def insert(self, snippet: Snippet) -> RemoteResult[None]:
        """Insert one snippet as a remote row."""
        row = to_remote_row(snippet)
        with self._lock:
            self._rows[row.id] = row
        logger.debug(f"Mirrored snippet {row.id}")
        return RemoteResult.ok()

    def fetch_all(self) -> RemoteResult[List[Snippet]]:
        """Return all rows as snippets, newest first."""
        with self._lock:
            rows = list(self._rows.values())

        rows.sort(key=lambda row: (iso_to_epoch_ms(row.created_at), row.id), reverse=True)
        return RemoteResult.ok([from_remote_row(row) for row in rows])

    def delete_all(self) -> RemoteResult[None]:
        """Delete every row."""
        with self._lock:
            count = len(self._rows)
            self._rows.clear()
        logger.info(f"Deleted {count} remote snippets")
        return RemoteResult.ok()

    def row_count(self) -> int:
        """Number of rows currently stored."""
        return len(self._rows)
