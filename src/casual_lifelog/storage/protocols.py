"""
Storage protocol definitions for the snippet log.

These protocols define the interface that storage implementations must provide.
The local store is the always-available cache; the remote mirror is the
optional hosted copy that is trusted over the cache whenever it answers.
"""

from typing import List, Protocol

from casual_lifelog.models import Snippet
from casual_lifelog.storage.results import RemoteResult


class SnippetStore(Protocol):
    """
    Protocol for the local snippet cache.

    The whole log is persisted as one serialized blob under a fixed key.
    Every mutation rewrites the full blob, so a subsequent load() never
    observes a partial write.
    """

    def load(self) -> List[Snippet]:
        """
        Return the persisted snippets, newest first as stored.

        Returns:
            The stored list, or an empty list when nothing is stored or the
            stored blob is corrupt. Never raises for bad data.
        """
        ...

    def replace(self, snippets: List[Snippet]) -> None:
        """
        Overwrite the entire persisted list, keeping the given order.

        Args:
            snippets: The new contents of the log
        """
        ...

    def prepend(self, snippet: Snippet) -> None:
        """
        Insert a snippet at the head of the persisted list.

        Args:
            snippet: The snippet to add
        """
        ...

    def clear(self) -> None:
        """Remove the persisted list entirely."""
        ...


class RemoteMirror(Protocol):
    """
    Protocol for the optional remote copy of the snippet log.

    Availability is decided once at construction and never re-probed.
    Operations report failure through RemoteResult instead of raising.
    """

    def is_available(self) -> bool:
        """Return True if a remote was configured for this process."""
        ...

    def insert(self, snippet: Snippet) -> RemoteResult[None]:
        """
        Insert one snippet into the remote store.

        Args:
            snippet: The snippet to mirror

        Returns:
            ok(None) on success, failed(error) otherwise
        """
        ...

    def fetch_all(self) -> RemoteResult[List[Snippet]]:
        """
        Fetch every remote snippet, newest first.

        Returns:
            ok(snippets) ordered by descending creation time, or failed(error)
        """
        ...

    def delete_all(self) -> RemoteResult[None]:
        """
        Delete every remote snippet unconditionally.

        Returns:
            ok(None) on success, failed(error) otherwise
        """
        ...
