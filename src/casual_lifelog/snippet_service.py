"""
Snippet service: reconciles the local snippet cache with the remote mirror.

Writes land in the local store first and are mirrored remotely in the
background. Reads prefer the remote mirror and refresh the local cache from
it, falling back to the cache whenever the remote is absent or failing.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Set

from casual_lifelog.errors import RemoteError
from casual_lifelog.models import Snippet, SnippetDraft
from casual_lifelog.storage.protocols import RemoteMirror, SnippetStore
from casual_lifelog.storage.remote.disabled import DisabledRemoteMirror
from casual_lifelog.storage.results import RemoteResult
from casual_lifelog.utils.timestamps import new_snippet_id

logger = logging.getLogger(__name__)

RemoteErrorSink = Callable[[Snippet, RemoteError], None]


@dataclass
class ClearAllResult:
    """
    Outcome of wiping both stores.

    Attributes:
        local_cleared: Whether the local store was cleared
        local_error: The exception raised by the local store, if any
        remote: Result of the remote delete ("unavailable" in local-only mode)
    """

    local_cleared: bool
    remote: RemoteResult[None]
    local_error: Optional[Exception] = None

    @property
    def fully_cleared(self) -> bool:
        return self.local_cleared and self.remote.status != "failed"


def _log_remote_error(snippet: Snippet, error: RemoteError) -> None:
    logger.error(f"Cloud sync failed for snippet {snippet.id}: {error}")


class SnippetService:
    """
    Reconciliation layer between the local snippet store and the remote mirror.

    The local store is authoritative for writes; the remote mirror, when it
    answers, is authoritative for reads. A successful read replaces the local
    cache wholesale, which can drop a local snippet whose background insert
    has not reached the remote yet.
    """

    def __init__(
        self,
        local_store: SnippetStore,
        remote: Optional[RemoteMirror] = None,
        on_remote_error: Optional[RemoteErrorSink] = None,
    ):
        """
        Initialize the service.

        Args:
            local_store: Local snippet cache
            remote: Remote mirror; None (or an unavailable mirror) means local-only
            on_remote_error: Sink for background insert failures (default: log)
        """
        self.local_store = local_store
        self.remote = remote if remote is not None else DisabledRemoteMirror()
        self.on_remote_error = on_remote_error or _log_remote_error

        # Decided once; the remote is never re-probed
        self._remote_enabled = self.remote.is_available()
        self._local_lock = asyncio.Lock()
        self._pending: Set[asyncio.Task] = set()

        logger.info(
            f"SnippetService initialized "
            f"(mode={'remote-mirrored' if self._remote_enabled else 'local-only'})"
        )

    @property
    def remote_enabled(self) -> bool:
        return self._remote_enabled

    @property
    def pending_inserts(self) -> int:
        """Number of background remote inserts still in flight."""
        return len(self._pending)

    async def write(self, draft: SnippetDraft) -> Snippet:
        """
        Log a new snippet.

        The snippet is durable locally before this returns. The remote insert
        runs as a background task whose failure is reported, never raised.

        Args:
            draft: Classified snippet data

        Returns:
            The stored snippet with its assigned id and timestamp
        """
        snippet_id, timestamp = new_snippet_id()
        snippet = Snippet.from_draft(draft, snippet_id=snippet_id, timestamp=timestamp)

        async with self._local_lock:
            self.local_store.prepend(snippet)

        logger.info(f"Logged snippet {snippet.id}: '{snippet.event_name}' ({snippet.type})")

        if self._remote_enabled:
            task = asyncio.create_task(self._mirror_insert(snippet))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

        return snippet

    async def read(self) -> List[Snippet]:
        """
        Return the snippet log, newest first.

        Prefers the remote mirror and refreshes the local cache from it. Falls
        back to the local cache, unchanged, when the remote is disabled or the
        fetch fails.
        """
        if not self._remote_enabled:
            return self.local_store.load()

        result = await asyncio.to_thread(self.remote.fetch_all)

        if result.status == "ok":
            snippets = list(result.value or [])
            async with self._local_lock:
                self.local_store.replace(snippets)
            logger.debug(f"Refreshed local cache with {len(snippets)} remote snippets")
            return snippets

        elif result.status == "failed":
            logger.warning(f"Remote fetch failed, serving local cache: {result.error}")

        else:
            logger.warning("Remote mirror unavailable, serving local cache")

        return self.local_store.load()

    async def clear_all(self) -> ClearAllResult:
        """
        Wipe the local store and, if configured, the remote mirror.

        Both deletes are attempted independently; a local failure does not
        stop the remote delete. This is irreversible.
        """
        local_cleared = True
        local_error: Optional[Exception] = None

        try:
            async with self._local_lock:
                self.local_store.clear()
        except Exception as e:
            local_cleared = False
            local_error = e
            logger.error(f"Failed to clear local snippet store: {e}")

        if self._remote_enabled:
            remote_result = await asyncio.to_thread(self.remote.delete_all)
            if remote_result.status == "failed":
                logger.error(f"Failed to clear remote mirror: {remote_result.error}")
        else:
            remote_result = RemoteResult.unavailable()

        logger.info(
            f"Cleared snippet log (local={'ok' if local_cleared else 'failed'}, "
            f"remote={remote_result.status})"
        )

        return ClearAllResult(
            local_cleared=local_cleared, remote=remote_result, local_error=local_error
        )

    async def wait_for_pending(self) -> None:
        """Wait for all in-flight background inserts to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _mirror_insert(self, snippet: Snippet) -> None:
        try:
            result = await asyncio.to_thread(self.remote.insert, snippet)
        except Exception as e:
            result = RemoteResult.failed(RemoteError("insert", str(e)))

        if result.status == "failed" and result.error is not None:
            self.on_remote_error(snippet, result.error)
        elif result.is_ok:
            logger.debug(f"Snippet {snippet.id} mirrored remotely")
