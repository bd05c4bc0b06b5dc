"""
Remote mirror used when no remote is configured.

Every operation reports "unavailable"; the reconciliation layer then runs
purely against the local store for the lifetime of the process.
"""

from typing import List

from casual_lifelog.models import Snippet
from casual_lifelog.storage.results import RemoteResult


class DisabledRemoteMirror:
    """RemoteMirror implementation for local-only deployments."""

    def is_available(self) -> bool:
        return False

    def insert(self, snippet: Snippet) -> RemoteResult[None]:
        return RemoteResult.unavailable()

    def fetch_all(self) -> RemoteResult[List[Snippet]]:
        return RemoteResult.unavailable()

    def delete_all(self) -> RemoteResult[None]:
        return RemoteResult.unavailable()
