"""
In-memory snippet store implementation.

Keeps the serialized blob in a dictionary keyed by storage key, the same
shape a browser-style key/value store would have. Suitable for testing and
for sessions that should not touch disk. Data is lost on restart.
"""

import logging
import threading
from typing import Dict, List

from casual_lifelog.models import Snippet
from casual_lifelog.storage.local.codec import (
    DEFAULT_STORAGE_KEY,
    decode_snippets,
    encode_snippets,
)

logger = logging.getLogger(__name__)


class InMemorySnippetStore:
    """
    In-memory implementation of the SnippetStore protocol.
    """

    def __init__(self, key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize the store.

        Args:
            key: Storage key the blob lives under (default: "cyber_life_snippets")
        """
        self.key = key
        self._blobs: Dict[str, str] = {}
        self._lock = threading.Lock()

        logger.info(f"InMemorySnippetStore initialized (key={key})")

    def load(self) -> List[Snippet]:
        """Return the stored snippets, newest first."""
        return decode_snippets(self._blobs.get(self.key))

    def replace(self, snippets: List[Snippet]) -> None:
        """Overwrite the stored list."""
        blob = encode_snippets(snippets)
        with self._lock:
            self._blobs[self.key] = blob
        logger.debug(f"Replaced local log with {len(snippets)} snippets")

    def prepend(self, snippet: Snippet) -> None:
        """Insert a snippet at the head of the stored list."""
        with self._lock:
            snippets = self.load()
            snippets.insert(0, snippet)
            self._blobs[self.key] = encode_snippets(snippets)
        logger.debug(f"Prepended snippet {snippet.id} (total: {len(snippets)})")

    def clear(self) -> None:
        """Remove the stored list."""
        with self._lock:
            self._blobs.pop(self.key, None)
        logger.info("Cleared local snippet log")

    def set_raw(self, blob: str) -> None:
        """Store a raw blob as-is (used to simulate external corruption)."""
        with self._lock:
            self._blobs[self.key] = blob
