"""
Redis snippet store implementation.

Stores the whole snippet blob as a single Redis string, so every rewrite is
one atomic SET. Useful when the cache should outlive the process and be
shared with other tooling on the same host.
"""

import logging
import threading
from typing import List

from casual_lifelog.models import Snippet
from casual_lifelog.storage.local.codec import (
    DEFAULT_STORAGE_KEY,
    decode_snippets,
    encode_snippets,
)

try:
    import redis
except ImportError:
    redis = None  # type: ignore

logger = logging.getLogger(__name__)


class RedisSnippetStore:
    """
    Redis implementation of the SnippetStore protocol.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        key: str = DEFAULT_STORAGE_KEY,
        client=None,
    ):
        """
        Initialize the Redis store.

        Args:
            host: Redis host
            port: Redis port
            db: Redis database number
            key: Redis key holding the blob (default: "cyber_life_snippets")
            client: Pre-built Redis client; host/port/db are ignored when given
        """
        if client is None:
            if redis is None:
                raise ImportError(
                    "redis package is required for RedisSnippetStore. "
                    "Install with: pip install redis"
                )
            client = redis.Redis(host=host, port=port, db=db, decode_responses=True)

        self.client = client
        self.key = key
        self._lock = threading.Lock()

        logger.info(f"RedisSnippetStore initialized (host={host}:{port}, key={key})")

    def load(self) -> List[Snippet]:
        """Return the stored snippets, newest first."""
        try:
            blob = self.client.get(self.key)
        except Exception as e:
            logger.warning(f"Could not read snippet blob from Redis: {e}")
            return []
        return decode_snippets(blob)

    def replace(self, snippets: List[Snippet]) -> None:
        """Overwrite the stored list."""
        with self._lock:
            self.client.set(self.key, encode_snippets(snippets))
        logger.debug(f"Replaced local log with {len(snippets)} snippets")

    def prepend(self, snippet: Snippet) -> None:
        """Insert a snippet at the head of the stored list."""
        with self._lock:
            snippets = self.load()
            snippets.insert(0, snippet)
            self.client.set(self.key, encode_snippets(snippets))
        logger.debug(f"Prepended snippet {snippet.id} (total: {len(snippets)})")

    def clear(self) -> None:
        """Delete the blob key."""
        with self._lock:
            self.client.delete(self.key)
        logger.info(f"Cleared local snippet log (key={self.key})")
