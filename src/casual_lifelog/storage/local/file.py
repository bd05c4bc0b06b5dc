"""
JSON file snippet store implementation.

Persists the snippet blob to ``<directory>/<key>.json``. Every mutation
writes a temporary file next to the target and renames it into place, so a
concurrent or subsequent load() sees either the old list or the new one.
"""

import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Union

from casual_lifelog.models import Snippet
from casual_lifelog.storage.local.codec import (
    DEFAULT_STORAGE_KEY,
    decode_snippets,
    encode_snippets,
)

logger = logging.getLogger(__name__)


class JsonFileSnippetStore:
    """
    File-backed implementation of the SnippetStore protocol.

    Survives restarts. Intended for a single process; mutations within the
    process are serialized by a lock.
    """

    def __init__(self, directory: Union[str, Path], key: str = DEFAULT_STORAGE_KEY):
        """
        Initialize the store.

        Args:
            directory: Directory holding the blob file (created if missing)
            key: Storage key, used as the file name stem
        """
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self.key = key
        self.path = self.directory / f"{key}.json"
        self._lock = threading.RLock()

        logger.info(f"JsonFileSnippetStore initialized (path={self.path})")

    def load(self) -> List[Snippet]:
        """Return the stored snippets, newest first."""
        try:
            blob = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return []
        return decode_snippets(blob)

    def replace(self, snippets: List[Snippet]) -> None:
        """Overwrite the stored list."""
        with self._lock:
            self._write(encode_snippets(snippets))
        logger.debug(f"Replaced local log with {len(snippets)} snippets")

    def prepend(self, snippet: Snippet) -> None:
        """Insert a snippet at the head of the stored list."""
        with self._lock:
            snippets = self.load()
            snippets.insert(0, snippet)
            self._write(encode_snippets(snippets))
        logger.debug(f"Prepended snippet {snippet.id} (total: {len(snippets)})")

    def clear(self) -> None:
        """Remove the blob file."""
        with self._lock:
            self.path.unlink(missing_ok=True)
        logger.info(f"Cleared local snippet log at {self.path}")

    def _write(self, blob: str) -> None:
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{self.key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(blob)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
