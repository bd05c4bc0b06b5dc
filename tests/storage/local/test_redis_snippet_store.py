"""
Unit tests for the Redis snippet store.

Uses a dictionary-backed client double so no Redis server is needed; see
tests/integration for tests against a live server.
"""

from unittest.mock import Mock

import pytest

from casual_lifelog.models import Snippet, StatBlock
from casual_lifelog.storage.local.redis import RedisSnippetStore


class DictRedisClient:
    """Minimal stand-in for the get/set/delete subset of a Redis client."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        return True

    def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0


@pytest.fixture
def client():
    return DictRedisClient()


@pytest.fixture
def snippet_store(client):
    return RedisSnippetStore(client=client, key="test_snippets")


@pytest.fixture
def sample_snippet():
    return Snippet(
        id="1",
        event_name="Boxing Class",
        timestamp=1700000000000,
        stat_changes=StatBlock(body=2, reflexes=3),
        comment="拳擊課",
        type="text",
    )


def test_prepend_writes_single_key(snippet_store, client, sample_snippet):
    snippet_store.prepend(sample_snippet)

    assert list(client.data) == ["test_snippets"]
    assert snippet_store.load() == [sample_snippet]


def test_replace_and_clear(snippet_store, client, sample_snippet):
    snippet_store.replace([sample_snippet, sample_snippet.model_copy(update={"id": "0"})])

    assert [s.id for s in snippet_store.load()] == ["1", "0"]

    snippet_store.clear()

    assert "test_snippets" not in client.data
    assert snippet_store.load() == []


def test_corrupt_value_loads_as_empty(snippet_store, client):
    client.data["test_snippets"] = "[{]"

    assert snippet_store.load() == []


def test_unreadable_server_loads_as_empty(sample_snippet):
    """A failing GET degrades to an empty log."""
    client = Mock()
    client.get.side_effect = ConnectionError("connection refused")
    store = RedisSnippetStore(client=client)

    assert store.load() == []
