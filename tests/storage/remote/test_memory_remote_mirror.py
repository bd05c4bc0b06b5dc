"""Unit tests for the in-memory and disabled remote mirrors."""

import pytest

from casual_lifelog.models import Snippet, StatBlock
from casual_lifelog.storage.remote.disabled import DisabledRemoteMirror
from casual_lifelog.storage.remote.memory import InMemoryRemoteMirror


@pytest.fixture
def mirror():
    return InMemoryRemoteMirror()


def make_snippet(snippet_id: str, timestamp: int) -> Snippet:
    return Snippet(
        id=snippet_id,
        event_name=f"Event {snippet_id}",
        timestamp=timestamp,
        stat_changes=StatBlock(body=1),
    )


def test_insert_and_fetch_newest_first(mirror):
    mirror.insert(make_snippet("a", 1000))
    mirror.insert(make_snippet("c", 3000))
    mirror.insert(make_snippet("b", 2000))

    result = mirror.fetch_all()

    assert result.is_ok
    assert [s.id for s in result.value] == ["c", "b", "a"]


def test_fetch_empty(mirror):
    result = mirror.fetch_all()

    assert result.status == "ok"
    assert result.value == []


def test_delete_all(mirror):
    mirror.insert(make_snippet("a", 1000))

    assert mirror.delete_all().is_ok
    assert mirror.row_count() == 0
    assert mirror.fetch_all().value == []


def test_is_available(mirror):
    assert mirror.is_available() is True


def test_disabled_mirror_reports_unavailable():
    disabled = DisabledRemoteMirror()

    assert disabled.is_available() is False
    assert disabled.insert(make_snippet("a", 1)).status == "unavailable"
    assert disabled.fetch_all().status == "unavailable"
    assert disabled.delete_all().status == "unavailable"
