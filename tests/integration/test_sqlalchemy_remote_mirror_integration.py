"""Integration tests for the SQLAlchemy remote mirror against PostgreSQL."""

import os

import pytest

from casual_lifelog.models import Snippet, StatBlock
from casual_lifelog.storage.remote.sqlalchemy import SQLAlchemyRemoteMirror


@pytest.fixture
def postgres_mirror():
    """Mirror on the database named by LIFELOG_TEST_POSTGRES_URL."""
    url = os.getenv("LIFELOG_TEST_POSTGRES_URL")
    if not url:
        pytest.skip("LIFELOG_TEST_POSTGRES_URL not set")
    pytest.importorskip("psycopg2")

    mirror = SQLAlchemyRemoteMirror.from_url(url, os.getenv("LIFELOG_TEST_POSTGRES_KEY"))
    mirror.create_tables()
    mirror.delete_all()
    yield mirror
    mirror.delete_all()


@pytest.mark.integration
def test_postgres_round_trip(postgres_mirror):
    """Snippets survive a PostgreSQL round trip with millisecond timestamps."""
    snippets = [
        Snippet(id="a", event_name="Swim", timestamp=1_700_000_000_001, stat_changes=StatBlock(body=2)),
        Snippet(id="b", event_name="Read", timestamp=1_700_000_000_999, stat_changes=StatBlock(intelligence=1)),
    ]

    for snippet in snippets:
        assert postgres_mirror.insert(snippet).is_ok

    fetched = postgres_mirror.fetch_all()

    assert fetched.is_ok
    assert fetched.value == list(reversed(snippets))
