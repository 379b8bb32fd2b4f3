"""
Shared test fixtures and configuration for entire test suite.

Provides: indexer settings, an in-memory search transport, an index client
wired to it.
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import os
from typing import Any

import pytest

from pass_search.boundary.search import PassIndexClient
from pass_search.configs import IndexerSettings, get_settings

SUBMISSION_ID = "http://fcrepo:8080/fcrepo/rest/submissions/ab/cd/ef/abcdef"


class FakeTransport:
    """
    Search transport returning canned documents.

    Records every call so tests can assert on the query and window, and
    slices its documents with the window the way the index would.
    """

    def __init__(self, documents: list[dict[str, Any]] | None = None) -> None:
        self.documents = documents or []
        self.calls: list[tuple[str, int, int]] = []
        self.error: Exception | None = None

    def search(self, query: str, limit: int, offset: int) -> list[dict[str, Any]]:
        self.calls.append((query, limit, offset))
        if self.error is not None:
            raise self.error
        return self.documents[offset:offset + limit]


@pytest.fixture(autouse=True)
def clean_pass_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep PASS_* variables and any local .env out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("PASS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def indexer_settings() -> IndexerSettings:
    """Indexer settings with two nodes and a small default page size."""
    return IndexerSettings(
        url="http://es1:9200/pass, https://es2:9201/pass",
        limit=10,
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide an empty in-memory transport."""
    return FakeTransport()


@pytest.fixture
def index_client(
    indexer_settings: IndexerSettings, fake_transport: FakeTransport
) -> PassIndexClient:
    """Provide PassIndexClient over the in-memory transport."""
    return PassIndexClient(settings=indexer_settings, transport=fake_transport)


def id_doc(identifier: Any) -> dict[str, Any]:
    """Build an index document with the given @id."""
    return {"@id": identifier, "@type": "Submission"}
