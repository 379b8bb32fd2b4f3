"""
Test suite for ElasticsearchTransport.

Patches the Elasticsearch client class so no cluster is needed.

System role: Verification of the search backend adapter
"""

from unittest.mock import MagicMock, patch

import pytest
from elasticsearch import ConnectionError as ESConnectionError

from pass_search.boundary.search.es_transport import ElasticsearchTransport
from pass_search.core.exceptions import BackendError
from pass_search.models import IndexerEndpoint

QUERY = r"(@type:Submission  AND @id:http\:\/\/x)"


@pytest.fixture
def endpoints() -> tuple[IndexerEndpoint, ...]:
    """Provide two indexer endpoints."""
    return (
        IndexerEndpoint(host="es1", port=9200, scheme="http"),
        IndexerEndpoint(host="es2", port=9243, scheme="https"),
    )


@pytest.fixture
def transport(endpoints: tuple[IndexerEndpoint, ...]) -> ElasticsearchTransport:
    """Provide transport over the pass index."""
    return ElasticsearchTransport(endpoints, "pass", request_timeout=5.0)


@pytest.fixture
def mock_es():
    """Patch the Elasticsearch class; yields (class mock, client mock)."""
    with patch("pass_search.boundary.search.es_transport.Elasticsearch") as mock_class:
        mock_client = MagicMock()
        mock_class.return_value.__enter__.return_value = mock_client
        yield mock_class, mock_client


class TestElasticsearchTransportSearch:
    """Test suite for ElasticsearchTransport.search."""

    def test_search_should_open_client_for_all_endpoints(
        self, transport: ElasticsearchTransport, mock_es
    ) -> None:
        """Test the client is built with every endpoint and the timeout."""
        mock_class, mock_client = mock_es
        mock_client.search.return_value = {"hits": {"hits": []}}

        transport.search(QUERY, 2, 0)

        mock_class.assert_called_once_with(
            hosts=[
                {"host": "es1", "port": 9200, "scheme": "http"},
                {"host": "es2", "port": 9243, "scheme": "https"},
            ],
            request_timeout=5.0,
        )

    def test_search_should_send_query_string_with_window(
        self, transport: ElasticsearchTransport, mock_es
    ) -> None:
        """Test the query, default operator and window are sent."""
        _, mock_client = mock_es
        mock_client.search.return_value = {"hits": {"hits": []}}

        transport.search(QUERY, 10, 20)

        mock_client.search.assert_called_once_with(
            index="pass",
            query={"query_string": {"query": QUERY, "default_operator": "AND"}},
            from_=20,
            size=10,
        )

    def test_search_should_return_sources_in_order(
        self, transport: ElasticsearchTransport, mock_es
    ) -> None:
        """Test each hit's _source is returned in ranked order."""
        _, mock_client = mock_es
        mock_client.search.return_value = {
            "hits": {
                "hits": [
                    {"_id": "1", "_source": {"@id": "http://x/1"}},
                    {"_id": "2", "_source": {"@id": "http://x/2"}},
                    {"_id": "3"},
                ]
            }
        }

        documents = transport.search(QUERY, 10, 0)

        assert documents == [{"@id": "http://x/1"}, {"@id": "http://x/2"}, {}]

    def test_search_should_close_client_after_success(
        self, transport: ElasticsearchTransport, mock_es
    ) -> None:
        """Test the scoped client is released after a search."""
        mock_class, mock_client = mock_es
        mock_client.search.return_value = {"hits": {"hits": []}}

        transport.search(QUERY, 1, 0)

        mock_class.return_value.__exit__.assert_called_once()

    def test_search_should_wrap_transport_errors(
        self, transport: ElasticsearchTransport, mock_es
    ) -> None:
        """Test connection failures become BackendError and the client is released."""
        mock_class, mock_client = mock_es
        cause = ESConnectionError("connection refused")
        mock_client.search.side_effect = cause

        with pytest.raises(BackendError) as exc_info:
            transport.search(QUERY, 1, 0)

        assert exc_info.value.query == QUERY
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.details["index"] == "pass"
        mock_class.return_value.__exit__.assert_called_once()

    def test_search_should_reject_response_without_hits(
        self, transport: ElasticsearchTransport, mock_es
    ) -> None:
        """Test a response lacking hits raises BackendError."""
        _, mock_client = mock_es
        mock_client.search.return_value = {"took": 1}

        with pytest.raises(BackendError, match="hits"):
            transport.search(QUERY, 1, 0)
