"""
Elasticsearch search transport.

Executes query_string searches against the PASS index. A new client is
opened for every search and closed when the search returns or fails, so
no connection state is shared between calls.

Dependencies: elasticsearch, pass_search.core.exceptions
System role: Search backend adapter for index lookups
"""

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from elasticsearch import ApiError, Elasticsearch, TransportError

from pass_search.core.exceptions import BackendError
from pass_search.models.search_schemas import IndexerEndpoint
from pass_search.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class SearchTransport(Protocol):
    """Search capability consumed by the index client."""

    def search(self, query: str, limit: int, offset: int) -> list[dict[str, Any]]:
        """Return the source document of each hit, in ranked order."""
        ...


class ElasticsearchTransport:
    """
    Search transport backed by the official Elasticsearch client.

    Holds only the immutable endpoint list and index name; it is safe to
    share between threads.
    """

    def __init__(
        self,
        endpoints: Sequence[IndexerEndpoint],
        index_name: str,
        request_timeout: float = 10.0,
    ) -> None:
        """
        Initialize transport.

        Args:
            endpoints: Elasticsearch nodes to send searches to
            index_name: Index holding PASS documents
            request_timeout: Per-request timeout in seconds
        """
        self.endpoints = tuple(endpoints)
        self.index_name = index_name
        self.request_timeout = request_timeout

    def _open_client(self) -> Elasticsearch:
        return Elasticsearch(
            hosts=[endpoint.to_node() for endpoint in self.endpoints],
            request_timeout=self.request_timeout,
        )

    def search(self, query: str, limit: int, offset: int) -> list[dict[str, Any]]:
        """
        Run a query_string search with AND as the default operator.

        Args:
            query: Query string
            limit: Maximum number of hits
            offset: Index of the first hit

        Returns:
            list[dict[str, Any]]: _source of each hit

        Raises:
            BackendError: If the request fails or the response cannot be read
        """
        log_with_context(
            logger,
            logging.DEBUG,
            "Searching index using querystring",
            query=query,
            limit=limit,
            offset=offset,
        )

        try:
            with self._open_client() as client:
                response = client.search(
                    index=self.index_name,
                    query={
                        "query_string": {
                            "query": query,
                            "default_operator": "AND",
                        }
                    },
                    from_=offset,
                    size=limit,
                )
        except (ApiError, TransportError) as e:
            raise BackendError(
                f"An error occurred while processing the query: {query}",
                query=query,
                details={"error": str(e), "index": self.index_name},
            ) from e

        try:
            hits = response["hits"]["hits"]
        except (KeyError, TypeError) as e:
            raise BackendError(
                "Search response did not contain any hits section",
                query=query,
                details={"index": self.index_name},
            ) from e

        return [hit.get("_source") or {} for hit in hits]
