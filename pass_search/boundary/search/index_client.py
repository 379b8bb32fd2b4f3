"""
PASS index client.

Finds PASS entity identifiers by attribute value. Builds the query string,
runs it with a result window and collects the @id of every returned
document into a set.

Dependencies: pydantic, pass_search.configs, pass_search.core,
    pass_search.boundary.search.es_transport
System role: Retrieval client for identity and filtered lookups
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from pass_search.boundary.search.es_transport import ElasticsearchTransport, SearchTransport
from pass_search.configs import IndexerSettings, get_settings
from pass_search.core.exceptions import (
    AmbiguousResultError,
    BackendError,
    InvalidArgumentError,
    MalformedResultError,
    PassSearchException,
)
from pass_search.core.query_builder import (
    build_predicate_clause,
    build_predicate_clauses,
    build_query,
)
from pass_search.models.entity_types import entity_kind_name, type_tag_for
from pass_search.models.search_schemas import IndexerEndpoint, ResultWindow
from pass_search.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

ID_FIELDNAME = "@id"

# Two hits are enough to prove an identity lookup is not unique
FIND_ONE_WINDOW = ResultWindow(limit=2, offset=0)

_URI_ADAPTER = TypeAdapter(AnyUrl)


class PassIndexClient:
    """
    Client for identifier lookups against the PASS index.

    Endpoints are resolved once, at construction, and never change. Every
    lookup is a single synchronous search; the client holds no per-query
    state and may be shared between threads.
    """

    def __init__(
        self,
        settings: IndexerSettings | None = None,
        transport: SearchTransport | None = None,
    ) -> None:
        """
        Initialize client from indexer settings.

        Args:
            settings: Indexer settings, defaults to the global configuration
            transport: Search transport, defaults to an ElasticsearchTransport
                over the configured endpoints

        Raises:
            ConfigurationError: If no indexer endpoint is configured
        """
        self.config = settings or get_settings().indexer
        self.endpoints: tuple[IndexerEndpoint, ...] = self.config.resolve_endpoints()
        for endpoint in self.endpoints:
            logger.info(f"Connecting to index at {endpoint}")

        self.transport = transport or ElasticsearchTransport(
            self.endpoints,
            self.config.resolve_index_name(),
            request_timeout=self.config.request_timeout,
        )

    @property
    def default_limit(self) -> int:
        """Page size used when a lookup does not give a limit."""
        return self.config.limit

    def find_one(self, entity_type: Any, attribute: str, value: Any) -> str | None:
        """
        Find the single entity whose attribute has the given value.

        Args:
            entity_type: EntityType, type name or model class
            attribute: Attribute to match
            value: Scalar value, or None to match entities without the attribute

        Returns:
            str | None: Identifier of the match, None if nothing matched

        Raises:
            InvalidArgumentError: If any argument is invalid
            AmbiguousResultError: If more than one entity matched
            MalformedResultError: If a match has an unusable @id
            BackendError: If the search fails
        """
        type_tag = self._type_tag(entity_type)
        query = build_query(type_tag, build_predicate_clause(attribute, value))

        identifiers = self._get_indexer_results(query, FIND_ONE_WINDOW)
        if len(identifiers) > 1:
            raise AmbiguousResultError(attribute, value, identifiers)
        return next(iter(identifiers), None)

    def find_all(
        self,
        entity_type: Any,
        attribute: str,
        value: Any,
        limit: int | None = None,
        offset: int = 0,
    ) -> set[str]:
        """
        Find all entities whose attribute has the given value.

        Args:
            entity_type: EntityType, type name or model class
            attribute: Attribute to match
            value: Scalar value, or None to match entities without the attribute
            limit: Maximum number of identifiers, defaults to the configured page size
            offset: Index of the first match to return

        Returns:
            set[str]: Identifiers of the matches, at most ``limit`` of them

        Raises:
            InvalidArgumentError: If any argument is invalid
            MalformedResultError: If a match has an unusable @id
            BackendError: If the search fails
        """
        type_tag = self._type_tag(entity_type)
        clauses = build_predicate_clause(attribute, value)
        window = self._window(limit, offset)

        return self._get_indexer_results(build_query(type_tag, clauses), window)

    def find_all_by_predicates(
        self,
        entity_type: Any,
        predicates: Mapping[str, Any],
        limit: int | None = None,
        offset: int = 0,
    ) -> set[str]:
        """
        Find all entities matching every attribute/value pair.

        Predicates are ANDed. A None value matches entities lacking that
        attribute.

        Args:
            entity_type: EntityType, type name or model class
            predicates: Attribute to value mapping, at least one entry
            limit: Maximum number of identifiers, defaults to the configured page size
            offset: Index of the first match to return

        Returns:
            set[str]: Identifiers of the matches, at most ``limit`` of them

        Raises:
            InvalidArgumentError: If any argument is invalid
            MalformedResultError: If a match has an unusable @id
            BackendError: If the search fails
        """
        type_tag = self._type_tag(entity_type)
        if predicates is not None and not isinstance(predicates, Mapping):
            raise InvalidArgumentError(
                "predicates must be a mapping of attribute to value", argument="predicates"
            )
        clauses = build_predicate_clauses(predicates)
        window = self._window(limit, offset)

        logger.debug(f"Searching for {entity_kind_name(entity_type)} using multiple filters")
        return self._get_indexer_results(build_query(type_tag, clauses), window)

    def _type_tag(self, entity_type: Any) -> str | None:
        type_tag = type_tag_for(entity_type)
        if type_tag is None:
            logger.debug(
                f"No index type known for {entity_kind_name(entity_type)}, searching without one"
            )
        return type_tag

    def _window(self, limit: int | None, offset: int) -> ResultWindow:
        return ResultWindow.of(self.default_limit if limit is None else limit, offset)

    def _get_indexer_results(self, query: str, window: ResultWindow) -> set[str]:
        """Run the query and collect the identifiers of the returned documents."""
        try:
            documents = self.transport.search(query, window.limit, window.offset)
        except PassSearchException:
            raise
        except Exception as e:
            log_exception_with_context(
                logger, "Index search failed", e, query=query, limit=window.limit
            )
            raise BackendError(
                f"An error occurred while processing the query: {query}",
                query=query,
                details={"error": str(e)},
            ) from e

        identifiers: set[str] = set()
        for document in documents:
            identifiers.add(_parse_identifier(document, query))
        return identifiers


def _parse_identifier(document: Mapping[str, Any], query: str) -> str:
    raw_value = document.get(ID_FIELDNAME) if isinstance(document, Mapping) else None
    if not isinstance(raw_value, str) or not raw_value:
        raise MalformedResultError(raw_value, query)
    # AnyUrl percent-encodes or strips these instead of rejecting them
    if any(ch.isspace() or not ch.isprintable() for ch in raw_value):
        raise MalformedResultError(
            raw_value, query, details={"reason": "whitespace or control character"}
        )
    try:
        _URI_ADAPTER.validate_python(raw_value)
    except ValidationError as e:
        raise MalformedResultError(raw_value, query, details={"reason": str(e)}) from e
    return raw_value
