"""
PASS index search client.

Builds escaped query_string queries from attribute/value lookups and
resolves them to PASS entity identifiers through Elasticsearch.
"""

from pass_search.boundary.search import PassIndexClient
from pass_search.core.exceptions import (
    AmbiguousResultError,
    BackendError,
    ConfigurationError,
    InvalidArgumentError,
    MalformedResultError,
    PassSearchException,
)
from pass_search.models import EntityType

__version__ = "0.1.0"

__all__ = [
    "AmbiguousResultError",
    "BackendError",
    "ConfigurationError",
    "EntityType",
    "InvalidArgumentError",
    "MalformedResultError",
    "PassIndexClient",
    "PassSearchException",
]
