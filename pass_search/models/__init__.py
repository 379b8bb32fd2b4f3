"""
Domain models for index lookups.

Entity types and pydantic schemas for predicates, result windows and
indexer endpoints.
"""

from pass_search.models.entity_types import EntityType, type_tag_for
from pass_search.models.search_schemas import IndexerEndpoint, Predicate, ResultWindow

__all__ = [
    "EntityType",
    "IndexerEndpoint",
    "Predicate",
    "ResultWindow",
    "type_tag_for",
]
