"""
Search backend boundary layer.

- ElasticsearchTransport: query_string searches over a scoped client per call
- PassIndexClient: identifier lookups built on a SearchTransport

Dependencies: elasticsearch
System role: Index search adapter
"""

from pass_search.boundary.search.es_transport import ElasticsearchTransport, SearchTransport
from pass_search.boundary.search.index_client import PassIndexClient

__all__ = ["ElasticsearchTransport", "PassIndexClient", "SearchTransport"]
