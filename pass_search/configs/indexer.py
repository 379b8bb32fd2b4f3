"""
Indexer configuration settings.

Manages the Elasticsearch endpoints holding the PASS index, the index name
and the default page size used when callers do not supply a result window.

Dependencies: pydantic, pydantic_settings
System role: Search backend configuration for index lookups
"""

import re
from urllib.parse import urlsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pass_search.core.exceptions import ConfigurationError
from pass_search.models.search_schemas import IndexerEndpoint

DEFAULT_ELASTICSEARCH_PORT = 9200
DEFAULT_INDEX_NAME = "pass"

_URL_SEPARATOR = re.compile(r"[,\s]+")


class IndexerSettings(BaseSettings):
    """Elasticsearch indexer configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PASS_ELASTICSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="http://localhost:9200/pass",
        description="Indexer URL(s), comma or whitespace separated",
    )
    index_name: str | None = Field(
        default=None,
        description="Index to search; defaults to the path of the first URL",
    )
    limit: int = Field(
        default=100,
        ge=0,
        description="Default page size for lookups without an explicit limit",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout in seconds, passed to the Elasticsearch client",
    )

    def urls(self) -> list[str]:
        """Configured indexer URLs in declaration order."""
        return [u for u in _URL_SEPARATOR.split(self.url.strip()) if u]

    def resolve_endpoints(self) -> tuple[IndexerEndpoint, ...]:
        """
        Parse the configured URLs into indexer endpoints.

        Duplicates are dropped, order is kept.

        Returns:
            tuple[IndexerEndpoint, ...]: Endpoints, never empty

        Raises:
            ConfigurationError: If no URL is configured or a URL cannot be parsed
        """
        endpoints: list[IndexerEndpoint] = []
        for url in self.urls():
            endpoint = _parse_endpoint(url)
            if endpoint not in endpoints:
                endpoints.append(endpoint)

        if not endpoints:
            raise ConfigurationError(
                "No indexer URL is configured", setting="PASS_ELASTICSEARCH_URL"
            )
        return tuple(endpoints)

    def resolve_index_name(self) -> str:
        """Index name, falling back to the first path segment of the first URL."""
        if self.index_name:
            return self.index_name
        for url in self.urls():
            segments = [s for s in urlsplit(url).path.split("/") if s]
            if segments:
                return segments[0]
        return DEFAULT_INDEX_NAME


def _parse_endpoint(url: str) -> IndexerEndpoint:
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise ConfigurationError(
            f"Indexer URL could not be parsed: {url}", setting="PASS_ELASTICSEARCH_URL"
        ) from e

    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ConfigurationError(
            f"Indexer URL must be an absolute http(s) URL: {url}",
            setting="PASS_ELASTICSEARCH_URL",
        )
    return IndexerEndpoint(
        host=parts.hostname,
        port=port or DEFAULT_ELASTICSEARCH_PORT,
        scheme=parts.scheme,
    )
