"""
Exception hierarchy for the PASS index search client.

Provides layered exception structure for query and retrieval errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the client
"""

from typing import Any


class PassSearchException(Exception):
    """Base exception for all PASS index search errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgumentError(PassSearchException, ValueError):
    """Raised when caller input is rejected before any backend call."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error message
            argument: Name of the argument that failed validation
            details: Additional context
        """
        details = details or {}
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class AmbiguousResultError(PassSearchException):
    """Raised when an identity lookup matches more than one document."""

    def __init__(
        self,
        attribute: str,
        value: Any,
        identifiers: set[str],
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize ambiguous result error.

        Args:
            attribute: Attribute the lookup was made on
            value: Value the lookup was made with
            identifiers: Identifiers matched so far
            details: Additional context
        """
        self.attribute = attribute
        self.value = value
        self.identifiers = set(identifiers)
        details = details or {}
        details.update(
            {
                "attribute": attribute,
                "value": value,
                "identifiers": sorted(self.identifiers),
            }
        )
        message = (
            f"More than one result was returned by this query ({attribute} = {value}). "
            "find_one() searches should match only one result. Instead found:\n "
            + "\n".join(sorted(self.identifiers))
        )
        super().__init__(message, details)


class MalformedResultError(PassSearchException):
    """Raised when a returned document carries an unusable identifier."""

    def __init__(
        self,
        raw_value: Any,
        query: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize malformed result error.

        Args:
            raw_value: Identifier field value as returned by the index
            query: Query string that produced the document
            details: Additional context
        """
        self.raw_value = raw_value
        self.query = query
        details = details or {}
        details.update({"raw_value": raw_value, "query": query})
        super().__init__(
            "Something was wrong with the record returned from the indexer. "
            "The ID could not be recognized as a URI",
            details,
        )


class BackendError(PassSearchException):
    """Raised when the search backend fails while executing a query."""

    def __init__(
        self,
        message: str,
        query: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize backend error.

        Args:
            message: Error message
            query: Query string that was being executed
            details: Additional context
        """
        self.query = query
        details = details or {}
        if query is not None:
            details["query"] = query
        super().__init__(message, details)


class ConfigurationError(PassSearchException):
    """Raised when the client cannot be configured (fatal, never retried)."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)
