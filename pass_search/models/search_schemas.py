"""
Search request schemas.

Pydantic models for the request-scoped values of an index lookup
(predicates, result windows) and for the resolved indexer endpoints.

Dependencies: pydantic, pass_search.core.exceptions
System role: Type definitions for index search operations
"""

import enum
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from pass_search.core.exceptions import InvalidArgumentError


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    return error["msg"]


class Predicate(BaseModel):
    """
    Attribute/value pair used to filter indexed documents.

    A value of None means the attribute must not exist on the document,
    not that it equals the empty string.
    """

    model_config = ConfigDict(frozen=True)

    attribute_name: StrictStr = Field(min_length=1, description="Indexed field name")
    value: Any = Field(default=None, description="Scalar value, or None for field absence")

    @field_validator("value")
    @classmethod
    def _reject_collections(cls, value: Any) -> Any:
        if isinstance(value, Iterable) and not isinstance(value, str):
            raise ValueError("value cannot be a collection")
        return value

    @classmethod
    def of(cls, attribute_name: Any, value: Any = None) -> "Predicate":
        """
        Build a predicate, reporting bad input as InvalidArgumentError.

        Raises:
            InvalidArgumentError: If the attribute is empty or the value is a collection
        """
        try:
            return cls(attribute_name=attribute_name, value=value)
        except ValidationError as e:
            if not isinstance(attribute_name, str) or not attribute_name:
                raise InvalidArgumentError(
                    "attribute cannot be null or empty", argument="attribute"
                ) from e
            raise InvalidArgumentError(
                f"Value for attribute {attribute_name} cannot be a collection",
                argument="value",
                details={"reason": _first_error(e)},
            ) from e

    @property
    def is_absence(self) -> bool:
        """True when the predicate matches documents lacking the attribute."""
        return self.value is None

    @property
    def rendered_value(self) -> str | None:
        """Value as it is written into a query, before escaping."""
        if self.value is None:
            return None
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, enum.Enum):
            return str(self.value.value)
        return str(self.value)


class ResultWindow(BaseModel):
    """How many documents the index returns, and from which position."""

    model_config = ConfigDict(frozen=True)

    limit: StrictInt = Field(ge=0, description="Maximum number of documents to return")
    offset: StrictInt = Field(default=0, ge=0, description="Index of the first document")

    @classmethod
    def of(cls, limit: Any, offset: Any = 0) -> "ResultWindow":
        """
        Build a result window, reporting bad input as InvalidArgumentError.

        Raises:
            InvalidArgumentError: If limit or offset is negative or not an integer
        """
        try:
            return cls(limit=limit, offset=offset)
        except ValidationError as e:
            error = e.errors()[0]
            argument = str(error["loc"][0]) if error["loc"] else None
            raise InvalidArgumentError(
                f"The {argument} value cannot be less than 0 and must be an integer",
                argument=argument,
                details={"limit": limit, "offset": offset, "reason": error["msg"]},
            ) from e


class IndexerEndpoint(BaseModel):
    """A single Elasticsearch node the client may send searches to."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1, description="Host name or address")
    port: int = Field(ge=1, le=65535, description="TCP port")
    scheme: str = Field(default="http", pattern="^https?$", description="http or https")

    def to_node(self) -> dict[str, Any]:
        """Node mapping in the form accepted by the Elasticsearch client."""
        return {"host": self.host, "port": self.port, "scheme": self.scheme}

    def __str__(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"
