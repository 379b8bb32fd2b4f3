"""
PASS entity types.

Enumerates the concrete PASS entity kinds stored in the index and resolves
any caller-supplied kind (enum member, type name, or model class) to the
index's @type tag.

Dependencies: pass_search.core.exceptions
System role: Entity-type lookup for query construction
"""

import enum
from typing import Any

from pass_search.core.exceptions import InvalidArgumentError

ABSTRACT_ENTITY_NAME = "PassEntity"


class EntityType(enum.Enum):
    """Concrete PASS entity kinds and their index @type tags."""

    CONTRIBUTOR = "Contributor"
    DEPOSIT = "Deposit"
    FILE = "File"
    FUNDER = "Funder"
    GRANT = "Grant"
    JOURNAL = "Journal"
    POLICY = "Policy"
    PUBLICATION = "Publication"
    PUBLISHER = "Publisher"
    REPOSITORY = "Repository"
    REPOSITORY_COPY = "RepositoryCopy"
    SUBMISSION = "Submission"
    SUBMISSION_EVENT = "SubmissionEvent"
    USER = "User"

    @property
    def tag(self) -> str:
        """Value of the @type field for documents of this kind."""
        return self.value

    @classmethod
    def from_name(cls, name: str | None) -> "EntityType | None":
        """Return the entity type whose tag equals ``name``, or None."""
        for member in cls:
            if member.value == name:
                return member
        return None


def entity_kind_name(kind: Any) -> str:
    """
    Name of an entity kind given as an EntityType, a type name or a model class.

    Raises:
        InvalidArgumentError: If no kind is given or it is the abstract base kind
    """
    if kind is None:
        raise InvalidArgumentError("entity type cannot be null", argument="entity_type")

    if isinstance(kind, EntityType):
        name = kind.value
    elif isinstance(kind, str):
        name = kind
    elif isinstance(kind, type):
        name = kind.__name__
    else:
        raise InvalidArgumentError(
            f"Unsupported entity type reference: {kind!r}",
            argument="entity_type",
        )

    if not name:
        raise InvalidArgumentError("entity type cannot be empty", argument="entity_type")
    if name == ABSTRACT_ENTITY_NAME:
        raise InvalidArgumentError(
            f"entity type cannot be the abstract '{ABSTRACT_ENTITY_NAME}' kind",
            argument="entity_type",
        )
    return name


def type_tag_for(kind: Any) -> str | None:
    """
    Resolve an entity kind to its index @type tag.

    Unknown kinds resolve to None so the query is still issued without a
    recognised type.

    Raises:
        InvalidArgumentError: If no kind is given or it is the abstract base kind
    """
    entity_type = EntityType.from_name(entity_kind_name(kind))
    return entity_type.tag if entity_type else None
