"""
Query string construction for the PASS index.

Turns attribute/value predicates plus an entity @type tag into a single
Elasticsearch query_string query, e.g.

    (@type:Submission  AND submitter:http\\:\\/\\/example.org\\/users\\/1)

Only ':' and '/' are escaped in values. Other query_string reserved
characters (+ - = && || > < ! ( ) { } [ ] ^ " ~ * ? \\) pass through
unchanged so that stored queries keep their current matching behaviour.

Dependencies: pass_search.models.search_schemas, pass_search.core.exceptions
System role: Pure query construction, no I/O
"""

from collections.abc import Mapping
from typing import Any

from pass_search.core.exceptions import InvalidArgumentError
from pass_search.models.search_schemas import Predicate

# e.g. " AND fldname:something"
ATTRIBUTE_TEMPLATE = " AND {attribute}:{value}"

# e.g. "(@type:Submission  AND fldname:something)", clauses may hold several attributes
QUERY_TEMPLATE = "(@type:{type_tag} {clauses})"

EXISTS_TEMPLATE = "_exists_:{attribute}"

NOT_EXISTS_TEMPLATE = "-" + EXISTS_TEMPLATE

ATTRIBUTE_NOT_EXISTS_TEMPLATE = " AND " + NOT_EXISTS_TEMPLATE

ESCAPED_CHARACTERS = (":", "/")

ESCAPE = "\\"


def _replace_all(value: str, looking_for: str, replacement: str) -> str:
    parts: list[str] = []
    cursor = 0
    idx = value.find(looking_for, cursor)
    while idx > -1:
        parts.append(value[cursor:idx])
        parts.append(replacement)
        # resume after the match; the inserted replacement is never rescanned
        cursor = idx + len(looking_for)
        idx = value.find(looking_for, cursor)
    parts.append(value[cursor:])
    return "".join(parts)


def escape_value(value: str) -> str:
    """
    Escape reserved characters in a predicate value.

    Every ':' and '/' gets a preceding backslash. Already escaped input is
    not detected: 'val\\:ue' becomes 'val\\\\:ue'.

    Args:
        value: Raw value, not escaped yet

    Returns:
        str: Value safe to place after 'attribute:' in a query string
    """
    for looking_for in ESCAPED_CHARACTERS:
        value = _replace_all(value, looking_for, ESCAPE + looking_for)
    return value


def build_predicate_clause(attribute_name: str, value: Any = None) -> str:
    """
    Build the ' AND attribute:value' portion of a query.

    A None value renders the field-absence form ' AND -_exists_:attribute'.

    Args:
        attribute_name: Indexed field name
        value: Scalar value (escaped here), or None

    Returns:
        str: Predicate clause, starting with ' AND '

    Raises:
        InvalidArgumentError: If the attribute is empty or the value is a collection
    """
    predicate = Predicate.of(attribute_name, value)
    if predicate.is_absence:
        return ATTRIBUTE_NOT_EXISTS_TEMPLATE.format(attribute=predicate.attribute_name)
    return ATTRIBUTE_TEMPLATE.format(
        attribute=predicate.attribute_name,
        value=escape_value(predicate.rendered_value),
    )


def build_predicate_clauses(predicates: Mapping[str, Any]) -> str:
    """
    Build the clauses for several predicates, in the mapping's iteration order.

    Raises:
        InvalidArgumentError: If the mapping is empty or any entry is invalid
    """
    if not predicates:
        raise InvalidArgumentError("predicates cannot be empty", argument="predicates")
    return "".join(
        build_predicate_clause(attribute_name, value)
        for attribute_name, value in predicates.items()
    )


def build_query(entity_type_tag: str | None, predicate_clauses: str) -> str:
    """Wrap predicate clauses and the @type tag into the final query string."""
    return QUERY_TEMPLATE.format(
        type_tag=entity_type_tag or "",
        clauses=predicate_clauses,
    )
