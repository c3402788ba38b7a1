"""Definition kinds relevant to merging"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from graphql.language import ObjectTypeDefinitionNode, SchemaDefinitionNode

if TYPE_CHECKING:
    from graphql.language import DefinitionNode

__all__ = [
    "DefinitionKind",
    "definition_kind",
    "definition_name",
    "is_schema_definition",
]


class DefinitionKind(Enum):
    """The kinds of definitions that are told apart when merging documents."""

    OBJECT_TYPE = "object_type"
    SCHEMA = "schema"
    OTHER = "other"


def definition_kind(node: DefinitionNode) -> DefinitionKind:
    """Get the kind of the given definition node.

    Only object type definitions and schema definitions take part in merging.
    Extensions of these are not merged and count as other definitions.
    """
    if isinstance(node, ObjectTypeDefinitionNode):
        return DefinitionKind.OBJECT_TYPE
    if isinstance(node, SchemaDefinitionNode):
        return DefinitionKind.SCHEMA
    return DefinitionKind.OTHER


def definition_name(node: DefinitionNode) -> str | None:
    """Get the name of the given definition node if it has one."""
    name = getattr(node, "name", None)
    return name.value if name else None


def is_schema_definition(node: DefinitionNode) -> bool:
    """Check whether the given node is a schema definition."""
    return definition_kind(node) is DefinitionKind.SCHEMA
