"""Merging of GraphQL documents"""

from __future__ import annotations

from copy import copy
from itertools import chain
from logging import getLogger
from typing import TYPE_CHECKING

from graphql.language import DocumentNode

from ..language import (
    DefinitionKind,
    definition_kind,
    definition_name,
    is_schema_definition,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from graphql.language import (
        DefinitionNode,
        ObjectTypeDefinitionNode,
        SchemaDefinitionNode,
    )

__all__ = ["merge_documents"]

logger = getLogger(__name__)


def merge_documents(documents: Collection[DocumentNode]) -> DocumentNode:
    """Merge GraphQL documents.

    Provided a collection of documents, presumably each parsed from different
    files, combine them into one document that behaves as if the whole schema had
    been written in a single file:

    Object type definitions sharing a name are merged into one definition holding
    the fields of all of them, in the order in which they appear. Fields with the
    same name are not de-duplicated.

    Only the first schema definition is kept. Operation types of later schema
    definitions are added to it if it does not declare that operation yet.

    All other definitions are passed through unchanged. They come first in the
    resulting document, followed by the schema definition and finally the merged
    object type definitions.

    The given documents and their nodes are not modified.
    """
    all_definitions: list[DefinitionNode] = list(
        chain.from_iterable(document.definitions for document in documents)
    )

    object_types: dict[str, list[ObjectTypeDefinitionNode]] = {}
    schema_definitions: list[SchemaDefinitionNode] = []
    for definition in all_definitions:
        kind = definition_kind(definition)
        if kind is DefinitionKind.OBJECT_TYPE:
            object_types.setdefault(
                definition.name.value, []  # type: ignore[attr-defined]
            ).append(definition)  # type: ignore[arg-type]
        elif kind is DefinitionKind.SCHEMA:
            schema_definitions.append(definition)  # type: ignore[arg-type]

    duplicates = {
        name: definitions
        for name, definitions in object_types.items()
        if len(definitions) > 1
    }

    definitions: list[DefinitionNode] = [
        definition
        for definition in all_definitions
        if not is_schema_definition(definition)
        and definition_name(definition) not in duplicates
    ]
    if schema_definitions:
        definitions.append(merge_schema_definitions(schema_definitions))
    definitions.extend(
        merge_object_type_definitions(group) for group in duplicates.values()
    )

    if duplicates or len(schema_definitions) > 1:
        logger.debug(
            "Merged %d definitions into %d (types merged: %s, schema definitions: %d).",
            len(all_definitions),
            len(definitions),
            ", ".join(duplicates) or "none",
            len(schema_definitions),
        )

    return DocumentNode(definitions=tuple(definitions))


def merge_object_type_definitions(
    definitions: Sequence[ObjectTypeDefinitionNode],
) -> ObjectTypeDefinitionNode:
    """Merge object type definitions with the same name.

    Returns a copy of the first definition with the fields of all definitions.
    """
    merged = copy(definitions[0])
    merged.fields = tuple(
        chain.from_iterable(definition.fields or () for definition in definitions)
    )
    return merged


def merge_schema_definitions(
    definitions: Sequence[SchemaDefinitionNode],
) -> SchemaDefinitionNode:
    """Merge schema definitions.

    Returns a copy of the first definition, extended by all operation types of the
    other definitions for operations it does not declare yet. If an operation is
    declared more than once, the first declaration wins.
    """
    first = definitions[0]
    operation_types = list(first.operation_types or ())
    operations = {operation_type.operation for operation_type in operation_types}
    for definition in definitions[1:]:
        for operation_type in definition.operation_types or ():
            if operation_type.operation not in operations:
                operations.add(operation_type.operation)
                operation_types.append(operation_type)
    if len(definitions) == 1:
        return first
    merged = copy(first)
    merged.operation_types = tuple(operation_types)
    return merged
