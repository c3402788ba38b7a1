"""GraphQL Loader Language

The :mod:`graphql_loader.language` package classifies the definitions of a parsed
GraphQL document with respect to merging.
"""

from .definition_kind import (
    DefinitionKind,
    definition_kind,
    definition_name,
    is_schema_definition,
)

__all__ = [
    "DefinitionKind",
    "definition_kind",
    "definition_name",
    "is_schema_definition",
]
