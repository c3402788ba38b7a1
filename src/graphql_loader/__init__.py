"""GraphQL-loader

GraphQL-loader loads GraphQL schema definitions spread over many files and merges
them into a single document from which an executable schema is built.

The primary entry points are :func:`load_schema` and :func:`load_document`, which
take a glob pattern, together with their synchronous counterparts
:func:`load_schema_sync` and :func:`load_document_sync`. Already parsed documents
can be merged with :func:`merge_documents` and :func:`combine_documents`, and
:func:`executable_schema_from_modules` builds a schema with resolvers from
separate modules.

Merging follows these rules:

- Object type definitions with the same name are merged into one definition
  holding the fields of all of them.
- Only the first schema definition is kept, extended by the operation types of
  the other schema definitions that it does not declare itself.
- All other definitions are kept as they are.

Parsing and building schemas is done with GraphQL-core.
"""

# The GraphQL-loader version info.
from .version import version, version_info

# Errors raised by the loader.
from .error import GraphQLLoaderError, PatternMatchError, ResolverError

# Classification of definitions.
from .language import DefinitionKind, definition_kind

# Merging documents and attaching resolvers.
from .utilities import ResolverMap, add_resolvers_to_schema, merge_documents

# Loading documents and schemas.
from .loader import (
    GraphQLModule,
    combine_documents,
    executable_schema_from_modules,
    executable_schema_from_modules_sync,
    load_document,
    load_document_sync,
    load_schema,
    load_schema_sync,
)

__all__ = [
    "version",
    "version_info",
    "GraphQLLoaderError",
    "PatternMatchError",
    "ResolverError",
    "DefinitionKind",
    "definition_kind",
    "ResolverMap",
    "add_resolvers_to_schema",
    "merge_documents",
    "GraphQLModule",
    "combine_documents",
    "executable_schema_from_modules",
    "executable_schema_from_modules_sync",
    "load_document",
    "load_document_sync",
    "load_schema",
    "load_schema_sync",
]
