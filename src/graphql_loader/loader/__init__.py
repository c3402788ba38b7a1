"""GraphQL Loader

The :mod:`graphql_loader.loader` package finds schema files with glob patterns,
reads and parses them, and builds schemas from the merged documents.
"""

from .files import (
    read_file,
    read_files,
    read_files_sync,
    resolve_pattern,
    resolve_pattern_sync,
)
from .load import (
    combine_documents,
    load_document,
    load_document_sync,
    load_schema,
    load_schema_sync,
)
from .modules import (
    GraphQLModule,
    GraphQLModuleLike,
    executable_schema_from_modules,
    executable_schema_from_modules_sync,
    to_module,
)

__all__ = [
    "GraphQLModule",
    "GraphQLModuleLike",
    "combine_documents",
    "executable_schema_from_modules",
    "executable_schema_from_modules_sync",
    "load_document",
    "load_document_sync",
    "load_schema",
    "load_schema_sync",
    "read_file",
    "read_files",
    "read_files_sync",
    "resolve_pattern",
    "resolve_pattern_sync",
    "to_module",
]
