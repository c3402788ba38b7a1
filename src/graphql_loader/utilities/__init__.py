"""GraphQL Loader Utilities

The :mod:`graphql_loader.utilities` package contains the merge algorithm for parsed
GraphQL documents and the binding of resolver maps to built schemas.
"""

# Merge documents parsed from different files into one document.
from .merge_documents import (
    merge_documents,
    merge_object_type_definitions,
    merge_schema_definitions,
)

# Attach resolver functions to a built schema.
from .add_resolvers_to_schema import ResolverMap, add_resolvers_to_schema

__all__ = [
    "ResolverMap",
    "add_resolvers_to_schema",
    "merge_documents",
    "merge_object_type_definitions",
    "merge_schema_definitions",
]
