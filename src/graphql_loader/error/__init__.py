"""GraphQL Loader Errors

The :mod:`graphql_loader.error` package contains the errors raised while locating
schema files and while binding resolvers to a built schema. Errors coming from the
file system, the parser or the schema builder are never wrapped.
"""

from .loader_error import GraphQLLoaderError, PatternMatchError, ResolverError

__all__ = ["GraphQLLoaderError", "PatternMatchError", "ResolverError"]
