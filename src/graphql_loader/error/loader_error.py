"""GraphQL Loader Error"""

from __future__ import annotations

__all__ = ["GraphQLLoaderError", "PatternMatchError", "ResolverError"]


class GraphQLLoaderError(Exception):
    """Base class for all errors raised by the GraphQL loader."""

    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    @classmethod
    def zero_match_error(cls, pattern: str) -> PatternMatchError:
        """Create the error for a glob pattern that did not match any file."""
        return PatternMatchError(pattern)


class PatternMatchError(GraphQLLoaderError):
    """A glob pattern matched zero files."""

    pattern: str

    def __init__(self, pattern: str) -> None:
        super().__init__(f'The glob pattern "{pattern}" has zero matches')
        self.pattern = pattern


class ResolverError(GraphQLLoaderError):
    """A resolver map does not fit the schema it is attached to."""
