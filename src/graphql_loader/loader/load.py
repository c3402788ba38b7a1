"""Loading GraphQL documents and schemas from files"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from graphql.language import parse
from graphql.utilities import build_ast_schema

from ..pyutils import settle
from ..utilities import merge_documents
from .files import read_files, read_files_sync, resolve_pattern, resolve_pattern_sync

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence

    from graphql.language import DocumentNode
    from graphql.type import GraphQLSchema

    from ..pyutils import Callback
    from .files import StrPath

__all__ = [
    "combine_documents",
    "load_document",
    "load_document_sync",
    "load_schema",
    "load_schema_sync",
]

logger = getLogger(__name__)


def parse_contents(contents: Sequence[str], no_location: bool = False) -> DocumentNode:
    """Parse the concatenated file contents and merge the resulting document."""
    document = parse("".join(contents), no_location=no_location)
    return merge_documents([document])


async def load_document(
    pattern: str,
    callback: Callback[DocumentNode] | None = None,
    *,
    cwd: StrPath | None = None,
    no_location: bool = False,
    **glob_options: Any,
) -> DocumentNode | None:
    """Load a GraphQL document from all files matching a glob pattern.

    The matching files are read concurrently, their contents are concatenated in
    the order of the sorted file paths and parsed as one document. Object type
    definitions spread over several files and multiple schema definitions are
    merged as described in :func:`~graphql_loader.utilities.merge_documents`.

    Accepts the following arguments:

    :arg pattern:
      The glob pattern selecting the schema files, e.g. ``"schema/**/*.graphql"``.
    :arg callback:
      An optional error-first callback. If given, it is called with
      ``(error, document)`` and errors are not raised.
    :arg cwd:
      The directory relative patterns are matched against.
    :arg no_location:
      Do not attach source locations to the parsed nodes.

    Other keyword arguments are passed to :func:`glob.glob`.
    """

    async def load() -> DocumentNode:
        paths = await resolve_pattern(pattern, cwd, **glob_options)
        contents = await read_files(paths)
        return parse_contents(contents, no_location)

    return await settle(load(), callback)


def load_document_sync(
    pattern: str,
    *,
    cwd: StrPath | None = None,
    no_location: bool = False,
    **glob_options: Any,
) -> DocumentNode:
    """Load a GraphQL document from all files matching a glob pattern synchronously.

    Works like :func:`load_document`, but reads the files one after another and
    raises errors immediately.
    """
    paths = resolve_pattern_sync(pattern, cwd, **glob_options)
    return parse_contents(read_files_sync(paths), no_location)


async def load_schema(
    pattern: str,
    callback: Callback[GraphQLSchema] | None = None,
    *,
    cwd: StrPath | None = None,
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
    **glob_options: Any,
) -> GraphQLSchema | None:
    """Load a GraphQL schema from all files matching a glob pattern.

    Loads the merged document with :func:`load_document` and builds the schema
    from it. Set ``assume_valid`` or ``assume_valid_sdl`` to skip validation as
    with :func:`graphql.build_ast_schema`.

    If a callback is given, it is called with ``(error, schema)`` and errors are
    not raised.
    """

    async def load() -> GraphQLSchema:
        document = await load_document(pattern, cwd=cwd, **glob_options)
        return build_ast_schema(
            document,  # type: ignore[arg-type]
            assume_valid=assume_valid,
            assume_valid_sdl=assume_valid_sdl,
        )

    return await settle(load(), callback)


def load_schema_sync(
    pattern: str,
    *,
    cwd: StrPath | None = None,
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
    **glob_options: Any,
) -> GraphQLSchema:
    """Load a GraphQL schema from all files matching a glob pattern synchronously."""
    document = load_document_sync(pattern, cwd=cwd, **glob_options)
    return build_ast_schema(
        document, assume_valid=assume_valid, assume_valid_sdl=assume_valid_sdl
    )


def combine_documents(
    documents: Collection[DocumentNode],
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
) -> GraphQLSchema:
    """Merge the given documents and build a GraphQL schema from the result.

    Duplicate object type definitions are merged by concatenating their fields,
    duplicate schema definitions are merged by adding missing operation types.
    """
    document = merge_documents(documents)
    logger.debug("Building schema from %d documents.", len(documents))
    return build_ast_schema(
        document, assume_valid=assume_valid, assume_valid_sdl=assume_valid_sdl
    )
