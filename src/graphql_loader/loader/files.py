"""Resolving glob patterns and reading schema files"""

from __future__ import annotations

from asyncio import gather, get_running_loop
from functools import partial
from glob import glob
from logging import getLogger
from os import PathLike, fspath
from os.path import join
from typing import TYPE_CHECKING, Any, Union

from ..error import GraphQLLoaderError

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "StrPath",
    "read_file",
    "read_files",
    "read_files_sync",
    "resolve_pattern",
    "resolve_pattern_sync",
]

logger = getLogger(__name__)

StrPath = Union[str, "PathLike[str]"]


def resolve_pattern_sync(
    pattern: str, cwd: StrPath | None = None, **glob_options: Any
) -> list[str]:
    """Get the paths of all files matching the given glob pattern.

    Patterns are matched recursively, so ``**`` matches any number of directories.
    If ``cwd`` is given, relative patterns are matched against that directory and
    the returned paths are joined onto it. Additional keyword arguments are passed
    to :func:`glob.glob`. The paths are returned in sorted order.

    Raises a :class:`~graphql_loader.error.PatternMatchError` if the pattern
    does not match any file.
    """
    glob_options.setdefault("recursive", True)
    if cwd is None:
        paths = glob(pattern, **glob_options)
    else:
        root = fspath(cwd)
        paths = [
            join(root, path)
            for path in glob(pattern, root_dir=root, **glob_options)
        ]
    if not paths:
        raise GraphQLLoaderError.zero_match_error(pattern)
    paths.sort()
    logger.debug("Pattern %r matched %d files.", pattern, len(paths))
    return paths


async def resolve_pattern(
    pattern: str, cwd: StrPath | None = None, **glob_options: Any
) -> list[str]:
    """Get the paths of all files matching the given glob pattern asynchronously.

    Same as :func:`resolve_pattern_sync`, but scans the file system in the default
    executor of the running event loop.
    """
    loop = get_running_loop()
    return await loop.run_in_executor(
        None, partial(resolve_pattern_sync, pattern, cwd, **glob_options)
    )


def read_file(path: StrPath) -> str:
    """Read the text of the file with the given path."""
    with open(path, encoding="utf-8") as file:
        return file.read()


def read_files_sync(paths: Sequence[StrPath]) -> list[str]:
    """Read the given files one after another.

    The first error raised while reading a file is propagated unchanged.
    """
    return [read_file(path) for path in paths]


async def read_files(paths: Sequence[StrPath]) -> list[str]:
    """Read the given files concurrently.

    The contents are returned in the order of the given paths. The first error
    raised while reading a file is propagated unchanged; the other reads are not
    awaited any more in that case, but also not cancelled.
    """
    loop = get_running_loop()
    return list(
        await gather(*(loop.run_in_executor(None, read_file, path) for path in paths))
    )
