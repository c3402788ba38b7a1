"""Building executable schemas from GraphQL modules"""

from __future__ import annotations

from asyncio import Future, ensure_future, gather
from collections.abc import Mapping
from functools import reduce
from inspect import isawaitable
from logging import getLogger
from typing import TYPE_CHECKING, Any, Awaitable, Callable, NamedTuple, Union

from graphql.language import DocumentNode

from ..pyutils import deep_merge, settle
from ..utilities import add_resolvers_to_schema
from .load import combine_documents

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphql.type import GraphQLSchema

    from ..pyutils import Callback
    from ..utilities import ResolverMap

__all__ = [
    "GraphQLModule",
    "GraphQLModuleLike",
    "executable_schema_from_modules",
    "executable_schema_from_modules_sync",
    "to_module",
]

logger = getLogger(__name__)


class GraphQLModule(NamedTuple):
    """A part of a schema: a document with the resolvers for its types."""

    document: DocumentNode
    resolvers: ResolverMap | None = None


ModuleValue = Union[GraphQLModule, DocumentNode, Mapping[str, Any]]

GraphQLModuleLike = Union[
    ModuleValue,
    Awaitable[ModuleValue],
    Callable[[], Union[ModuleValue, Awaitable[ModuleValue]]],
]


def to_module(value: Any) -> GraphQLModule:
    """Convert a module given as document, mapping or module into a module."""
    if isinstance(value, GraphQLModule):
        return value
    if isinstance(value, DocumentNode):
        return GraphQLModule(value)
    if isinstance(value, Mapping) and isinstance(value.get("document"), DocumentNode):
        return GraphQLModule(value["document"], value.get("resolvers"))
    raise TypeError(f"Expected a GraphQL module, but got {value!r}.")


def produce_module(module: GraphQLModuleLike) -> Any:
    """Call the module if it is a producer and return its value or awaitable."""
    if callable(module):
        return module()
    return module


def discard_awaitables(values: Sequence[Any]) -> None:
    """Close coroutines and cancel futures that will not be awaited any more."""
    for value in values:
        if isinstance(value, Future):
            value.cancel()
        elif isawaitable(value):
            close = getattr(value, "close", None)
            if callable(close):
                close()


async def produce_modules(modules: Sequence[GraphQLModuleLike]) -> list[Any]:
    """Produce all modules concurrently and return their values in order.

    If producing a module fails, awaitables produced so far are discarded and the
    pending ones are cancelled before the first error is raised.
    """
    values: list[Any] = []
    try:
        for module in modules:
            values.append(produce_module(module))
    except Exception:
        discard_awaitables(values)
        raise
    futures = {
        index: ensure_future(value)
        for index, value in enumerate(values)
        if isawaitable(value)
    }
    try:
        await gather(*futures.values())
    except Exception:
        for future in futures.values():
            if not future.done():
                future.cancel()
        await gather(*futures.values(), return_exceptions=True)
        raise
    for index, future in futures.items():
        values[index] = future.result()
    return values


def build_from_modules(modules: Sequence[GraphQLModule]) -> GraphQLSchema:
    schema = combine_documents([module.document for module in modules])
    resolvers: ResolverMap = reduce(
        deep_merge, (module.resolvers or {} for module in modules), {}
    )
    logger.debug(
        "Built schema from %d modules with resolvers for %d types.",
        len(modules),
        len(resolvers),
    )
    return add_resolvers_to_schema(schema, resolvers)


async def executable_schema_from_modules(
    modules: Sequence[GraphQLModuleLike],
    callback: Callback[GraphQLSchema] | None = None,
) -> GraphQLSchema | None:
    """Build an executable GraphQL schema from GraphQL modules.

    A module can be given as a :class:`GraphQLModule`, as a mapping with the keys
    ``document`` and ``resolvers``, as a bare document, as an awaitable of one of
    these, or as a function without arguments returning one of these or an
    awaitable of one of these.

    All modules are produced concurrently. If producing any of them fails, the
    error is propagated and no schema is built. The documents of all modules are
    merged, the resolver maps are deep merged in the given order, so later modules
    override the resolvers of earlier ones, and the resolvers are attached to the
    schema built from the merged document.

    If a callback is given, it is called with ``(error, schema)`` and errors are
    not raised.
    """

    async def build() -> GraphQLSchema:
        values = await produce_modules(modules)
        return build_from_modules([to_module(value) for value in values])

    return await settle(build(), callback)


def executable_schema_from_modules_sync(
    modules: Sequence[GraphQLModuleLike],
) -> GraphQLSchema:
    """Build an executable GraphQL schema from GraphQL modules synchronously.

    Works like :func:`executable_schema_from_modules`, but raises a RuntimeError
    if a module can only be produced asynchronously.
    """
    values: list[Any] = []
    for module in modules:
        value = produce_module(module)
        if isawaitable(value):
            discard_awaitables([value])
            raise RuntimeError("GraphQL module failed to load synchronously.")
        values.append(value)
    return build_from_modules([to_module(value) for value in values])
