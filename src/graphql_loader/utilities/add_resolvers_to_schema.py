"""Binding of resolver maps to a schema"""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import Any, Dict

from graphql.type import (
    GraphQLEnumType,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    GraphQLUnionType,
)

from ..error import ResolverError

__all__ = ["add_resolvers_to_schema", "ResolverMap"]

logger = getLogger(__name__)

ResolverMap = Dict[str, Any]

IS_TYPE_OF_KEYS = ("__is_type_of", "__isTypeOf")
RESOLVE_TYPE_KEYS = ("__resolve_type", "__resolveType")
SCALAR_KEYS = ("serialize", "parse_value", "parse_literal")


def add_resolvers_to_schema(
    schema: GraphQLSchema, resolvers: ResolverMap
) -> GraphQLSchema:
    """Attach the functions of a resolver map to the given schema.

    The resolver map is a mapping from type names to a mapping from field names to
    resolver functions. Instead of a function, a field can also be given a mapping
    with the keys ``resolve`` and ``subscribe``.

    For object types, the special keys ``__is_type_of`` and ``__resolve_type`` set
    the ``is_type_of`` and ``resolve_type`` functions. Interface types and union
    types accept ``__resolve_type``. Enum types are given a mapping from enum value
    names to internal values, scalar types are given either a scalar type or a
    mapping with ``serialize``, ``parse_value`` and ``parse_literal`` functions.

    The schema is modified in place and returned.
    """
    for type_name, type_resolvers in resolvers.items():
        type_ = schema.get_type(type_name)
        if type_ is None:
            raise ResolverError(
                f'"{type_name}" defined in resolvers, but not in schema.'
            )
        if isinstance(type_, GraphQLScalarType):
            add_scalar_resolvers(type_, type_resolvers)
            continue
        if not isinstance(type_resolvers, Mapping):
            raise ResolverError(
                f'Resolvers for "{type_name}" must be given as a mapping.'
            )
        if isinstance(type_, (GraphQLObjectType, GraphQLInterfaceType)):
            add_field_resolvers(type_, type_resolvers)
        elif isinstance(type_, GraphQLUnionType):
            add_union_resolvers(type_, type_resolvers)
        elif isinstance(type_, GraphQLEnumType):
            add_enum_values(type_, type_resolvers)
        else:
            raise ResolverError(f'"{type_name}" cannot have resolvers.')
        logger.debug("Added resolvers for type %s.", type_name)
    return schema


def add_field_resolvers(
    type_: GraphQLObjectType | GraphQLInterfaceType, resolvers: Mapping[str, Any]
) -> None:
    fields = type_.fields
    for field_name, resolver in resolvers.items():
        if field_name in RESOLVE_TYPE_KEYS:
            if not isinstance(type_, GraphQLInterfaceType):
                raise ResolverError(
                    f'"{type_.name}" is not an abstract type'
                    f" and cannot have {field_name}."
                )
            type_.resolve_type = resolver
        elif field_name in IS_TYPE_OF_KEYS:
            if not isinstance(type_, GraphQLObjectType):
                raise ResolverError(
                    f'"{type_.name}" is not an object type'
                    f" and cannot have {field_name}."
                )
            type_.is_type_of = resolver
        else:
            field = fields.get(field_name)
            if field is None:
                raise ResolverError(
                    f"{type_.name}.{field_name} defined in resolvers,"
                    " but not in schema."
                )
            if isinstance(resolver, Mapping):
                if "resolve" in resolver:
                    field.resolve = resolver["resolve"]
                if "subscribe" in resolver:
                    field.subscribe = resolver["subscribe"]
            elif callable(resolver):
                field.resolve = resolver
            else:
                raise ResolverError(
                    f"Resolver for {type_.name}.{field_name} must be a function."
                )


def add_union_resolvers(
    type_: GraphQLUnionType, resolvers: Mapping[str, Any]
) -> None:
    for key, resolver in resolvers.items():
        if key not in RESOLVE_TYPE_KEYS:
            raise ResolverError(
                f'Union "{type_.name}" only accepts __resolve_type, not {key}.'
            )
        type_.resolve_type = resolver


def add_enum_values(type_: GraphQLEnumType, values: Mapping[str, Any]) -> None:
    for value_name, value in values.items():
        enum_value = type_.values.get(value_name)
        if enum_value is None:
            raise ResolverError(
                f"{type_.name}.{value_name} defined in resolvers,"
                " but not in schema."
            )
        enum_value.value = value


def add_scalar_resolvers(type_: GraphQLScalarType, resolvers: Any) -> None:
    for key in SCALAR_KEYS:
        if isinstance(resolvers, GraphQLScalarType):
            # the default implementations of a scalar type are methods
            value = resolvers.__dict__.get(key)
        elif isinstance(resolvers, Mapping):
            value = resolvers.get(key)
        else:
            raise ResolverError(
                f'Resolvers for scalar "{type_.name}" must be given'
                " as a scalar type or a mapping."
            )
        if value is not None:
            setattr(type_, key, value)
    if isinstance(resolvers, Mapping):
        unknown = [key for key in resolvers if key not in SCALAR_KEYS]
        if unknown:
            raise ResolverError(
                f'Scalar "{type_.name}" does not accept {", ".join(unknown)}.'
            )
