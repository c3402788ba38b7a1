from typing import Any, List, Tuple

import pytest

from graphql import graphql_sync
from graphql.error import GraphQLSyntaxError
from graphql.language import DocumentNode, parse, print_ast
from graphql.type import GraphQLSchema
from graphql.utilities import print_schema

from graphql_loader.error import PatternMatchError
from graphql_loader.loader import (
    combine_documents,
    load_document,
    load_document_sync,
    load_schema,
    load_schema_sync,
)

from ..fixtures import fixtures_path, invalid_schema_pattern, schema_pattern
from ..utils import definition_names, field_names, operation_types

zero_match_pattern = "./error/*.graphql"

zero_match_message = 'The glob pattern "./error/\\*.graphql" has zero matches'

unknown_type_message = "Unknown type .Post.\\."


def assert_fixture_schema(schema: GraphQLSchema) -> None:
    assert isinstance(schema, GraphQLSchema)
    assert schema.query_type.name == "Query"
    assert schema.mutation_type.name == "Mutation"
    assert schema.subscription_type is None
    assert list(schema.query_type.fields) == ["user", "users"]
    assert list(schema.mutation_type.fields) == ["createUser"]
    user_type = schema.get_type("User")
    assert user_type.description == "A registered user"
    assert list(user_type.fields) == ["id", "name", "role"]
    assert list(schema.get_type("Role").values) == ["ADMIN", "MEMBER"]


def collect_calls():
    calls: List[Tuple[Any, Any]] = []

    def callback(error, result):
        calls.append((error, result))

    return calls, callback


def describe_load_document_sync():
    def loads_and_merges_all_matching_files():
        document = load_document_sync(schema_pattern, cwd=fixtures_path)
        assert isinstance(document, DocumentNode)
        assert definition_names(document) == [
            ("object_type_definition", "Mutation"),
            ("object_type_definition", "User"),
            ("enum_type_definition", "Role"),
            ("schema_definition", None),
            ("object_type_definition", "Query"),
        ]
        assert operation_types(document.definitions[3]) == [
            ("mutation", "Mutation"),
            ("query", "Query"),
        ]
        assert field_names(document.definitions[4]) == ["user", "users"]

    def can_omit_locations():
        document = load_document_sync(
            schema_pattern, cwd=fixtures_path, no_location=True
        )
        assert document.definitions[0].loc is None

    def raises_when_nothing_matches():
        with pytest.raises(PatternMatchError, match=zero_match_message):
            load_document_sync(zero_match_pattern, cwd=fixtures_path)

    def raises_syntax_errors(write_files):
        root = write_files({"broken.graphql": "type Query {"})
        with pytest.raises(GraphQLSyntaxError):
            load_document_sync("*.graphql", cwd=root)

    def concatenates_files_without_separators(write_files):
        root = write_files(
            {"a.graphql": "type A { a: Int }", "b.graphql": "type B { b: Int }"}
        )
        document = load_document_sync("*.graphql", cwd=root)
        source = document.definitions[0].loc.source
        assert source.body == "type A { a: Int }type B { b: Int }"


def describe_load_document():
    @pytest.mark.asyncio
    async def loads_like_the_sync_version():
        document = await load_document(schema_pattern, cwd=fixtures_path)
        expected = load_document_sync(schema_pattern, cwd=fixtures_path)
        assert print_ast(document) == print_ast(expected)

    @pytest.mark.asyncio
    async def passes_the_document_to_a_callback():
        calls, callback = collect_calls()
        document = await load_document(schema_pattern, callback, cwd=fixtures_path)
        assert calls == [(None, document)]
        assert isinstance(document, DocumentNode)

    @pytest.mark.asyncio
    async def raises_when_nothing_matches():
        with pytest.raises(PatternMatchError, match=zero_match_message):
            await load_document(zero_match_pattern, cwd=fixtures_path)

    @pytest.mark.asyncio
    async def passes_errors_to_a_callback():
        calls, callback = collect_calls()
        result = await load_document(zero_match_pattern, callback, cwd=fixtures_path)
        assert result is None
        ((error, document),) = calls
        assert isinstance(error, PatternMatchError)
        assert error.pattern == zero_match_pattern
        assert document is None


def describe_load_schema_sync():
    def builds_a_schema_from_all_matching_files():
        schema = load_schema_sync(schema_pattern, cwd=fixtures_path)
        assert_fixture_schema(schema)

    def builds_a_schema_from_types_split_over_files(write_files):
        root = write_files(
            {
                "a.graphql": "type Query { hello: String }\n",
                "b.graphql": "type Query { world: String } schema { query: Query }\n",
            }
        )
        schema = load_schema_sync("*.graphql", cwd=root)
        assert schema.query_type.name == "Query"
        assert list(schema.query_type.fields) == ["hello", "world"]

    def raises_when_nothing_matches():
        with pytest.raises(PatternMatchError, match=zero_match_message):
            load_schema_sync(zero_match_pattern, cwd=fixtures_path)

    def raises_when_the_schema_is_invalid():
        with pytest.raises(TypeError, match=unknown_type_message):
            load_schema_sync(invalid_schema_pattern, cwd=fixtures_path)

    def can_skip_validation():
        schema = load_schema_sync(
            schema_pattern, cwd=fixtures_path, assume_valid=True
        )
        assert schema.query_type.name == "Query"

    def raises_when_a_file_cannot_be_read(write_files):
        root = write_files({"a.graphql": "type Query { a: Int }"})
        (root / "dir.graphql").mkdir()
        with pytest.raises(OSError):
            load_schema_sync("*.graphql", cwd=root)


def describe_load_schema():
    @pytest.mark.asyncio
    async def builds_a_schema_from_all_matching_files():
        schema = await load_schema(schema_pattern, cwd=fixtures_path)
        assert_fixture_schema(schema)

    @pytest.mark.asyncio
    async def passes_the_schema_to_a_callback():
        calls, callback = collect_calls()
        schema = await load_schema(schema_pattern, callback, cwd=fixtures_path)
        ((error, cb_schema),) = calls
        assert error is None
        assert cb_schema is schema
        assert_fixture_schema(cb_schema)

    @pytest.mark.asyncio
    async def yields_equal_schemas_via_callback_and_awaiting():
        calls, callback = collect_calls()
        await load_schema(schema_pattern, callback, cwd=fixtures_path)
        ((_error, cb_schema),) = calls
        schema = await load_schema(schema_pattern, cwd=fixtures_path)
        assert print_schema(cb_schema) == print_schema(schema)
        assert print_schema(schema) == print_schema(
            load_schema_sync(schema_pattern, cwd=fixtures_path)
        )

    @pytest.mark.asyncio
    async def raises_when_nothing_matches():
        with pytest.raises(PatternMatchError, match=zero_match_message):
            await load_schema(zero_match_pattern, cwd=fixtures_path)

    @pytest.mark.asyncio
    async def passes_zero_match_errors_to_a_callback():
        calls, callback = collect_calls()
        await load_schema(zero_match_pattern, callback, cwd=fixtures_path)
        ((error, schema),) = calls
        assert isinstance(error, PatternMatchError)
        assert str(error) == 'The glob pattern "./error/*.graphql" has zero matches'
        assert schema is None

    @pytest.mark.asyncio
    async def raises_when_the_schema_is_invalid():
        with pytest.raises(TypeError, match=unknown_type_message):
            await load_schema(invalid_schema_pattern, cwd=fixtures_path)

    @pytest.mark.asyncio
    async def passes_schema_errors_to_a_callback():
        calls, callback = collect_calls()
        await load_schema(invalid_schema_pattern, callback, cwd=fixtures_path)
        ((error, schema),) = calls
        assert isinstance(error, TypeError)
        assert "Post" in str(error)
        assert schema is None

    @pytest.mark.asyncio
    async def raises_when_a_file_cannot_be_read(write_files):
        root = write_files({"a.graphql": "type Query { a: Int }"})
        (root / "dir.graphql").mkdir()
        with pytest.raises(OSError):
            await load_schema("*.graphql", cwd=root)

    @pytest.mark.asyncio
    async def passes_read_errors_to_a_callback(write_files):
        root = write_files({"a.graphql": "type Query { a: Int }"})
        (root / "dir.graphql").mkdir()
        calls, callback = collect_calls()
        await load_schema("*.graphql", callback, cwd=root)
        ((error, schema),) = calls
        assert isinstance(error, OSError)
        assert schema is None


def describe_combine_documents():
    def builds_a_schema_from_merged_documents():
        schema = combine_documents(
            [
                parse("type Query { a: String } schema { query: Query }"),
                parse("type Mutation { b: String } schema { mutation: Mutation }"),
                parse("type Query { c: String }"),
            ]
        )
        assert schema.query_type.name == "Query"
        assert schema.mutation_type.name == "Mutation"
        assert list(schema.query_type.fields) == ["a", "c"]

    def builds_an_executable_schema():
        schema = combine_documents(
            [parse("type Query { a: String }"), parse("type Query { b: String }")]
        )
        root_value = {"a": "A", "b": "B"}
        assert graphql_sync(schema, "{ a b }", root_value) == (
            {"a": "A", "b": "B"},
            None,
        )

    def raises_when_a_root_type_is_missing():
        with pytest.raises(TypeError, match="Unknown type .Q."):
            combine_documents([parse("schema { query: Q }")])
