"""Tests for graphql_to_ts.codegen.core.schema."""

from __future__ import annotations

import pytest
from graphql import GraphQLError

from graphql_to_ts.codegen.core.schema import (
    EnumDeclaration,
    EnumValue,
    Field,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ListType,
    NamedType,
    NonNullType,
    ObjectDeclaration,
    ScalarDeclaration,
    SchemaParseError,
    UnionDeclaration,
    is_root_operation_type,
    parse_schema,
    unwrap_named_type,
)


def test_parse_schema_keeps_file_order(sample_schema: str) -> None:
    declarations = parse_schema(sample_schema)

    assert [type(d) for d in declarations] == [
        ScalarDeclaration,
        ScalarDeclaration,
        EnumDeclaration,
        InterfaceDeclaration,
        ObjectDeclaration,
        ObjectDeclaration,
        UnionDeclaration,
        InputObjectDeclaration,
        ObjectDeclaration,
        ObjectDeclaration,
    ]
    assert [d.name for d in declarations] == [
        "DateTime",
        "Money",
        "Role",
        "Node",
        "User",
        "Post",
        "SearchResult",
        "NewUser",
        "Query",
        "Mutation",
    ]


def test_parse_schema_descriptions(sample_schema: str) -> None:
    declarations = {d.name: d for d in parse_schema(sample_schema)}

    assert declarations["DateTime"].description == "A point in time"
    assert declarations["Money"].description is None
    assert declarations["Role"].values == (
        EnumValue("ADMIN", "Full access"),
        EnumValue("USER", None),
    )
    assert declarations["User"].description == "A registered user"
    assert declarations["User"].fields[0] == Field(
        "id", NonNullType(NamedType("ID")), "Unique id"
    )


def test_parse_schema_type_refs(sample_schema: str) -> None:
    user = next(d for d in parse_schema(sample_schema) if d.name == "User")
    fields = {f.name: f.type for f in user.fields}

    assert fields["name"] == NamedType("String")
    assert fields["tags"] == NonNullType(ListType(NonNullType(NamedType("String"))))
    assert fields["friends"] == ListType(NamedType("User"))


def test_union_members_in_order(sample_schema: str) -> None:
    union = next(d for d in parse_schema(sample_schema) if d.name == "SearchResult")
    assert union.members == ("User", "Post")


def test_empty_union_is_allowed() -> None:
    [union] = parse_schema("union Nothing")
    assert union == UnionDeclaration("Nothing", None, ())


@pytest.mark.parametrize("text", ["", "   \n\t  "])
def test_blank_schema_has_no_declarations(text: str) -> None:
    assert parse_schema(text) == []


def test_empty_description_is_none() -> None:
    [scalar] = parse_schema('"" scalar Upload')
    assert scalar.description is None


def test_operations_and_extensions_are_ignored() -> None:
    declarations = parse_schema(
        """
        schema { query: Query }
        directive @auth on FIELD_DEFINITION
        type Query { me: User }
        extend type Query { other: Int }
        query Me { me { id } }
        fragment UserBits on User { id }
        """
    )

    assert len(declarations) == 1
    assert declarations[0].name == "Query"


def test_fields_without_braces() -> None:
    [obj] = parse_schema("type Empty")
    assert obj == ObjectDeclaration("Empty", None, ())


@pytest.mark.parametrize(
    "text",
    [
        "type User {",
        "type User { id: }",
        "enum Role { ADMIN",
        "union = A | B",
        "type User { id: ID!! }",
    ],
)
def test_malformed_schema_raises(text: str) -> None:
    with pytest.raises(SchemaParseError) as exc_info:
        parse_schema(text)

    assert str(exc_info.value).startswith("Error parsing GraphQL schema: Syntax Error")
    assert isinstance(exc_info.value.__cause__, GraphQLError)


def test_is_root_operation_type() -> None:
    assert is_root_operation_type(ObjectDeclaration("Query"))
    assert is_root_operation_type(ObjectDeclaration("Mutation"))
    assert is_root_operation_type(ObjectDeclaration("Subscription"))
    assert not is_root_operation_type(ObjectDeclaration("QueryResult"))
    assert not is_root_operation_type(InterfaceDeclaration("Query"))


def test_unwrap_named_type() -> None:
    assert unwrap_named_type(NonNullType(ListType(NonNullType(NamedType("User"))))) == "User"
    assert unwrap_named_type(NamedType("Int")) == "Int"
