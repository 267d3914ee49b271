"""Tests for the TypeScript generator."""

from __future__ import annotations

import re

import pytest

from graphql_to_ts.codegen.core.config import ConversionOptions
from graphql_to_ts.codegen.core.schema import (
    EnumDeclaration,
    EnumValue,
    Field,
    NamedType,
    ObjectDeclaration,
    SchemaParseError,
    parse_schema,
)
from graphql_to_ts.codegen.languages.typescript import (
    convert_graphql_to_typescript,
    create_typescript_generator,
)
from graphql_to_ts.codegen.languages.typescript.generator import iso_timestamp

from .conftest import HEADER


def render(make_generator, schema: str, **options) -> str:
    generator = make_generator(**options)
    return generator.format_code(generator.generate(parse_schema(schema)))


class TestFullDocument:
    def test_sample_schema(self, make_generator, sample_schema: str) -> None:
        expected = "\n\n".join(
            [
                HEADER,
                "/** A point in time */\nexport type DateTime = unknown;",
                "export type Money = unknown;",
                "/** Account role */\n"
                "export enum Role {\n"
                "  /** Full access */\n"
                '  ADMIN = "ADMIN",\n'
                '  USER = "USER",\n'
                "}",
                "export interface Node {\n  id: string;\n}",
                "/** A registered user */\n"
                "export interface User {\n"
                "  /** Unique id */\n"
                "  id: string;\n"
                "  name?: string;\n"
                "  role: Role;\n"
                "  tags: string[];\n"
                "  friends?: User[];\n"
                "  balance?: Money;\n"
                "}",
                "export interface Post {\n  id: string;\n  author: User;\n}",
                "export type SearchResult = User | Post;",
                "export interface NewUser {\n  name: string;\n  role?: Role;\n}",
            ]
        )

        assert render(make_generator, sample_schema) == expected

    def test_without_comments(self, make_generator, sample_schema: str) -> None:
        output = render(make_generator, sample_schema, include_comments=False)

        assert output.startswith("export type DateTime = unknown;")
        assert "/**" not in output
        assert "Generated on" not in output

    def test_blank_schema_with_comments_is_header_only(self, make_generator) -> None:
        assert render(make_generator, "") == HEADER

    def test_blank_schema_without_comments_is_empty(self, make_generator) -> None:
        assert render(make_generator, "", include_comments=False) == ""

    def test_output_is_deterministic(self, make_generator, sample_schema: str) -> None:
        first = render(make_generator, sample_schema, type_prefix="I")
        second = render(make_generator, sample_schema, type_prefix="I")
        assert first == second


class TestRootTypes:
    @pytest.mark.parametrize("name", ["Query", "Mutation", "Subscription"])
    @pytest.mark.parametrize("enums_as_const", [False, True])
    def test_root_types_are_skipped(self, make_generator, name: str, enums_as_const: bool) -> None:
        output = render(
            make_generator,
            f"type {name} {{ a: Int }}",
            include_comments=False,
            type_prefix="P",
            enums_as_const=enums_as_const,
        )
        assert output == ""

    def test_similar_names_are_emitted(self, make_generator) -> None:
        output = render(make_generator, "type QueryResult { a: Int }", include_comments=False)
        assert output == "export interface QueryResult {\n  a?: number;\n}"

    def test_root_named_interface_is_emitted(self, make_generator) -> None:
        output = render(make_generator, "interface Query { a: Int }", include_comments=False)
        assert output == "export interface Query {\n  a?: number;\n}"


class TestEnums:
    SCHEMA = "enum Letter { A B }"

    def test_enum_block(self, make_generator) -> None:
        output = render(make_generator, self.SCHEMA, include_comments=False)
        assert output == 'export enum Letter {\n  A = "A",\n  B = "B",\n}'

    def test_enum_as_const(self, make_generator) -> None:
        output = render(make_generator, self.SCHEMA, include_comments=False, enums_as_const=True)
        assert output == (
            "export const Letter = {\n"
            '  A: "A",\n'
            '  B: "B",\n'
            "} as const;\n"
            "\n"
            "export type Letter = typeof Letter[keyof typeof Letter];"
        )

    @pytest.mark.parametrize("enums_as_const", [False, True])
    def test_both_forms_contain_literals(self, make_generator, enums_as_const: bool) -> None:
        output = render(make_generator, self.SCHEMA, enums_as_const=enums_as_const)
        assert '"A"' in output
        assert '"B"' in output

    def test_enum_as_const_is_decorated_and_commented(self, make_generator) -> None:
        output = render(
            make_generator,
            '"Letters" enum Letter { "First" A }',
            enums_as_const=True,
            type_prefix="P",
            type_suffix="S",
        )
        assert output.endswith(
            "/** Letters */\n"
            "export const PLetterS = {\n"
            "  /** First */\n"
            '  A: "A",\n'
            "} as const;\n"
            "\n"
            "export type PLetterS = typeof PLetterS[keyof typeof PLetterS];"
        )

    def test_member_order_preserved(self, make_generator) -> None:
        output = render(make_generator, "enum E { Z A M }", include_comments=False)
        assert output.index("Z =") < output.index("A =") < output.index("M =")


class TestUnions:
    def test_union_members_are_decorated(self, make_generator) -> None:
        output = render(
            make_generator,
            "union Result = User | Error",
            include_comments=False,
            type_prefix="P",
            type_suffix="S",
        )
        assert output == "export type PResultS = PUserS | PErrorS;"

    def test_empty_union(self, make_generator) -> None:
        output = render(make_generator, "union Nothing", include_comments=False)
        assert output == "export type Nothing = never;"


class TestScalars:
    def test_scalar_declaration_is_unknown(self, make_generator) -> None:
        output = render(make_generator, "scalar Upload", include_comments=False)
        assert output == "export type Upload = unknown;"

    def test_custom_scalar_override(self, make_generator) -> None:
        output = render(
            make_generator,
            "type Price { amount: Money! }",
            include_comments=False,
            custom_scalar_types={"Money": "number"},
        )
        assert output == "export interface Price {\n  amount: number;\n}"
        assert "Money" not in output.split("{", 1)[1]

    def test_custom_scalar_override_is_not_decorated(self, make_generator) -> None:
        output = render(
            make_generator,
            "scalar Money\ntype Price { amount: Money! }",
            include_comments=False,
            custom_scalar_types={"Money": "number"},
            type_prefix="P",
        )
        assert "amount: number;" in output
        assert "export interface PPrice {" in output


class TestRecords:
    def test_input_and_interface_match_object_emission(self, make_generator) -> None:
        body = "{ id: ID! tags: [String] }"
        expected_body = "{\n  id: string;\n  tags?: string[];\n}"

        for keyword in ("type", "interface", "input"):
            output = render(make_generator, f"{keyword} Thing {body}", include_comments=False)
            assert output == f"export interface Thing {expected_body}"

    def test_empty_record(self, make_generator) -> None:
        output = render(make_generator, "type Empty", include_comments=False)
        assert output == "export interface Empty {\n}"

    def test_decoration_applies_to_declarations_and_references(self, make_generator) -> None:
        output = render(
            make_generator,
            "type User { best: User! all: [User!]! name: String }",
            include_comments=False,
            type_prefix="P",
            type_suffix="S",
        )
        assert output == (
            "export interface PUserS {\n"
            "  best: PUserS;\n"
            "  all: PUserS[];\n"
            "  name?: string;\n"
            "}"
        )

    def test_multiline_descriptions(self, make_generator) -> None:
        schema = '''
        """
        Line one
        Line two
        """
        type A {
          """
          Field one
          Field two
          """
          x: Int
        }
        '''
        output = render(make_generator, schema)
        assert output.endswith(
            "/**\n"
            " * Line one\n"
            " * Line two\n"
            " */\n"
            "export interface A {\n"
            "  /**\n"
            "   * Field one\n"
            "   * Field two\n"
            "   */\n"
            "  x?: number;\n"
            "}"
        )

    def test_comment_terminator_is_escaped(self, make_generator) -> None:
        output = render(make_generator, '"ends */ here" scalar S')
        assert "/** ends *\\/ here */" in output


class TestSingleDeclaration:
    def test_generate_single_declaration(self, make_generator) -> None:
        generator = make_generator(include_comments=False)
        declaration = ObjectDeclaration("Box", None, (Field("size", NamedType("Int")),))
        assert generator.generate_single_declaration(declaration) == (
            "export interface Box {\n  size?: number;\n}"
        )

    def test_root_declaration_renders_empty(self, make_generator) -> None:
        generator = make_generator()
        assert generator.generate_single_declaration(ObjectDeclaration("Query")) == ""

    def test_descriptions_dropped_when_comments_disabled(self, make_generator) -> None:
        generator = make_generator(include_comments=False)
        declaration = EnumDeclaration("E", "Enum doc", (EnumValue("A", "Value doc"),))
        assert generator.generate_single_declaration(declaration) == 'export enum E {\n  A = "A",\n}'


class TestConvenience:
    def test_convert_graphql_to_typescript(self) -> None:
        output = convert_graphql_to_typescript(
            "type A { b: Boolean! }", ConversionOptions(include_comments=False)
        )
        assert output == "export interface A {\n  b: boolean;\n}"

    def test_convert_with_default_options_has_timestamp_header(self) -> None:
        output = convert_graphql_to_typescript("scalar S")
        assert re.match(
            r"/\*\*\n \* Auto-generated GraphQL TypeScript definitions\n"
            r" \* Generated on: \d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\n \*/\n\n",
            output,
        )

    def test_convert_raises_on_bad_syntax(self) -> None:
        with pytest.raises(SchemaParseError):
            convert_graphql_to_typescript("type A {")

    def test_idempotent_apart_from_timestamp(self, sample_schema: str) -> None:
        def strip_timestamp(text: str) -> str:
            return re.sub(r"Generated on: .*", "Generated on: <ts>", text)

        first = convert_graphql_to_typescript(sample_schema)
        second = convert_graphql_to_typescript(sample_schema)
        assert strip_timestamp(first) == strip_timestamp(second)

    def test_create_typescript_generator_overrides(self) -> None:
        generator = create_typescript_generator(
            ConversionOptions(type_prefix="I"), type_suffix="T"
        )
        assert generator.options.type_prefix == "I"
        assert generator.options.type_suffix == "T"
        assert generator.language_name == "typescript"
        assert generator.file_extension == ".ts"

    def test_iso_timestamp_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", iso_timestamp())
