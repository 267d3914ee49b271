"""
Core schema representation for code generation.

Converts the graphql-core document AST into a small, immutable set of
declaration records that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    GraphQLError,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    StringValueNode,
    TypeNode,
    UnionTypeDefinitionNode,
    parse,
)

from ...logging_config import get_logger
from .errors import SchemaParseError

logger = get_logger(__name__)


# Type references


@dataclass(frozen=True)
class NamedType:
    """Reference to a named type, the end of every wrapper chain."""

    name: str


@dataclass(frozen=True)
class ListType:
    """List wrapper around another type reference."""

    of_type: "TypeRef"


@dataclass(frozen=True)
class NonNullType:
    """Non-null wrapper around a named or list type reference."""

    of_type: "TypeRef"


TypeRef = Union[NamedType, ListType, NonNullType]


# Declaration members


@dataclass(frozen=True)
class EnumValue:
    """A single enum member."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Field:
    """A field of an object, interface or input object type."""

    name: str
    type: TypeRef
    description: Optional[str] = None


# Declarations


@dataclass(frozen=True)
class ScalarDeclaration:
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class EnumDeclaration:
    name: str
    description: Optional[str] = None
    values: Tuple[EnumValue, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class UnionDeclaration:
    name: str
    description: Optional[str] = None
    members: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InterfaceDeclaration:
    name: str
    description: Optional[str] = None
    fields: Tuple[Field, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class InputObjectDeclaration:
    name: str
    description: Optional[str] = None
    fields: Tuple[Field, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ObjectDeclaration:
    name: str
    description: Optional[str] = None
    fields: Tuple[Field, ...] = field(default_factory=tuple)


Declaration = Union[
    ScalarDeclaration,
    EnumDeclaration,
    UnionDeclaration,
    InterfaceDeclaration,
    InputObjectDeclaration,
    ObjectDeclaration,
]

RecordDeclaration = Union[InterfaceDeclaration, InputObjectDeclaration, ObjectDeclaration]

# Object types with these names describe operations, not data shapes
ROOT_OPERATION_TYPES = frozenset({"Query", "Mutation", "Subscription"})


def is_root_operation_type(declaration: Declaration) -> bool:
    """Check whether a declaration is one of the root operation object types."""
    return (
        isinstance(declaration, ObjectDeclaration)
        and declaration.name in ROOT_OPERATION_TYPES
    )


def unwrap_named_type(type_ref: TypeRef) -> str:
    """Return the base type name at the end of a wrapper chain."""
    while not isinstance(type_ref, NamedType):
        type_ref = type_ref.of_type
    return type_ref.name


def parse_schema(schema_text: str) -> List[Declaration]:
    """
    Parse GraphQL SDL into declarations.

    Args:
        schema_text: Raw schema text

    Returns:
        Type declarations in file order

    Raises:
        SchemaParseError: If the text is not valid GraphQL
    """
    if not schema_text.strip():
        logger.debug("Empty schema text, no declarations")
        return []

    try:
        document = parse(schema_text, no_location=True)
    except GraphQLError as e:
        raise SchemaParseError(f"Error parsing GraphQL schema: {e.message}") from e

    declarations = convert_document(document)
    logger.debug("Parsed %d type declarations", len(declarations))
    return declarations


def convert_document(document: DocumentNode) -> List[Declaration]:
    """
    Convert a graphql-core document into declarations.

    Operation definitions, fragments, schema/directive definitions and
    type extensions are skipped.
    """
    declarations = []

    for node in document.definitions:
        declaration = _convert_definition(node)
        if declaration is None:
            logger.debug("Skipping %s", node.kind)
            continue
        declarations.append(declaration)

    return declarations


def _convert_definition(node) -> Optional[Declaration]:
    """Convert one top-level definition node, or None if it is not a type."""
    if isinstance(node, ScalarTypeDefinitionNode):
        return ScalarDeclaration(
            name=node.name.value, description=_description(node.description)
        )

    if isinstance(node, EnumTypeDefinitionNode):
        values = tuple(
            EnumValue(name=value.name.value, description=_description(value.description))
            for value in node.values or ()
        )
        return EnumDeclaration(
            name=node.name.value,
            description=_description(node.description),
            values=values,
        )

    if isinstance(node, UnionTypeDefinitionNode):
        members = tuple(member.name.value for member in node.types or ())
        return UnionDeclaration(
            name=node.name.value,
            description=_description(node.description),
            members=members,
        )

    if isinstance(node, InterfaceTypeDefinitionNode):
        return InterfaceDeclaration(
            name=node.name.value,
            description=_description(node.description),
            fields=_convert_fields(node.fields),
        )

    if isinstance(node, InputObjectTypeDefinitionNode):
        return InputObjectDeclaration(
            name=node.name.value,
            description=_description(node.description),
            fields=_convert_fields(node.fields),
        )

    if isinstance(node, ObjectTypeDefinitionNode):
        return ObjectDeclaration(
            name=node.name.value,
            description=_description(node.description),
            fields=_convert_fields(node.fields),
        )

    return None


def _convert_fields(nodes) -> Tuple[Field, ...]:
    return tuple(
        Field(
            name=node.name.value,
            type=convert_type_node(node.type),
            description=_description(node.description),
        )
        for node in nodes or ()
    )


def convert_type_node(node: TypeNode) -> TypeRef:
    """Convert a graphql-core type node into a TypeRef chain."""
    if isinstance(node, NonNullTypeNode):
        return NonNullType(convert_type_node(node.type))
    if isinstance(node, ListTypeNode):
        return ListType(convert_type_node(node.type))
    if isinstance(node, NamedTypeNode):
        return NamedType(node.name.value)
    raise TypeError(f"Unexpected type node: {node!r}")


def _description(node: Optional[StringValueNode]) -> Optional[str]:
    if node is None or not node.value:
        return None
    return node.value
