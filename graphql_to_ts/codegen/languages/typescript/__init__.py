"""
TypeScript code generator module.

Generates TypeScript interfaces, enums and aliases from GraphQL declarations.
"""

from .generator import (
    TypeScriptGenerator,
    convert_graphql_to_typescript,
    create_typescript_generator,
)
from .types import (
    DEFAULT_SCALAR_TYPES,
    ScalarTable,
    TSType,
    TypeScriptTypeMapper,
)

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptTypeMapper",
    "ScalarTable",
    "TSType",
    "DEFAULT_SCALAR_TYPES",
    "convert_graphql_to_typescript",
    "create_typescript_generator",
]
