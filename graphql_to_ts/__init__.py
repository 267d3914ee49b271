"""
GraphQL to TypeScript

Converts GraphQL schema type definitions into TypeScript declarations.
"""

__version__ = "1.0.0"

from .codegen import (
    ConversionOptions,
    GenerationResult,
    SchemaParseError,
    convert_graphql_to_typescript,
    generate_from_schema,
    quick_generate,
)
from .codegen.core.config import InvalidScalarMappingError

__all__ = [
    "__version__",
    "ConversionOptions",
    "GenerationResult",
    "SchemaParseError",
    "InvalidScalarMappingError",
    "convert_graphql_to_typescript",
    "generate_from_schema",
    "quick_generate",
]
