"""
GraphQL to TypeScript Code Generation Module

Generates TypeScript declarations from GraphQL schema type definitions.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import GeneratorError, SchemaParseError
from .core.schema import Declaration, parse_schema
from .core.config import (
    ConfigError,
    ConversionOptions,
    InvalidScalarMappingError,
    ProjectConfig,
    load_config,
)
from .languages.typescript import convert_graphql_to_typescript


def generate_from_schema(schema_text, language="typescript", options=None):
    """
    Generate code from GraphQL schema text.

    Args:
        schema_text: GraphQL SDL
        language: Target language name
        options: ConversionOptions or dict of its fields

    Returns:
        GenerationResult with generated code
    """
    generator = get_generator(language, options)
    return generate_code(generator, schema_text)


def quick_generate(schema_text, language="typescript", **options):
    """
    Quick code generation from schema text.

    Args:
        schema_text: GraphQL SDL
        language: Target language
        **options: ConversionOptions fields

    Returns:
        Generated code string

    Raises:
        GeneratorError: If generation fails
    """
    result = generate_from_schema(schema_text, language, options)

    if result.success:
        return result.code
    raise result.exception or GeneratorError(result.error_message)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "SchemaParseError",
    "Declaration",
    "ConversionOptions",
    "ProjectConfig",
    "ConfigError",
    "InvalidScalarMappingError",
    "convert_graphql_to_typescript",
    "generate_code",
    "generate_from_schema",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_supported_languages",
    "load_config",
    "parse_schema",
]
