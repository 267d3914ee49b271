"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .errors import GeneratorError, SchemaParseError
from .generator import CodeGenerator, GenerationResult, generate_code
from .schema import (
    Declaration,
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
    TypeRef,
    UnionDeclaration,
    parse_schema,
)
from .naming import TypeNameDecorator
from .config import (
    ConfigError,
    ConfigManager,
    ConversionOptions,
    InvalidScalarMappingError,
    ProjectConfig,
    load_config,
    parse_custom_scalars,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Declaration model
    "Declaration",
    "ScalarDeclaration",
    "EnumDeclaration",
    "EnumValue",
    "UnionDeclaration",
    "InterfaceDeclaration",
    "InputObjectDeclaration",
    "ObjectDeclaration",
    "Field",
    "TypeRef",
    "NamedType",
    "ListType",
    "NonNullType",
    "parse_schema",
    "SchemaParseError",
    # Naming
    "TypeNameDecorator",
    # Configuration system
    "ConversionOptions",
    "ProjectConfig",
    "ConfigManager",
    "ConfigError",
    "InvalidScalarMappingError",
    "load_config",
    "parse_custom_scalars",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
