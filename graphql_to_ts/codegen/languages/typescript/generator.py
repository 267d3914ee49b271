"""
TypeScript code generator implementation.

Generates TypeScript interfaces, enums and type aliases from GraphQL type
declarations using templates.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from ....logging_config import get_logger
from ...core.config import ConversionOptions
from ...core.generator import CodeGenerator
from ...core.naming import TypeNameDecorator
from ...core.schema import (
    Declaration,
    EnumDeclaration,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ObjectDeclaration,
    RecordDeclaration,
    ScalarDeclaration,
    UnionDeclaration,
    is_root_operation_type,
    parse_schema,
)
from .types import UNKNOWN_TYPE, ScalarTable, TypeScriptTypeMapper

logger = get_logger(__name__)


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript type declarations."""

    def __init__(
        self,
        options: Optional[ConversionOptions] = None,
        clock: Callable[[], str] = iso_timestamp,
    ):
        """
        Initialize TypeScript generator.

        Args:
            options: Conversion options
            clock: Returns the timestamp written into the header comment
        """
        super().__init__(options)
        self.clock = clock

        self.decorator = TypeNameDecorator(
            prefix=self.options.type_prefix, suffix=self.options.type_suffix
        )
        self.type_mapper = TypeScriptTypeMapper(
            ScalarTable(self.options.custom_scalar_types), self.decorator
        )
        if not self.decorator.is_identity:
            logger.debug(
                "Decorating type names as %s<name>%s",
                self.decorator.prefix,
                self.decorator.suffix,
            )

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def get_template_directory(self) -> Path:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def is_builtin_type(self, name: str) -> bool:
        return self.type_mapper.is_scalar(name)

    def generate(self, declarations: Sequence[Declaration]) -> str:
        """Generate complete TypeScript source for all declarations."""
        parts = []

        if self.options.include_comments:
            parts.append(self.render_template("header.ts.j2", {"generated_at": self.clock()}))

        for declaration in declarations:
            code = self.generate_single_declaration(declaration)
            if code:
                parts.append(code)

        return "\n\n".join(parts).strip()

    def generate_single_declaration(self, declaration: Declaration) -> str:
        """Generate TypeScript for one declaration, or '' for root operation types."""
        match declaration:
            case ScalarDeclaration():
                template, context = "scalar.ts.j2", self._scalar_context(declaration)
            case EnumDeclaration():
                template, context = "enum.ts.j2", self._enum_context(declaration)
            case UnionDeclaration():
                template, context = "union.ts.j2", self._union_context(declaration)
            case InterfaceDeclaration() | InputObjectDeclaration():
                template, context = "record.ts.j2", self._record_context(declaration)
            case ObjectDeclaration():
                if is_root_operation_type(declaration):
                    logger.debug("Skipping root operation type %s", declaration.name)
                    return ""
                template, context = "record.ts.j2", self._record_context(declaration)
            case _:
                raise TypeError(f"Unsupported declaration: {declaration!r}")

        return self.render_template(template, context).strip()

    def _description(self, text: Optional[str]) -> Optional[str]:
        return text if self.options.include_comments and text else None

    def _scalar_context(self, declaration: ScalarDeclaration) -> Dict[str, Any]:
        return {
            "name": self.decorator.decorate(declaration.name),
            "description": self._description(declaration.description),
            "type": UNKNOWN_TYPE,
        }

    def _enum_context(self, declaration: EnumDeclaration) -> Dict[str, Any]:
        values = [
            {"name": value.name, "description": self._description(value.description)}
            for value in declaration.values
        ]
        return {
            "name": self.decorator.decorate(declaration.name),
            "description": self._description(declaration.description),
            "values": values,
            "as_const": self.options.enums_as_const,
        }

    def _union_context(self, declaration: UnionDeclaration) -> Dict[str, Any]:
        return {
            "name": self.decorator.decorate(declaration.name),
            "description": self._description(declaration.description),
            "members": [self.decorator.decorate(member) for member in declaration.members],
        }

    def _record_context(self, declaration: RecordDeclaration) -> Dict[str, Any]:
        return {
            "name": self.decorator.decorate(declaration.name),
            "description": self._description(declaration.description),
            "fields": self._field_data(declaration),
        }

    def _field_data(self, declaration: RecordDeclaration) -> List[Dict[str, Any]]:
        fields = []
        for field in declaration.fields:
            ts_type = self.type_mapper.resolve(field.type)
            fields.append(
                {
                    "name": field.name,
                    "type": ts_type.expression,
                    "required": ts_type.required,
                    "optional": ts_type.optional_marker,
                    "description": self._description(field.description),
                }
            )
        return fields


def create_typescript_generator(
    options: Optional[ConversionOptions] = None, **overrides: Any
) -> TypeScriptGenerator:
    """
    Create a TypeScript generator.

    Args:
        options: Base conversion options
        **overrides: ConversionOptions fields to override

    Returns:
        Configured TypeScriptGenerator instance
    """
    if overrides:
        base = (options or ConversionOptions()).to_dict()
        base.update(overrides)
        options = ConversionOptions(**base)
    return TypeScriptGenerator(options)


def convert_graphql_to_typescript(
    schema_text: str, options: Optional[ConversionOptions] = None
) -> str:
    """
    Convert GraphQL SDL to TypeScript declarations.

    Args:
        schema_text: GraphQL schema text
        options: Conversion options (defaults when None)

    Returns:
        Generated TypeScript source

    Raises:
        SchemaParseError: If the schema text is not valid GraphQL
    """
    generator = TypeScriptGenerator(options)
    return generator.format_code(generator.generate(parse_schema(schema_text)))
