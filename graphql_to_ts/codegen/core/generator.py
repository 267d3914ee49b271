"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...logging_config import get_logger
from .config import ConversionOptions
from .errors import GeneratorError
from .schema import (
    Declaration,
    EnumDeclaration,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ObjectDeclaration,
    ScalarDeclaration,
    UnionDeclaration,
    is_root_operation_type,
    parse_schema,
    unwrap_named_type,
)
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, options: Optional[ConversionOptions] = None):
        """Initialize generator with optional conversion options."""
        self.options = options or ConversionOptions()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, declarations: Sequence[Declaration]) -> str:
        """
        Generate code for all declarations.

        Args:
            declarations: Parsed declarations in schema order

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_declaration(self, declaration: Declaration) -> str:
        """
        Generate code for a single declaration.

        Args:
            declaration: Declaration to generate code for

        Returns:
            Generated code for this declaration only, empty if it is skipped
        """
        pass

    def is_builtin_type(self, name: str) -> bool:
        """Check whether a named type maps to a target-language builtin."""
        return False

    def validate_declarations(self, declarations: Sequence[Declaration]) -> List[str]:
        """
        Validate declarations for basic structural issues.

        Warnings never change the generated code.

        Args:
            declarations: Declarations to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        declared = {declaration.name for declaration in declarations}

        for declaration in declarations:
            if is_root_operation_type(declaration):
                continue

            if isinstance(declaration, UnionDeclaration):
                if not declaration.members:
                    warnings.append(f"Union '{declaration.name}' has no members")
                for member in declaration.members:
                    if member not in declared:
                        warnings.append(
                            f"Union '{declaration.name}' references undeclared type '{member}'"
                        )

            elif isinstance(
                declaration,
                (InterfaceDeclaration, InputObjectDeclaration, ObjectDeclaration),
            ):
                if not declaration.fields:
                    warnings.append(f"Type '{declaration.name}' has no fields")

                for field in declaration.fields:
                    type_name = unwrap_named_type(field.type)
                    if type_name not in declared and not self.is_builtin_type(type_name):
                        warnings.append(
                            f"Field {declaration.name}.{field.name} references "
                            f"undeclared type '{type_name}'"
                        )

            elif isinstance(declaration, EnumDeclaration) and not declaration.values:
                warnings.append(f"Enum '{declaration.name}' has no values")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:  # Declarations are separated by one blank line
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip()

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema_text: str) -> GenerationResult:
    """
    Parse schema text and generate code with error handling.

    Args:
        generator: Code generator instance
        schema_text: GraphQL SDL

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        declarations = parse_schema(schema_text)

        warnings = generator.validate_declarations(declarations)
        code = generator.generate(declarations)
        formatted_code = generator.format_code(code)
    except GeneratorError as e:
        logger.debug("Code generation failed: %s", e)
        return GenerationResult.error(str(e), exception=e)

    skipped = [d.name for d in declarations if is_root_operation_type(d)]
    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "declaration_count": len(declarations),
        "emitted_count": len(declarations) - len(skipped),
        "skipped_root_types": skipped,
        "scalar_count": sum(isinstance(d, ScalarDeclaration) for d in declarations),
        "line_count": len(formatted_code.split("\n")),
    }

    logger.info(
        "Generated %d declarations (%d lines)",
        metadata["emitted_count"],
        metadata["line_count"],
    )
    return GenerationResult(formatted_code, warnings, metadata)
