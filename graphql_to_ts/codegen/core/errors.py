"""Exceptions raised while turning schema text into generated code."""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaParseError(GeneratorError):
    """Raised when schema text is not valid GraphQL SDL."""

    pass
