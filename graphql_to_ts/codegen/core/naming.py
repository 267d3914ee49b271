"""
Naming utilities for generated declarations.

Applies the configured prefix and suffix to declared type names so that a
declaration and every reference to it always agree.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeNameDecorator:
    """Wraps declared type names as ``prefix + name + suffix``."""

    prefix: str = ""
    suffix: str = ""

    def decorate(self, name: str) -> str:
        """
        Decorate a declared type name.

        Args:
            name: Original GraphQL type name

        Returns:
            Name used in the generated TypeScript
        """
        return f"{self.prefix}{name}{self.suffix}"

    @property
    def is_identity(self) -> bool:
        """True when no prefix or suffix is configured."""
        return not self.prefix and not self.suffix
