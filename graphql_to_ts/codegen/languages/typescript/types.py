"""
TypeScript-specific type system for code generation.

Maps GraphQL type references onto TypeScript type expressions, folding the
list and non-null wrappers of a field into one expression plus a flag that
says whether the property is required.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from ...core.naming import TypeNameDecorator
from ...core.schema import ListType, NamedType, NonNullType, TypeRef

# Built-in scalars and the TypeScript types they become
DEFAULT_SCALAR_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "ID": "string",
        "String": "string",
        "Int": "number",
        "Float": "number",
        "Boolean": "boolean",
        "DateTime": "string",
        "JSON": "any",
    }
)

# Placeholder used for declared scalars
UNKNOWN_TYPE = "unknown"


class ScalarTable:
    """
    Two-layer scalar lookup.

    User overrides are consulted first, then the built-in defaults. Neither
    layer is modified after construction.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        defaults: Mapping[str, str] = DEFAULT_SCALAR_TYPES,
    ):
        self._overrides = MappingProxyType(dict(overrides or {}))
        self._defaults = defaults

    def lookup(self, name: str) -> Optional[str]:
        """Return the TypeScript type for a scalar name, or None."""
        if name in self._overrides:
            return self._overrides[name]
        return self._defaults.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._overrides or name in self._defaults


@dataclass(frozen=True)
class TSType:
    """Resolved TypeScript type of a field."""

    expression: str  # e.g. "string", "User[]"
    required: bool = False

    @property
    def optional_marker(self) -> str:
        """Suffix for the property name: ``?`` unless required."""
        return "" if self.required else "?"


class TypeScriptTypeMapper:
    """
    Central engine for mapping GraphQL type references to TypeScript.

    Only the outermost non-null wrapper makes a field required. Non-null
    wrappers inside a list are dropped, so ``[User!]`` and ``[User]`` both
    become ``User[]``.
    """

    def __init__(
        self,
        scalars: Optional[ScalarTable] = None,
        decorator: Optional[TypeNameDecorator] = None,
    ):
        """Initialize with a scalar table and a name decorator."""
        self.scalars = scalars or ScalarTable()
        self.decorator = decorator or TypeNameDecorator()

    def resolve(self, type_ref: TypeRef) -> TSType:
        """
        Resolve a field's type reference.

        Args:
            type_ref: Field type reference

        Returns:
            TSType carrying the expression and required flag
        """
        if isinstance(type_ref, NonNullType):
            return TSType(self.expression(type_ref.of_type), required=True)
        return TSType(self.expression(type_ref), required=False)

    def expression(self, type_ref: TypeRef) -> str:
        """Build the TypeScript expression for a type reference of any depth."""
        if isinstance(type_ref, NonNullType):
            return self.expression(type_ref.of_type)

        if isinstance(type_ref, ListType):
            item = self.expression(type_ref.of_type)
            if " " in item or "|" in item:
                item = f"({item})"
            return f"{item}[]"

        if isinstance(type_ref, NamedType):
            return self.named_type(type_ref.name)

        raise TypeError(f"Unexpected type reference: {type_ref!r}")

    def named_type(self, name: str) -> str:
        """Map a scalar through the table, otherwise decorate the type name."""
        mapped = self.scalars.lookup(name)
        if mapped is not None:
            return mapped
        return self.decorator.decorate(name)

    def is_scalar(self, name: str) -> bool:
        """Check whether a name has a scalar table entry."""
        return name in self.scalars
