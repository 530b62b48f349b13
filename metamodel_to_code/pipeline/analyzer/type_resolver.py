"""
Type resolver: meta model types to Python type expressions.

Every TypeRef variant has a representation. Kinds without a faithful
Python equivalent (maps, unions, intersections, inline literals, tuples)
all become the opaque ``JsonValue`` type.
"""

from __future__ import annotations

from ...utils import sanitize_type_name
from ..schema_ast.nodes import (
    ArrayType,
    BaseType,
    BooleanLiteralType,
    IntegerLiteralType,
    ReferenceType,
    StringLiteralType,
    TypeRef,
)
from .context import GenerationContext

# Opaque JSON value type declared in the generated prelude
JSON_VALUE_TYPE = "JsonValue"


class TypeResolver:
    """Resolves TypeRefs to Python type expressions."""

    # Type mapping from meta model base types to Python types
    TYPE_MAP = {
        "string": "str",
        "integer": "int",
        "uinteger": "int",
        "decimal": "float",
        "boolean": "bool",
        "null": "None",
        "DocumentUri": "str",
        "URI": "str",
        "RegExp": "str",
    }

    # Base types decoded through the base decode rule
    CODEC_BASE_TYPES = frozenset(TYPE_MAP) - {"null"}

    def __init__(self, context: GenerationContext | None = None):
        """
        Initialize the resolver.

        Args:
            context: Run context notified of every referenced name
        """
        self.context = context

    def resolve(self, type_ref: TypeRef, optional: bool = False) -> str:
        """
        Resolve a type reference to a Python type expression.

        Args:
            type_ref: The type reference
            optional: Whether the value may be absent

        Returns:
            Python type expression, e.g. ``list[str] | None``
        """
        result = self.resolve_name(type_ref)
        if optional and result != "None":
            result = f"{result} | None"
        return result

    def resolve_name(self, type_ref: TypeRef) -> str:
        """Resolve a type reference without the optional qualifier."""
        match type_ref:
            case BaseType():
                return self.resolve_base(type_ref)
            case ReferenceType():
                name = sanitize_type_name(type_ref.name)
                if self.context is not None:
                    self.context.note_reference(name)
                return name
            case ArrayType():
                return f"list[{self.resolve_name(type_ref.element)}]"
            case StringLiteralType():
                return "str"
            case IntegerLiteralType():
                return "int"
            case BooleanLiteralType():
                return "bool"
            case _:
                # map, or, and, literal, tuple
                return JSON_VALUE_TYPE

    def resolve_base(self, base: BaseType) -> str:
        return self.TYPE_MAP.get(base.name, JSON_VALUE_TYPE)

    def is_base_type(self, type_ref: TypeRef) -> bool:
        """Whether values of this type go through the base decode rule."""
        if isinstance(type_ref, BaseType):
            return type_ref.name in self.CODEC_BASE_TYPES
        return isinstance(type_ref, (StringLiteralType, IntegerLiteralType, BooleanLiteralType))
