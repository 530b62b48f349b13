"""
Node definitions for the protocol meta model.

These nodes mirror the metaModel.json document: structures, enumerations
and type aliases whose member types are described by TypeRef variants.
All nodes are immutable; the model is read-only input to the generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class TypeRef:
    """Base class for all type references.

    Exactly one subclass describes each occurrence of a type; ``kind`` is
    the tag used in the metaModel document.
    """

    kind: ClassVar[str] = ""


@dataclass(frozen=True)
class BaseType(TypeRef):
    """A primitive such as ``string``, ``integer`` or ``DocumentUri``."""

    kind: ClassVar[str] = "base"

    name: str = ""


@dataclass(frozen=True)
class ReferenceType(TypeRef):
    """A named link to a structure, enumeration or type alias."""

    kind: ClassVar[str] = "reference"

    name: str = ""


@dataclass(frozen=True)
class ArrayType(TypeRef):
    kind: ClassVar[str] = "array"

    element: TypeRef = BaseType()


@dataclass(frozen=True)
class MapType(TypeRef):
    kind: ClassVar[str] = "map"

    key: TypeRef = BaseType()
    value: TypeRef = BaseType()


@dataclass(frozen=True)
class OrType(TypeRef):
    """A union of types."""

    kind: ClassVar[str] = "or"

    items: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class AndType(TypeRef):
    """An intersection of types."""

    kind: ClassVar[str] = "and"

    items: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class LiteralType(TypeRef):
    """An anonymous inline object type."""

    kind: ClassVar[str] = "literal"

    properties: tuple[Property, ...] = ()


@dataclass(frozen=True)
class StringLiteralType(TypeRef):
    kind: ClassVar[str] = "stringLiteral"

    value: str = ""


@dataclass(frozen=True)
class IntegerLiteralType(TypeRef):
    kind: ClassVar[str] = "integerLiteral"

    value: int = 0


@dataclass(frozen=True)
class BooleanLiteralType(TypeRef):
    kind: ClassVar[str] = "booleanLiteral"

    value: bool = False


@dataclass(frozen=True)
class TupleType(TypeRef):
    kind: ClassVar[str] = "tuple"

    items: tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class Property:
    """A property of a structure or of an inline literal type."""

    name: str = ""
    type: TypeRef = BaseType()
    optional: bool = False
    documentation: str | None = None


@dataclass(frozen=True)
class Structure:
    """A structure with its own properties and inheritance edges."""

    name: str = ""
    properties: tuple[Property, ...] = ()
    extends: tuple[TypeRef, ...] = ()
    mixins: tuple[TypeRef, ...] = ()
    documentation: str | None = None


@dataclass(frozen=True)
class EnumValue:
    name: str = ""
    value: str | int = ""
    documentation: str | None = None


@dataclass(frozen=True)
class Enumeration:
    """An enumeration backed by a string or integer base type."""

    name: str = ""
    type: TypeRef = BaseType()
    values: tuple[EnumValue, ...] = ()
    # Advisory only, not enforced by the generated decoders
    supports_custom_values: bool = False
    documentation: str | None = None


@dataclass(frozen=True)
class TypeAlias:
    name: str = ""
    type: TypeRef = BaseType()
    documentation: str | None = None


@dataclass(frozen=True)
class Request:
    """A request method. Parsed for reporting only, never generated."""

    method: str = ""
    type_name: str = ""
    params: tuple[TypeRef, ...] = ()
    result: TypeRef | None = None
    documentation: str | None = None


@dataclass(frozen=True)
class Notification:
    """A notification method. Parsed for reporting only, never generated."""

    method: str = ""
    type_name: str = ""
    params: tuple[TypeRef, ...] = ()
    documentation: str | None = None


@dataclass(frozen=True)
class SchemaModel:
    """Root of the parsed meta model."""

    version: str = ""
    structures: tuple[Structure, ...] = ()
    enumerations: tuple[Enumeration, ...] = ()
    type_aliases: tuple[TypeAlias, ...] = ()
    requests: tuple[Request, ...] = ()
    notifications: tuple[Notification, ...] = ()
