"""
Schema model module.

Contains the meta model node definitions and the document parser.
"""

from __future__ import annotations

from .nodes import (
    AndType,
    ArrayType,
    BaseType,
    BooleanLiteralType,
    Enumeration,
    EnumValue,
    IntegerLiteralType,
    LiteralType,
    MapType,
    Notification,
    OrType,
    Property,
    ReferenceType,
    Request,
    SchemaModel,
    StringLiteralType,
    Structure,
    TupleType,
    TypeAlias,
    TypeRef,
)
from .parser import MetaModelError, MetaModelParser

__all__ = [
    "TypeRef",
    "BaseType",
    "ReferenceType",
    "ArrayType",
    "MapType",
    "OrType",
    "AndType",
    "LiteralType",
    "StringLiteralType",
    "IntegerLiteralType",
    "BooleanLiteralType",
    "TupleType",
    "Property",
    "Structure",
    "EnumValue",
    "Enumeration",
    "TypeAlias",
    "Request",
    "Notification",
    "SchemaModel",
    "MetaModelError",
    "MetaModelParser",
]
