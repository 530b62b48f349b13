"""
Meta model parser.

Phase 1 of the pipeline: turn the raw metaModel.json document into
immutable model nodes without resolving references or making any
target-language decision.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

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


class MetaModelError(Exception):
    """Raised when the input document does not have the meta model shape."""


class MetaModelParser:
    """Parses a metaModel.json document into a SchemaModel."""

    def __init__(self):
        self._type_parsers: dict[str, Callable[[dict[str, Any], str], TypeRef]] = {
            "base": lambda data, path: BaseType(name=self._require(data, "name", path)),
            "reference": lambda data, path: ReferenceType(name=self._require(data, "name", path)),
            "array": lambda data, path: ArrayType(element=self.parse_type(self._require(data, "element", path), f"{path}.element")),
            "map": self._parse_map,
            "or": lambda data, path: OrType(items=self._parse_type_list(data, "items", path)),
            "and": lambda data, path: AndType(items=self._parse_type_list(data, "items", path)),
            "tuple": lambda data, path: TupleType(items=self._parse_type_list(data, "items", path)),
            "literal": self._parse_literal,
            "stringLiteral": lambda data, path: StringLiteralType(value=self._require(data, "value", path)),
            "integerLiteral": lambda data, path: IntegerLiteralType(value=self._require(data, "value", path)),
            "booleanLiteral": lambda data, path: BooleanLiteralType(value=self._require(data, "value", path)),
        }

    def parse(self, document: dict[str, Any]) -> SchemaModel:
        """
        Parse a meta model document.

        Args:
            document: The decoded metaModel.json content

        Returns:
            SchemaModel with every declaration in document order

        Raises:
            MetaModelError: If the document is structurally malformed
        """
        if not isinstance(document, dict):
            raise MetaModelError("$: expected a JSON object")

        meta_data = document.get("metaData") or {}
        return SchemaModel(
            version=str(meta_data.get("version", "")),
            structures=tuple(self._parse_structure(s, f"$.structures[{i}]") for i, s in enumerate(self._list(document, "structures", "$"))),
            enumerations=tuple(self._parse_enumeration(e, f"$.enumerations[{i}]") for i, e in enumerate(self._list(document, "enumerations", "$"))),
            type_aliases=tuple(self._parse_type_alias(a, f"$.typeAliases[{i}]") for i, a in enumerate(self._list(document, "typeAliases", "$"))),
            requests=tuple(self._parse_request(r, f"$.requests[{i}]") for i, r in enumerate(self._list(document, "requests", "$"))),
            notifications=tuple(self._parse_notification(n, f"$.notifications[{i}]") for i, n in enumerate(self._list(document, "notifications", "$"))),
        )

    def parse_type(self, data: Any, path: str) -> TypeRef:
        """Parse one TypeRef; the set of kinds is closed."""
        if not isinstance(data, dict):
            raise MetaModelError(f"{path}: expected a type object")
        kind = self._require(data, "kind", path)
        parser = self._type_parsers.get(kind)
        if parser is None:
            raise MetaModelError(f"{path}: unknown type kind '{kind}'")
        return parser(data, path)

    def _parse_map(self, data: dict[str, Any], path: str) -> MapType:
        return MapType(
            key=self.parse_type(self._require(data, "key", path), f"{path}.key"),
            value=self.parse_type(self._require(data, "value", path), f"{path}.value"),
        )

    def _parse_literal(self, data: dict[str, Any], path: str) -> LiteralType:
        value = self._require(data, "value", path)
        if not isinstance(value, dict):
            raise MetaModelError(f"{path}.value: expected an object")
        return LiteralType(properties=self._parse_properties(value, f"{path}.value"))

    def _parse_type_list(self, data: dict[str, Any], key: str, path: str) -> tuple[TypeRef, ...]:
        return tuple(self.parse_type(item, f"{path}.{key}[{i}]") for i, item in enumerate(self._list(data, key, path)))

    def _parse_properties(self, data: dict[str, Any], path: str) -> tuple[Property, ...]:
        properties = []
        for i, prop in enumerate(self._list(data, "properties", path)):
            prop_path = f"{path}.properties[{i}]"
            properties.append(
                Property(
                    name=self._require(prop, "name", prop_path),
                    type=self.parse_type(self._require(prop, "type", prop_path), f"{prop_path}.type"),
                    optional=bool(prop.get("optional", False)),
                    documentation=prop.get("documentation"),
                )
            )
        return tuple(properties)

    def _parse_structure(self, data: Any, path: str) -> Structure:
        return Structure(
            name=self._require(data, "name", path),
            properties=self._parse_properties(data, path),
            extends=self._parse_type_list(data, "extends", path),
            mixins=self._parse_type_list(data, "mixins", path),
            documentation=data.get("documentation"),
        )

    def _parse_enumeration(self, data: Any, path: str) -> Enumeration:
        values = []
        for i, value in enumerate(self._list(data, "values", path)):
            value_path = f"{path}.values[{i}]"
            values.append(
                EnumValue(
                    name=self._require(value, "name", value_path),
                    value=self._require(value, "value", value_path),
                    documentation=value.get("documentation"),
                )
            )
        return Enumeration(
            name=self._require(data, "name", path),
            type=self.parse_type(self._require(data, "type", path), f"{path}.type"),
            values=tuple(values),
            supports_custom_values=bool(data.get("supportsCustomValues", False)),
            documentation=data.get("documentation"),
        )

    def _parse_type_alias(self, data: Any, path: str) -> TypeAlias:
        return TypeAlias(
            name=self._require(data, "name", path),
            type=self.parse_type(self._require(data, "type", path), f"{path}.type"),
            documentation=data.get("documentation"),
        )

    def _parse_params(self, data: dict[str, Any], path: str) -> tuple[TypeRef, ...]:
        # "params" is either a single type or a list of types
        params = data.get("params")
        if params is None:
            return ()
        if isinstance(params, list):
            return tuple(self.parse_type(p, f"{path}.params[{i}]") for i, p in enumerate(params))
        return (self.parse_type(params, f"{path}.params"),)

    def _parse_request(self, data: Any, path: str) -> Request:
        result = data.get("result") if isinstance(data, dict) else None
        return Request(
            method=self._require(data, "method", path),
            type_name=data.get("typeName", ""),
            params=self._parse_params(data, path),
            result=self.parse_type(result, f"{path}.result") if result is not None else None,
            documentation=data.get("documentation"),
        )

    def _parse_notification(self, data: Any, path: str) -> Notification:
        return Notification(
            method=self._require(data, "method", path),
            type_name=data.get("typeName", ""),
            params=self._parse_params(data, path),
            documentation=data.get("documentation"),
        )

    @staticmethod
    def _require(data: Any, key: str, path: str) -> Any:
        if not isinstance(data, dict):
            raise MetaModelError(f"{path}: expected an object")
        if key not in data:
            raise MetaModelError(f"{path}: missing '{key}'")
        return data[key]

    @staticmethod
    def _list(data: dict[str, Any], key: str, path: str) -> list[Any]:
        value = data.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise MetaModelError(f"{path}.{key}: expected a list")
        return value
