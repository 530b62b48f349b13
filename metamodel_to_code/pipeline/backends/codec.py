"""
Codec synthesizer.

Builds the Python expressions that encode generated values to JSON and
decode them back. The policy, per kind:

- Scalars (base types and literal constants) are checked strictly and
  raise ``JsonDecodeError`` on a kind mismatch.
- References delegate to the referenced type's ``to_json``/``from_json``;
  references to type aliases borrow the codec of the alias target.
- Arrays are decoded leniently: a non-list becomes ``[]`` and malformed
  scalar items fall back to a per-type default.
- Everything typed ``JsonValue`` (maps, unions, intersections, inline
  literals, tuples) passes through untouched.
"""

from __future__ import annotations

import json
import re

from ...utils import sanitize_type_name
from ..analyzer.context import GenerationContext
from ..analyzer.type_resolver import TypeResolver
from ..schema_ast.nodes import (
    ArrayType,
    BaseType,
    BooleanLiteralType,
    Enumeration,
    IntegerLiteralType,
    OrType,
    Property,
    ReferenceType,
    StringLiteralType,
    TypeRef,
)

# "callee(var)" - an expression that is just a one-argument call
_CALL_PATTERN = re.compile(r"^([A-Za-z_][\w.]*)\((\w+)\)$")

# Base type name -> scalar kind used by the codecs
BASE_KINDS = {
    "string": "string",
    "DocumentUri": "string",
    "URI": "string",
    "RegExp": "string",
    "integer": "integer",
    "uinteger": "integer",
    "decimal": "decimal",
    "boolean": "boolean",
}

# Strict decoders from the generated prelude
BASE_DECODERS = {
    "string": "_string_from_json",
    "integer": "_int_from_json",
    "decimal": "_float_from_json",
    "boolean": "_bool_from_json",
}

# Lenient array item decoding, malformed items take the default
ITEM_DECODERS = {
    "string": '{var} if isinstance({var}, str) else ""',
    "integer": "int({var}) if _is_number({var}) else 0",
    "decimal": "float({var}) if _is_number({var}) else 0.0",
    "boolean": "{var} if isinstance({var}, bool) else False",
}

# Stand-in for a cyclic alias chain: no codec to borrow, pass through
_OPAQUE = OrType()


class CodecSynthesizer:
    """Synthesizes encode and decode expressions for meta model types."""

    def __init__(self, context: GenerationContext, type_resolver: TypeResolver):
        """
        Initialize the synthesizer.

        Args:
            context: Run context with the catalogs and name sets
            type_resolver: Resolver used for annotations and the base-type check
        """
        self.context = context
        self.type_resolver = type_resolver

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode_expr(self, type_ref: TypeRef, var: str, visited: frozenset[str] = frozenset()) -> str:
        """
        Expression converting the Python value ``var`` to a JSON value.

        Args:
            type_ref: Declared type of the value
            var: Expression holding the value
            visited: Alias names already followed on this path

        Returns:
            Python expression; never raises at runtime
        """
        type_ref, visited = self._follow_aliases(type_ref, visited)
        if isinstance(type_ref, ReferenceType):
            return f"{var}.to_json()"
        if isinstance(type_ref, ArrayType):
            item = self.encode_expr(type_ref.element, "item", visited)
            if item == "item":
                return f"list({var})"
            return f"[{item} for item in {var}]"
        # Scalars and JsonValue are already JSON-native
        return var

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def decode_expr(self, type_ref: TypeRef, var: str, visited: frozenset[str] = frozenset()) -> str:
        """
        Expression converting the JSON value ``var`` to the Python value.

        Args:
            type_ref: Declared type of the value
            var: Expression holding the JSON value
            visited: Alias names already followed on this path

        Returns:
            Python expression; may raise ``JsonDecodeError`` at runtime
        """
        type_ref, visited = self._follow_aliases(type_ref, visited)
        base_kind = self.base_kind(type_ref)
        if base_kind is not None:
            return f"{BASE_DECODERS[base_kind]}({var})"
        if isinstance(type_ref, ReferenceType):
            return f"{self._reference_name(type_ref)}.from_json({var})"
        if isinstance(type_ref, ArrayType):
            return self._decode_array(type_ref, var, visited)
        return var

    def decoder(self, type_ref: TypeRef) -> str | None:
        """Callable expression decoding one JSON value, None for pass-through."""
        expr = self.decode_expr(type_ref, "value")
        if expr == "value":
            return None
        return self._as_callable(expr, "value")

    def _decode_array(self, array: ArrayType, var: str, visited: frozenset[str]) -> str:
        item = self._decode_item(array.element, "item", visited)
        if item == "item":
            return f"_list_from_json({var})"
        return f"_list_from_json({var}, {self._as_callable(item, 'item')})"

    def _decode_item(self, type_ref: TypeRef, var: str, visited: frozenset[str]) -> str:
        """Decode one array element: scalars default instead of failing."""
        type_ref, visited = self._follow_aliases(type_ref, visited)
        base_kind = self.base_kind(type_ref)
        if base_kind is not None:
            return ITEM_DECODERS[base_kind].format(var=var)
        if isinstance(type_ref, ReferenceType):
            return f"{self._reference_name(type_ref)}.from_json({var})"
        if isinstance(type_ref, ArrayType):
            return self._decode_array(type_ref, var, visited)
        return var

    # ------------------------------------------------------------------
    # Structure properties
    # ------------------------------------------------------------------

    def encode_property(self, prop: Property, attribute: str) -> str:
        """Expression encoding the attribute holding ``prop`` (known not None)."""
        return self.encode_expr(prop.type, attribute)

    def decode_property(self, prop: Property) -> str:
        """
        Expression reading ``prop`` from the decoded object ``obj``.

        Required properties raise on a missing key; optional ones decode a
        missing key or a JSON null to None.
        """
        key = json.dumps(prop.name)
        type_ref = prop.type

        if self.type_resolver.is_base_type(type_ref) or isinstance(type_ref, (ReferenceType, ArrayType)):
            if not prop.optional:
                return self.decode_expr(type_ref, f"_required(obj, {key})")
            decoder = self.decoder(type_ref)
            if decoder is None:
                return f"obj.get({key})"
            return f"_optional(obj, {key}, {decoder})"

        # map, or, and, literal and the rest: the raw JSON value
        if prop.optional:
            return f"obj.get({key})"
        return f"_required(obj, {key})"

    # ------------------------------------------------------------------
    # Enumerations
    # ------------------------------------------------------------------

    def is_string_enumeration(self, enumeration: Enumeration) -> bool:
        return self.type_resolver.resolve(enumeration.type) == "str"

    def enum_codec(self, enumeration: Enumeration) -> dict[str, str]:
        """Pieces of the enum decoder: kind check, match subject and error wording."""
        if self.is_string_enumeration(enumeration):
            return {"BASE": "str", "CHECK": "isinstance(json, str)", "SUBJECT": "json", "EXPECTED": "string"}
        return {"BASE": "int", "CHECK": "_is_number(json)", "SUBJECT": "int(json)", "EXPECTED": "number"}

    def enum_value_literal(self, enumeration: Enumeration, value: str | int) -> str:
        """Python literal for an enumeration value."""
        if self.is_string_enumeration(enumeration):
            return json.dumps(str(value))
        if isinstance(value, (int, float)):
            return str(int(value))
        return json.dumps(value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def base_kind(self, type_ref: TypeRef) -> str | None:
        """Scalar kind of a base type or literal constant, None otherwise."""
        if isinstance(type_ref, BaseType):
            return BASE_KINDS.get(type_ref.name)
        if isinstance(type_ref, StringLiteralType):
            return "string"
        if isinstance(type_ref, IntegerLiteralType):
            return "integer"
        if isinstance(type_ref, BooleanLiteralType):
            return "boolean"
        return None

    def _follow_aliases(self, type_ref: TypeRef, visited: frozenset[str]) -> tuple[TypeRef, frozenset[str]]:
        """
        Resolve the type whose codec a value of ``type_ref`` uses.

        String aliases become plain strings. References to generated or
        excluded structures and enumerations stay references. References to
        type aliases are replaced by the alias target, chains included.
        """
        while isinstance(type_ref, ReferenceType):
            name = type_ref.name
            if name in self.context.string_alias_types:
                return BaseType(name="string"), visited
            if sanitize_type_name(name) in self.context.exclude_types:
                return type_ref, visited
            if name in self.context.structures or name in self.context.enumerations:
                return type_ref, visited
            alias = self.context.type_aliases.get(name)
            if alias is None:
                return type_ref, visited
            if name in visited:
                return _OPAQUE, visited
            visited = visited | {name}
            type_ref = alias.type
        return type_ref, visited

    def _reference_name(self, type_ref: ReferenceType) -> str:
        name = sanitize_type_name(type_ref.name)
        self.context.note_reference(name)
        return name

    @staticmethod
    def _as_callable(expr: str, var: str) -> str:
        """Turn an expression over ``var`` into a callable expression."""
        match = _CALL_PATTERN.match(expr)
        if match and match.group(2) == var:
            return match.group(1)
        return f"lambda {var}: {expr}"
