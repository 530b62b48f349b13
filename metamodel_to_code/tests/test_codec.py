"""
Tests for the codec expressions synthesized per type kind.
"""

import pytest

from metamodel_to_code.pipeline import CodeGeneratorConfig
from metamodel_to_code.pipeline.analyzer import GenerationContext, TypeResolver
from metamodel_to_code.pipeline.backends import CodecSynthesizer
from metamodel_to_code.pipeline.schema_ast import (
    ArrayType,
    BaseType,
    Enumeration,
    EnumValue,
    IntegerLiteralType,
    MapType,
    OrType,
    Property,
    ReferenceType,
    SchemaModel,
    StringLiteralType,
    Structure,
    TypeAlias,
)

STRING = BaseType(name="string")


def _model():
    return SchemaModel(
        structures=(
            Structure(name="Range"),
            Structure(name="TextEdit"),
            Structure(name="_InitializeParams"),
        ),
        enumerations=(
            Enumeration(name="MarkupKind", type=STRING, values=(EnumValue(name="Markdown", value="markdown"),)),
            Enumeration(name="SyncKind", type=BaseType(name="uinteger"), values=(EnumValue(name="Full", value=1),)),
        ),
        type_aliases=(
            TypeAlias(name="Pattern", type=STRING),
            TypeAlias(name="ProgressToken", type=OrType(items=(STRING, BaseType(name="integer")))),
            TypeAlias(name="DefinitionLink", type=ReferenceType(name="TextEdit")),
            TypeAlias(name="Link", type=ReferenceType(name="DefinitionLink")),
            TypeAlias(name="Edits", type=ArrayType(element=ReferenceType(name="TextEdit"))),
            TypeAlias(name="Tags", type=ArrayType(element=ReferenceType(name="Pattern"))),
            TypeAlias(name="Uri", type=BaseType(name="URI")),
            TypeAlias(name="Ping", type=ReferenceType(name="Pong")),
            TypeAlias(name="Pong", type=ReferenceType(name="Ping")),
        ),
    )


@pytest.fixture
def context():
    config = CodeGeneratorConfig(exclude_types=["Range"], string_alias_types=["Pattern"])
    return GenerationContext.from_model(_model(), config)


@pytest.fixture
def codec(context):
    return CodecSynthesizer(context, TypeResolver(context))


class TestEncode:
    def test_scalars_pass_through(self, codec):
        assert codec.encode_expr(STRING, "self.x") == "self.x"
        assert codec.encode_expr(OrType(), "self.x") == "self.x"
        assert codec.encode_expr(MapType(key=STRING, value=STRING), "self.x") == "self.x"

    def test_reference(self, codec):
        assert codec.encode_expr(ReferenceType(name="Range"), "self.range") == "self.range.to_json()"
        assert codec.encode_expr(ReferenceType(name="MarkupKind"), "self.kind") == "self.kind.to_json()"

    def test_string_alias_is_raw(self, codec):
        assert codec.encode_expr(ReferenceType(name="Pattern"), "self.pattern") == "self.pattern"

    def test_union_alias_is_raw(self, codec):
        assert codec.encode_expr(ReferenceType(name="ProgressToken"), "self.token") == "self.token"

    def test_reference_alias_borrows_target(self, codec):
        assert codec.encode_expr(ReferenceType(name="Link"), "self.link") == "self.link.to_json()"

    def test_arrays(self, codec):
        assert codec.encode_expr(ArrayType(element=STRING), "self.xs") == "list(self.xs)"
        assert codec.encode_expr(ArrayType(element=ReferenceType(name="TextEdit")), "self.edits") == "[item.to_json() for item in self.edits]"
        assert codec.encode_expr(ReferenceType(name="Edits"), "self.edits") == "[item.to_json() for item in self.edits]"


class TestDecode:
    @pytest.mark.parametrize(
        "type_ref, expected",
        [
            (STRING, "_string_from_json(v)"),
            (BaseType(name="DocumentUri"), "_string_from_json(v)"),
            (BaseType(name="uinteger"), "_int_from_json(v)"),
            (BaseType(name="decimal"), "_float_from_json(v)"),
            (BaseType(name="boolean"), "_bool_from_json(v)"),
            (StringLiteralType(value="create"), "_string_from_json(v)"),
            (IntegerLiteralType(value=1), "_int_from_json(v)"),
        ],
    )
    def test_scalars_are_strict(self, codec, type_ref, expected):
        assert codec.decode_expr(type_ref, "v") == expected

    def test_escape_hatch_passes_through(self, codec):
        assert codec.decode_expr(OrType(), "v") == "v"
        assert codec.decode_expr(MapType(key=STRING, value=STRING), "v") == "v"
        assert codec.decode_expr(BaseType(name="null"), "v") == "v"

    def test_reference_uses_sanitized_name(self, codec, context):
        assert codec.decode_expr(ReferenceType(name="_InitializeParams"), "v") == "InitializeParams.from_json(v)"
        assert "InitializeParams" in context.referenced_types

    def test_excluded_reference(self, codec, context):
        assert codec.decode_expr(ReferenceType(name="Range"), "v") == "Range.from_json(v)"
        assert context.excluded_references() == ["Range"]

    def test_string_alias(self, codec):
        assert codec.decode_expr(ReferenceType(name="Pattern"), "v") == "_string_from_json(v)"

    def test_base_alias_borrows_target(self, codec):
        assert codec.decode_expr(ReferenceType(name="Uri"), "v") == "_string_from_json(v)"

    def test_alias_chain(self, codec):
        assert codec.decode_expr(ReferenceType(name="Link"), "v") == "TextEdit.from_json(v)"

    def test_cyclic_alias_chain_passes_through(self, codec):
        assert codec.decode_expr(ReferenceType(name="Ping"), "v") == "v"
        assert codec.encode_expr(ReferenceType(name="Ping"), "v") == "v"

    def test_unknown_reference(self, codec):
        assert codec.decode_expr(ReferenceType(name="Nowhere"), "v") == "Nowhere.from_json(v)"


class TestDecodeArrays:
    def test_string_items_default(self, codec):
        assert codec.decode_expr(ArrayType(element=STRING), "v") == '_list_from_json(v, lambda item: item if isinstance(item, str) else "")'

    def test_number_items_default(self, codec):
        assert codec.decode_expr(ArrayType(element=BaseType(name="integer")), "v") == "_list_from_json(v, lambda item: int(item) if _is_number(item) else 0)"
        assert codec.decode_expr(ArrayType(element=BaseType(name="decimal")), "v") == "_list_from_json(v, lambda item: float(item) if _is_number(item) else 0.0)"

    def test_boolean_items_default(self, codec):
        assert codec.decode_expr(ArrayType(element=BaseType(name="boolean")), "v") == "_list_from_json(v, lambda item: item if isinstance(item, bool) else False)"

    def test_reference_items(self, codec):
        assert codec.decode_expr(ArrayType(element=ReferenceType(name="TextEdit")), "v") == "_list_from_json(v, TextEdit.from_json)"

    def test_string_alias_items(self, codec):
        assert codec.decode_expr(ReferenceType(name="Tags"), "v") == '_list_from_json(v, lambda item: item if isinstance(item, str) else "")'

    def test_opaque_items(self, codec):
        assert codec.decode_expr(ArrayType(element=OrType()), "v") == "_list_from_json(v)"

    def test_nested_arrays(self, codec):
        nested = ArrayType(element=ArrayType(element=ReferenceType(name="TextEdit")))
        assert codec.decode_expr(nested, "v") == "_list_from_json(v, lambda item: _list_from_json(item, TextEdit.from_json))"


class TestProperties:
    def test_required_base(self, codec):
        prop = Property(name="newText", type=STRING)
        assert codec.decode_property(prop) == '_string_from_json(_required(obj, "newText"))'

    def test_optional_base(self, codec):
        prop = Property(name="label", type=STRING, optional=True)
        assert codec.decode_property(prop) == '_optional(obj, "label", _string_from_json)'

    def test_required_reference(self, codec):
        prop = Property(name="range", type=ReferenceType(name="Range"))
        assert codec.decode_property(prop) == 'Range.from_json(_required(obj, "range"))'

    def test_optional_reference(self, codec):
        prop = Property(name="kind", type=ReferenceType(name="MarkupKind"), optional=True)
        assert codec.decode_property(prop) == '_optional(obj, "kind", MarkupKind.from_json)'

    def test_optional_string_alias(self, codec):
        prop = Property(name="pattern", type=ReferenceType(name="Pattern"), optional=True)
        assert codec.decode_property(prop) == '_optional(obj, "pattern", _string_from_json)'

    def test_optional_union_alias(self, codec):
        prop = Property(name="workDoneToken", type=ReferenceType(name="ProgressToken"), optional=True)
        assert codec.decode_property(prop) == 'obj.get("workDoneToken")'

    def test_required_array(self, codec):
        prop = Property(name="edits", type=ArrayType(element=ReferenceType(name="TextEdit")))
        assert codec.decode_property(prop) == '_list_from_json(_required(obj, "edits"), TextEdit.from_json)'

    def test_optional_array(self, codec):
        prop = Property(name="tags", type=ArrayType(element=BaseType(name="uinteger")), optional=True)
        assert codec.decode_property(prop) == '_optional(obj, "tags", lambda value: _list_from_json(value, lambda item: int(item) if _is_number(item) else 0))'

    def test_escape_hatch(self, codec):
        required = Property(name="contents", type=OrType())
        optional = Property(name="changes", type=MapType(key=STRING, value=STRING), optional=True)
        assert codec.decode_property(required) == '_required(obj, "contents")'
        assert codec.decode_property(optional) == 'obj.get("changes")'

    def test_encode_property(self, codec):
        prop = Property(name="range", type=ReferenceType(name="Range"), optional=True)
        assert codec.encode_property(prop, "self.range") == "self.range.to_json()"


class TestEnumerations:
    def test_string_enum(self, codec, context):
        markup_kind = context.enumerations["MarkupKind"]
        assert codec.is_string_enumeration(markup_kind)
        assert codec.enum_codec(markup_kind)["EXPECTED"] == "string"
        assert codec.enum_value_literal(markup_kind, "markdown") == '"markdown"'

    def test_integer_enum(self, codec, context):
        sync_kind = context.enumerations["SyncKind"]
        assert not codec.is_string_enumeration(sync_kind)
        assert codec.enum_codec(sync_kind) == {"BASE": "int", "CHECK": "_is_number(json)", "SUBJECT": "int(json)", "EXPECTED": "number"}
        assert codec.enum_value_literal(sync_kind, 1) == "1"
        assert codec.enum_value_literal(sync_kind, 2.0) == "2"

    def test_string_literal_escaping(self, codec, context):
        markup_kind = context.enumerations["MarkupKind"]
        assert codec.enum_value_literal(markup_kind, 'say "hi"') == '"say \\"hi\\""'
