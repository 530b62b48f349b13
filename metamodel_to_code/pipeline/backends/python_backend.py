"""
Python code generation backend.

Renders enumerations, structures and type aliases as Python source
using the jinja2 templates, with codecs from the CodecSynthesizer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from ...utils import format_doc, sanitize_enum_variant, sanitize_field_name, sanitize_type_name
from ..analyzer.context import GenerationContext
from ..analyzer.property_resolver import PropertyResolver
from ..analyzer.type_resolver import JSON_VALUE_TYPE, TypeResolver
from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import ArrayType, Enumeration, OrType, ReferenceType, Structure, TypeAlias, TypeRef
from .codec import CodecSynthesizer


class PythonBackend:
    """Renders meta model entities as Python declarations with JSON codecs."""

    # Template directory name
    TEMPLATE_LANG = "python"

    # File extension
    FILE_EXTENSION = "py"

    def __init__(self, config: CodeGeneratorConfig, context: GenerationContext):
        """
        Initialize the backend for one generation run.

        Args:
            config: Code generation configuration
            context: The run's lookup tables and registry
        """
        self.config = config
        self.context = context
        self.type_resolver = TypeResolver(context)
        self.property_resolver = PropertyResolver(context.structures)
        self.codec = CodecSynthesizer(context, self.type_resolver)
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.section_template = self.jinja_env.get_template(f"section.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.structure_template = self.jinja_env.get_template(f"structure.{self.FILE_EXTENSION}.jinja2")
        self.alias_template = self.jinja_env.get_template(f"alias.{self.FILE_EXTENSION}.jinja2")

    def render_prefix(self, version: str, generation_comment: str = "") -> str:
        """Render the banner, imports and the codec helpers."""
        return self._render(
            self.prefix_template,
            generation_comment=generation_comment,
            version=format_doc(version),
            core_types_module=self.config.core_types_module,
            core_imports=self.context.excluded_references() if self.config.core_types_module else [],
        )

    def render_section(self, title: str) -> str:
        return self._render(self.section_template, title=title)

    def render_enumeration(self, enumeration: Enumeration) -> str:
        """Render an Enum class with its to_json/from_json."""
        members = []
        for value in enumeration.values:
            members.append(
                {
                    "name": sanitize_enum_variant(value.name),
                    "value": self.codec.enum_value_literal(enumeration, value.value),
                    "doc": self._doc(value.documentation),
                }
            )

        return self._render(
            self.enum_template,
            CLASS_NAME=sanitize_type_name(enumeration.name),
            DOC=self._doc(enumeration.documentation),
            MEMBERS=members,
            **self.codec.enum_codec(enumeration),
        )

    def render_structure(self, structure: Structure) -> str:
        """Render a dataclass carrying the flattened properties of ``structure``."""
        fields = []
        for prop in self.property_resolver.flatten(structure):
            name = sanitize_field_name(prop.name)
            fields.append(
                {
                    "name": name,
                    "key": json.dumps(prop.name),
                    "type": self.type_resolver.resolve(prop.type, prop.optional),
                    "optional": prop.optional,
                    "encode": self.codec.encode_property(prop, f"self.{name}"),
                    "decode": self.codec.decode_property(prop),
                    "doc": self._doc(prop.documentation),
                }
            )

        return self._render(
            self.structure_template,
            CLASS_NAME=sanitize_type_name(structure.name),
            DOC=self._doc(structure.documentation),
            EXTENDS=self._inheritance_names(structure.extends),
            MIXINS=self._inheritance_names(structure.mixins),
            FIELDS=fields,
        )

    def _inheritance_names(self, type_refs: tuple[TypeRef, ...]) -> list[str]:
        # Only shown in a comment, so references are not recorded as used
        return [sanitize_type_name(t.name) if isinstance(t, ReferenceType) else self.type_resolver.resolve_name(t) for t in type_refs]

    def render_type_alias(self, alias: TypeAlias) -> str:
        """Render a type alias. Aliases have no codec of their own."""
        return self._render(
            self.alias_template,
            CLASS_NAME=sanitize_type_name(alias.name),
            DOC=self._doc(alias.documentation),
            TARGET=self.translate_alias_target(alias),
        )

    def translate_alias_target(self, alias: TypeAlias) -> str:
        match alias.type:
            case OrType():
                # Unions are never decoded, they stay opaque JSON
                return JSON_VALUE_TYPE
            case ReferenceType():
                return self.type_resolver.resolve_name(alias.type)
            case ArrayType():
                return f"list[{self.type_resolver.resolve(alias.type.element)}]"
            case _:
                return self.type_resolver.resolve(alias.type)

    def _doc(self, documentation: str | None) -> str:
        if not documentation:
            return ""
        return format_doc(documentation, self.config.doc_line_length)

    @staticmethod
    def _render(template: jinja2.Template, **context: Any) -> str:
        return template.render(**context).rstrip("\n")
