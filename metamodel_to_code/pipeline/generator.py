"""
Pipeline generator: meta model document to one Python module.

Walks the model once, in a fixed order (enumerations, structures, type
aliases, each in declaration order), and concatenates the rendered
declarations behind a version banner and the codec prelude.
"""

from __future__ import annotations

from typing import Any

from .. import __version__
from ..cli_utils import reconstruct_command_line
from ..utils import sanitize_type_name
from .analyzer.context import GenerationContext
from .backends.python_backend import PythonBackend
from .config import CodeGeneratorConfig
from .formatters.ruff_formatter import RuffFormatter
from .schema_ast.nodes import SchemaModel
from .schema_ast.parser import MetaModelParser


class PipelineGenerator:
    """Generates Python types and JSON codecs from a meta model."""

    def __init__(self, document: dict[str, Any] | SchemaModel, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            document: Decoded metaModel.json content, or an already parsed model
            config: Code generation configuration

        Raises:
            MetaModelError: If the document is malformed
        """
        self.config = config or CodeGeneratorConfig()
        if isinstance(document, SchemaModel):
            self.model = document
        else:
            self.model = MetaModelParser().parse(document)

    def generate(self) -> str:
        """
        Generate the module.

        Every call starts from a fresh context, so repeated calls return
        identical text.

        Returns:
            The generated Python source
        """
        context = GenerationContext.from_model(self.model, self.config)
        backend = PythonBackend(self.config, context)

        body: list[str] = []

        body.append(backend.render_section("Enumerations"))
        for enumeration in self.model.enumerations:
            if self._claim(context, enumeration.name):
                body.append(backend.render_enumeration(enumeration))

        body.append(backend.render_section("Structures"))
        for structure in self.model.structures:
            if self._claim(context, structure.name):
                body.append(backend.render_structure(structure))

        body.append(backend.render_section("Type Aliases"))
        for alias in self.model.type_aliases:
            if self._claim(context, alias.name):
                body.append(backend.render_type_alias(alias))

        # The prefix goes last: its imports depend on what the body referenced
        prefix = backend.render_prefix(self.model.version, self._generation_comment())
        code = "\n\n".join([prefix, *body]) + "\n"

        if self.config.formatter.enabled:
            code = RuffFormatter().format(code, self.config.formatter)

        return code

    @staticmethod
    def _claim(context: GenerationContext, schema_name: str) -> bool:
        """Register an entity for emission; False if it is excluded or already emitted."""
        name = sanitize_type_name(schema_name)
        if context.should_skip(name):
            return False
        context.register(name)
        return True

    def _generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""

        try:
            from ..metamodel_to_code import metamodel_to_code as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "metamodel_to_code"

        return f"# Generated by metamodel_to_code v{__version__} : {command_line}"
