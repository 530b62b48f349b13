"""
Pipeline - meta model to Python types and JSON codecs.

1. Parser: Parse metaModel.json into immutable model nodes
2. Analyzer: Flatten inheritance and resolve types
3. Backend: Synthesize codecs and render declarations
4. Formatter: Optional post-processing with ruff
5. Output: Atomic write of the generated module
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .generator import PipelineGenerator
from .output import AtomicWriter, OutputWriteError
from .schema_ast import MetaModelError, MetaModelParser, SchemaModel

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "MetaModelError",
    "MetaModelParser",
    "SchemaModel",
    "AtomicWriter",
    "OutputWriteError",
]
