"""Meta Model to Code Generator

A Python package for generating typed Python declarations and paired
JSON codecs from a protocol meta model (metaModel.json).
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    FormatterConfig,
    MetaModelError,
    OutputConfig,
    OutputMode,
    OutputWriteError,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "MetaModelError",
    "OutputWriteError",
    "AtomicWriter",
]
