"""
Configuration for the code generator pipeline.

Holds the two name sets that shape the generated module (types to skip
and aliases to treat as plain strings) together with formatter and
output options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Types already hand-written in the core module - never generated
DEFAULT_EXCLUDE_TYPES = [
    "Position",
    "Range",
    "Location",
    "DocumentUri",
    "URI",
    "TextDocumentIdentifier",
    "TextDocumentItem",
    "VersionedTextDocumentIdentifier",
    "TextDocumentPositionParams",
    "DiagnosticSeverity",
    "DiagnosticTag",
    "DiagnosticRelatedInformation",
    "Diagnostic",
    "PublishDiagnosticsParams",
]

# Type aliases that are plain string wrappers - serialized as raw strings
DEFAULT_STRING_ALIAS_TYPES = [
    "ChangeAnnotationIdentifier",
    "Pattern",
    "RegularExpressionEngineKind",
]


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to syntax-check code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters."""

    # Whether formatting is enabled
    enabled: bool = False

    # Line length for the formatter
    line_length: int = 100

    # Python version target (e.g., "py312", "py313")
    target_version: str = "py312"


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Entity names that must never be emitted (hand-authored elsewhere)
    exclude_types: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_TYPES))

    # Alias names treated as raw strings wherever they are used
    string_alias_types: list[str] = field(default_factory=lambda: list(DEFAULT_STRING_ALIAS_TYPES))

    # Module the excluded types are imported from (empty = no import)
    core_types_module: str = ""

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Maximum length of the one-line documentation comments
    doc_line_length: int = 100

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "exclude_types": self.exclude_types,
            "string_alias_types": self.string_alias_types,
            "core_types_module": self.core_types_module,
            "add_generation_comment": self.add_generation_comment,
            "doc_line_length": self.doc_line_length,
            "formatter": {
                "enabled": self.formatter.enabled,
                "line_length": self.formatter.line_length,
                "target_version": self.formatter.target_version,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
