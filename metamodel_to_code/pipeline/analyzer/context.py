"""
Per-run generation context.

Holds the lookup tables built once from the model and configuration,
plus the registry of already emitted names. A new context is created
for every generation run and never shared between runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import CodeGeneratorConfig
from ..schema_ast.nodes import Enumeration, SchemaModel, Structure, TypeAlias


@dataclass
class GenerationContext:
    """Lookup tables and emission state for one generation run."""

    # Names never emitted, compared against sanitized names
    exclude_types: frozenset[str] = frozenset()

    # Alias names decoded and encoded as raw strings, compared against schema names
    string_alias_types: frozenset[str] = frozenset()

    # Catalogs keyed by schema name
    structures: dict[str, Structure] = field(default_factory=dict)
    enumerations: dict[str, Enumeration] = field(default_factory=dict)
    type_aliases: dict[str, TypeAlias] = field(default_factory=dict)

    # Sanitized names already emitted
    generated_types: set[str] = field(default_factory=set)

    # Sanitized names referenced by emitted code
    referenced_types: set[str] = field(default_factory=set)

    @staticmethod
    def from_model(model: SchemaModel, config: CodeGeneratorConfig) -> GenerationContext:
        """Build a fresh context for one run over ``model``."""
        return GenerationContext(
            exclude_types=frozenset(config.exclude_types),
            string_alias_types=frozenset(config.string_alias_types),
            structures={s.name: s for s in model.structures},
            enumerations={e.name: e for e in model.enumerations},
            type_aliases={a.name: a for a in model.type_aliases},
        )

    def should_skip(self, name: str) -> bool:
        """Whether an entity with this sanitized name must not be generated."""
        return name in self.exclude_types or name in self.generated_types

    def register(self, name: str) -> None:
        self.generated_types.add(name)

    def note_reference(self, name: str) -> None:
        self.referenced_types.add(name)

    def excluded_references(self) -> list[str]:
        """Excluded names the emitted code refers to, sorted."""
        return sorted(self.referenced_types & self.exclude_types)
