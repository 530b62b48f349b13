"""
Property resolver for structure inheritance.

Flattens the ``extends`` and ``mixins`` edges of a structure into the
ordered list of properties the generated class carries.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..schema_ast.nodes import Property, ReferenceType, Structure, TypeRef


class PropertyResolver:
    """Collects the effective properties of structures."""

    def __init__(self, structures: Mapping[str, Structure]):
        """
        Initialize the resolver.

        Args:
            structures: Structure catalog keyed by schema name
        """
        self.structures = structures

    def flatten(self, structure: Structure) -> list[Property]:
        """
        Collect every property ``structure`` carries, inherited ones included.

        Properties come from the ``extends`` targets first, then the
        ``mixins`` targets, then the structure itself. A name seen once is
        never replaced: an ancestor's property wins over a same-named one
        declared lower in the hierarchy.

        Args:
            structure: The structure to flatten

        Returns:
            Properties in emission order, unique by name
        """
        return self._collect(structure, set())

    def _collect(self, structure: Structure, visited: set[str]) -> list[Property]:
        # Cyclic inheritance: a structure already visited contributes nothing
        if structure.name in visited:
            return []
        visited.add(structure.name)

        properties: list[Property] = []
        seen_names: set[str] = set()

        def add(candidates: Iterable[Property]) -> None:
            for prop in candidates:
                if prop.name not in seen_names:
                    properties.append(prop)
                    seen_names.add(prop.name)

        for parent in structure.extends:
            add(self._inherited(parent, visited))
        for mixin in structure.mixins:
            add(self._inherited(mixin, visited))
        add(structure.properties)

        return properties

    def _inherited(self, type_ref: TypeRef, visited: set[str]) -> list[Property]:
        """Properties contributed by one inheritance edge; unresolvable edges give none."""
        if not isinstance(type_ref, ReferenceType):
            return []
        target = self.structures.get(type_ref.name)
        if target is None:
            return []
        return self._collect(target, visited)
