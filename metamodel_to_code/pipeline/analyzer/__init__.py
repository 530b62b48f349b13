"""
Analyzer module.

Contains inheritance flattening, type resolution and the per-run context.
"""

from __future__ import annotations

from .context import GenerationContext
from .property_resolver import PropertyResolver
from .type_resolver import JSON_VALUE_TYPE, TypeResolver

__all__ = [
    "GenerationContext",
    "PropertyResolver",
    "TypeResolver",
    "JSON_VALUE_TYPE",
]
