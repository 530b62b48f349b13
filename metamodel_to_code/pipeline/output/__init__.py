"""
Output module.

Writes the generated module to disk.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, OutputWriteError

__all__ = [
    "AtomicWriter",
    "OutputWriteError",
]
