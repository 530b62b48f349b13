"""
Code generation backends.

Contains the codec synthesizer and the Python declaration renderer.
"""

from __future__ import annotations

from .codec import CodecSynthesizer
from .python_backend import PythonBackend

__all__ = [
    "CodecSynthesizer",
    "PythonBackend",
]
