"""
Base class for formatters of the generated module.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Abstract base class for code formatters."""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format the generated module.

        Args:
            code: The generated Python source
            config: Formatter configuration

        Returns:
            Formatted code, or ``code`` unchanged when formatting is impossible
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the formatter can run in this environment."""
