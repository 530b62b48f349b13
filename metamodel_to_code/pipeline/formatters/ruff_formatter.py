"""
Ruff formatter for the generated module.
"""

from __future__ import annotations

import subprocess

from ..config import FormatterConfig
from .base import Formatter


class RuffFormatter(Formatter):
    """Formatter running ``ruff format`` on the generated code."""

    def __init__(self):
        self._available = None

    def is_available(self) -> bool:
        """Check if ruff is installed."""
        if self._available is None:
            try:
                result = subprocess.run(
                    ["ruff", "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Python code using ruff, reading stdin and writing stdout.

        Args:
            code: Python source code to format
            config: Formatter configuration

        Returns:
            Formatted code; the input unchanged if ruff is missing or fails
        """
        if not self.is_available():
            return code

        cmd = ["ruff", "format", "--stdin-filename", "generated.py"]
        if config.line_length:
            cmd.extend(["--line-length", str(config.line_length)])
        if config.target_version:
            cmd.extend(["--target-version", config.target_version])

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError:
            return code

        if result.returncode != 0:
            return code
        return result.stdout
