"""Configuration-time errors.

These are raised before any directory is visited and are always fatal,
regardless of the continue-on-error setting.
"""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid run configuration."""


class InvalidPatternError(ConfigurationError):
    def __init__(self, level: str, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid {level} pattern {pattern!r}: {reason}")
        self.level = level
        self.pattern = pattern


class MissingToolError(ConfigurationError):
    """The external image-integrity executable could not be located."""
