"""
Exception hierarchy for spellforge.

The matching and scoring engines never raise: every lookup falls back to a
documented default. These exceptions cover the edges around them, loading
data files and reading configuration.
"""

from __future__ import annotations

from typing import Any


class SpellforgeError(Exception):
    """Base exception for all spellforge errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class VocabularyError(SpellforgeError):
    """Spell data could not be loaded or failed validation.

    Attributes:
        path: Data file involved, if any
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.path = path


class ConfigError(SpellforgeError):
    """Environment configuration is invalid."""
    pass


__all__ = ["SpellforgeError", "VocabularyError", "ConfigError"]
