"""Common types shared across domain models."""

from __future__ import annotations

from typing import NewType

from abbr_cli.errors import InvalidValueError

# -----------------------------------------------------------------------------
# Abbreviation Type
# -----------------------------------------------------------------------------

Abbreviation = NewType("Abbreviation", str)
"""Branded string for a normalized (stripped, upper-cased) abbreviation.

Use normalize_abbreviation() to convert raw user text safely.
"""


def normalize_abbreviation(value: str) -> Abbreviation:
    """Convert raw text to the canonical storage key.

    Args:
        value: Abbreviation as typed by the user

    Returns:
        Upper-cased abbreviation with surrounding whitespace removed

    Raises:
        InvalidValueError: If nothing is left after stripping

    Example:
        >>> normalize_abbreviation(" cpu ")
        Abbreviation('CPU')
    """
    normalized = value.strip().upper() if isinstance(value, str) else ""
    if not normalized:
        raise InvalidValueError(str(value), "abbreviation cannot be empty")
    return Abbreviation(normalized)


def is_normalized_abbreviation(value: object) -> bool:
    """Check if a value is already in canonical form."""
    return isinstance(value, str) and bool(value) and value == value.strip().upper()
