"""Configuration constants for the abbreviation dictionary.

This module centralizes file names, environment variable names and
output templates used across the CLI.
"""

from __future__ import annotations

from typing import Final

# -----------------------------------------------------------------------------
# Storage Location
# -----------------------------------------------------------------------------

DIRECTORY_NAME: Final[str] = "abbr"
"""Directory created inside the documents folder to hold the storage file."""

STORAGE_FILENAME: Final[str] = "storage.json"
"""Name of the JSON document holding every stored abbreviation."""

DOCUMENTS_DIRNAME: Final[str] = "Documents"
"""Fallback documents folder name under the user's home directory."""


# -----------------------------------------------------------------------------
# Environment Overrides
# -----------------------------------------------------------------------------

STORAGE_DIR_ENV: Final[str] = "ABBR_STORAGE_DIR"
"""Directory override for the storage file (takes precedence over documents)."""

DOCUMENTS_DIR_ENV: Final[str] = "XDG_DOCUMENTS_DIR"
"""Documents folder as published by xdg-user-dirs."""

LOG_LEVEL_ENV: Final[str] = "ABBR_LOG_LEVEL"
"""Log level name (DEBUG, INFO, ...) used when --verbose is not given."""


# -----------------------------------------------------------------------------
# Document Keys
# -----------------------------------------------------------------------------

DATA_KEY: Final[str] = "data"
ACRONYM_KEY: Final[str] = "acronym"
ITEMS_KEY: Final[str] = "items"
NAME_KEY: Final[str] = "name"
DESCRIPTION_KEY: Final[str] = "description"
COUNTER_KEY: Final[str] = "total_stored_items"
"""Written by counter-based storage files; accepted on read, never written."""


# -----------------------------------------------------------------------------
# Limits
# -----------------------------------------------------------------------------

MAX_REPORTED_ISSUES: Final[int] = 30
"""Number of validation issues spelled out before the rest are summarized."""
