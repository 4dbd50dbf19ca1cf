"""Validation layer for the storage document."""

from abbr_cli.validation.schemas import (
    validate_entry,
    validate_item,
    validate_storage_document,
)

__all__ = [
    "validate_entry",
    "validate_item",
    "validate_storage_document",
]
