"""Shape validation for the storage document.

Every problem is reported with a JSON path prefix so a broken file can be
fixed by hand. A document is only turned into a Storage once it passes.
"""

from __future__ import annotations

from typing import Any

from abbr_cli.config import (
    ACRONYM_KEY,
    COUNTER_KEY,
    DATA_KEY,
    DESCRIPTION_KEY,
    ITEMS_KEY,
    NAME_KEY,
)
from abbr_cli.errors import ValidationResult
from abbr_cli.models.common import is_normalized_abbreviation


def _is_int(value: Any, *, min_value: int | None = None) -> bool:
    """Check if value is an integer (not a bool) within an optional bound."""
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if min_value is not None and value < min_value:
        return False
    return True


def validate_item(item: Any, path: str, result: ValidationResult) -> None:
    """Validate a single stored meaning.

    Args:
        item: Item dictionary to validate
        path: JSON path for error messages
        result: Collector to add issues to
    """
    if not isinstance(item, dict):
        result.add(path, "expected object")
        return

    name = item.get(NAME_KEY)
    if not isinstance(name, str) or not name.strip():
        result.add(f"{path}.{NAME_KEY}", "required non-empty string")

    description = item.get(DESCRIPTION_KEY)
    if description is not None and not isinstance(description, str):
        result.add(f"{path}.{DESCRIPTION_KEY}", "expected string or null")


def validate_entry(key: str, entry: Any, path: str, result: ValidationResult) -> None:
    """Validate one abbreviation entry and the meanings inside it.

    Args:
        key: The key the entry is stored under in "data"
        entry: Entry dictionary to validate
        path: JSON path for error messages
        result: Collector to add issues to
    """
    if not is_normalized_abbreviation(key):
        result.add(path, "key must be a non-empty upper-case abbreviation")

    if not isinstance(entry, dict):
        result.add(path, "expected object")
        return

    acronym = entry.get(ACRONYM_KEY)
    if not isinstance(acronym, str):
        result.add(f"{path}.{ACRONYM_KEY}", "required string")
    elif acronym != key:
        result.add(f"{path}.{ACRONYM_KEY}", f"'{acronym}' does not match key '{key}'")

    items = entry.get(ITEMS_KEY)
    if not isinstance(items, list):
        result.add(f"{path}.{ITEMS_KEY}", "expected an array")
        return
    if not items:
        result.add(f"{path}.{ITEMS_KEY}", "expected at least one meaning")
        return

    seen_names: set[str] = set()
    for idx, item in enumerate(items):
        item_path = f"{path}.{ITEMS_KEY}[{idx}]"
        validate_item(item, item_path, result)
        name = item.get(NAME_KEY) if isinstance(item, dict) else None
        if isinstance(name, str):
            if name in seen_names:
                result.add(f"{item_path}.{NAME_KEY}", f"duplicate meaning '{name}'")
            seen_names.add(name)


def validate_storage_document(document: Any) -> ValidationResult:
    """Validate a parsed storage document.

    Args:
        document: Parsed JSON value

    Returns:
        ValidationResult; falsy when any issue was found
    """
    result = ValidationResult()

    if not isinstance(document, dict):
        result.add("$", "root must be an object")
        return result

    counter = document.get(COUNTER_KEY)
    if counter is not None and not _is_int(counter, min_value=0):
        result.add(f"$.{COUNTER_KEY}", "expected integer >= 0")

    data = document.get(DATA_KEY)
    if not isinstance(data, dict):
        result.add(f"$.{DATA_KEY}", "expected an object")
        return result

    for key, entry in data.items():
        validate_entry(key, entry, f"$.{DATA_KEY}.{key}", result)

    return result
