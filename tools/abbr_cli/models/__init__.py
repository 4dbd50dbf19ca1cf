"""Domain models for the abbreviation dictionary.

- Entry and Item (meanings recorded for one abbreviation)
- StorageModification (partial update request)
- Common types (Abbreviation)
"""

from abbr_cli.models.common import Abbreviation, is_normalized_abbreviation, normalize_abbreviation
from abbr_cli.models.entry import Entry, Item
from abbr_cli.models.modification import StorageModification

__all__ = [
    # Common
    "Abbreviation",
    "is_normalized_abbreviation",
    "normalize_abbreviation",
    # Entry
    "Entry",
    "Item",
    # Modification
    "StorageModification",
]
