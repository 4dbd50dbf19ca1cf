"""The abbreviation storage.

Storage is the in-memory form of the storage document: a map from
upper-cased abbreviation to Entry. A CLI invocation loads it, applies one
query or mutation and, for mutations, writes the whole thing back.

Invariants:
    - every key equals the acronym of the Entry stored under it
    - no stored Entry is empty
    - Item names are unique within an Entry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from abbr_cli.config import DATA_KEY
from abbr_cli.errors import (
    AmbiguousItemError,
    DuplicateEntryError,
    InvalidValueError,
    NoSuchItemError,
)
from abbr_cli.models.common import Abbreviation, normalize_abbreviation
from abbr_cli.models.entry import Entry, Item
from abbr_cli.models.modification import StorageModification
from abbr_cli.persistence.json_io import read_json_file, write_json_file
from abbr_cli.validation import validate_storage_document

logger = logging.getLogger(__name__)


def _require_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidValueError(str(name), "meaning cannot be empty")
    return name


def _clean_description(description: str | None) -> str | None:
    """Blank descriptions are stored as no description."""
    if description is None or not description.strip():
        return None
    return description


@dataclass
class Storage:
    """Every stored abbreviation, keyed by its upper-cased form."""
    data: dict[Abbreviation, Entry] = field(default_factory=dict)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, document: dict[str, Any]) -> "Storage":
        """Create a Storage from a validated document."""
        data = {
            Abbreviation(key): Entry.from_dict(entry)
            for key, entry in document[DATA_KEY].items()
        }
        return cls(data=data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the storage document, keys in sorted order."""
        return {
            DATA_KEY: {key: self.data[key].to_dict() for key in sorted(self.data)},
        }

    @classmethod
    def load(cls, path: Path) -> "Storage":
        """Load a Storage from disk.

        Args:
            path: Storage document to read

        Returns:
            Loaded Storage; empty if the file is empty

        Raises:
            NoSuchFileError: If the file doesn't exist
            ParsingError: If the file is not a valid storage document
        """
        document = read_json_file(path)
        if document is None:
            return cls()

        result = validate_storage_document(document)
        if not result:
            raise result.to_error(str(path))

        storage = cls.from_dict(document)
        logger.debug(
            "Loaded %d abbreviations (%d meanings) from %s",
            len(storage), storage.item_count, path,
        )
        return storage

    def write(self, path: Path) -> None:
        """Replace the file at path with this Storage."""
        write_json_file(path, self.to_dict())

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, abbreviation: str) -> Entry:
        """Look up an abbreviation.

        Returns:
            A copy of the stored Entry, or an empty Entry if none is stored
        """
        key = normalize_abbreviation(abbreviation)
        entry = self.data.get(key)
        if entry is None:
            return Entry(acronym=key)
        return entry.copy()

    def abbreviations(self) -> list[Abbreviation]:
        """All stored abbreviations in sorted order."""
        return sorted(self.data)

    @property
    def item_count(self) -> int:
        """Number of meanings across all abbreviations."""
        return sum(len(entry) for entry in self.data.values())

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, abbreviation: object) -> bool:
        if not isinstance(abbreviation, str) or not abbreviation.strip():
            return False
        return normalize_abbreviation(abbreviation) in self.data

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def put(self, abbreviation: str, name: str, description: str | None = None) -> Item:
        """Store a new meaning for an abbreviation.

        Args:
            abbreviation: Abbreviation in any case
            name: Long form
            description: Optional free-text note

        Returns:
            The newly stored Item

        Raises:
            DuplicateEntryError: If the abbreviation already has this meaning
            InvalidValueError: If abbreviation or name is empty
        """
        key = normalize_abbreviation(abbreviation)
        _require_name(name)

        entry = self.data.get(key)
        if entry is not None and entry.has_item(name):
            raise DuplicateEntryError(key, name)

        item = Item(name=name, description=_clean_description(description))
        if entry is None:
            self.data[key] = Entry(acronym=key, items=[item])
        else:
            entry.items.append(item)
        logger.debug("Stored '%s' as meaning %d of %s", name, len(self.data[key]), key)
        return item

    def resolve_index(self, abbreviation: str, item_id: int | None) -> tuple[Entry, int]:
        """Find the Entry and the position of the Item an operation targets.

        Args:
            abbreviation: Abbreviation in any case
            item_id: Zero-based position, or None to pick the only Item

        Returns:
            Tuple of (stored Entry, zero-based index)

        Raises:
            NoSuchItemError: If the abbreviation or position doesn't exist
            AmbiguousItemError: If no id was given and several Items exist
        """
        key = normalize_abbreviation(abbreviation)
        entry = self.data.get(key)
        if entry is None:
            raise NoSuchItemError(key)

        if item_id is None:
            if len(entry) > 1:
                raise AmbiguousItemError(key, len(entry))
            return entry, 0

        if item_id < 0 or item_id >= len(entry):
            raise NoSuchItemError(key, item_id)
        return entry, item_id

    def modify(self, modification: StorageModification) -> Item:
        """Apply a partial update to one stored meaning.

        Only requested fields change. A requested description of None
        clears the description.

        Returns:
            The updated Item

        Raises:
            NoSuchItemError: If the target doesn't exist
            AmbiguousItemError: If no id was given and several Items exist
            DuplicateEntryError: If the new name is used by another Item
            InvalidValueError: If nothing was requested or the new name is empty
        """
        entry, index = self.resolve_index(modification.abbreviation, modification.item_id)
        if not modification.has_changes:
            raise InvalidValueError(modification.abbreviation, "nothing to modify")

        item = entry.items[index]

        if modification.name_requested:
            new_name = _require_name(modification.name)
            existing = entry.find_item(new_name)
            if existing is not None and existing != index:
                raise DuplicateEntryError(entry.acronym, new_name)
            item.name = new_name

        if modification.description_requested:
            item.description = _clean_description(modification.description)

        logger.debug("Modified meaning %d of %s", index + 1, entry.acronym)
        return item

    def delete(self, abbreviation: str, item_id: int | None = None) -> Item:
        """Remove one stored meaning.

        Removing the last meaning removes the abbreviation altogether.

        Args:
            abbreviation: Abbreviation in any case
            item_id: Zero-based position, or None to pick the only Item

        Returns:
            The removed Item

        Raises:
            NoSuchItemError: If the target doesn't exist
            AmbiguousItemError: If no id was given and several Items exist
        """
        entry, index = self.resolve_index(abbreviation, item_id)
        item = entry.items.pop(index)
        if not entry.items:
            del self.data[entry.acronym]
            logger.debug("Removed %s (no meanings left)", entry.acronym)
        else:
            logger.debug("Removed meaning %d of %s", index + 1, entry.acronym)
        return item
