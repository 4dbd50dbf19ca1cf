"""Partial update request for one stored meaning."""

from __future__ import annotations

from dataclasses import dataclass, field

from abbr_cli.models.common import Abbreviation, normalize_abbreviation


@dataclass
class StorageModification:
    """Describe which fields of one Item should change.

    Built by the caller, consumed once by Storage.modify(). Fields that
    were never requested are left untouched on the target Item; a
    requested description of None clears the existing one.

    Example:
        >>> StorageModification("cpu").with_name("Central Processing Unit")
        >>> StorageModification("cpu", item_id=1).clear_description()

    Invariants:
        - abbreviation is normalized
        - item_id, when given, is a zero-based position
    """
    abbreviation: Abbreviation
    item_id: int | None = None
    name: str | None = field(default=None, init=False)
    description: str | None = field(default=None, init=False)
    name_requested: bool = field(default=False, init=False)
    description_requested: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.abbreviation = normalize_abbreviation(self.abbreviation)

    def with_name(self, name: str) -> "StorageModification":
        """Request a new meaning text."""
        self.name = name
        self.name_requested = True
        return self

    def with_description(self, description: str | None) -> "StorageModification":
        """Request a new description; None clears it."""
        self.description = description
        self.description_requested = True
        return self

    def clear_description(self) -> "StorageModification":
        """Request removal of the existing description."""
        return self.with_description(None)

    @property
    def has_changes(self) -> bool:
        return self.name_requested or self.description_requested
