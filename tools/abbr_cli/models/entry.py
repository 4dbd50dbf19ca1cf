"""Domain models for stored abbreviations.

An Entry groups every meaning (Item) recorded for one abbreviation.
Item order is significant: the position of an Item inside its Entry is
the id the user refers to it by (shown 1-based on the command line).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from abbr_cli.config import ACRONYM_KEY, DESCRIPTION_KEY, ITEMS_KEY, NAME_KEY
from abbr_cli.models.common import Abbreviation


@dataclass
class Item:
    """One recorded meaning of an abbreviation.

    Invariants:
        - name is non-empty
        - no other Item in the same Entry has the same name
    """
    name: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Create an Item from a validated storage dictionary."""
        return cls(
            name=str(data[NAME_KEY]),
            description=data.get(DESCRIPTION_KEY),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization.

        The description key is always present (null when unset).
        """
        return {
            NAME_KEY: self.name,
            DESCRIPTION_KEY: self.description,
        }

    def render(self, position: int) -> str:
        """Render as a numbered line, with the description indented below it.

        Args:
            position: 1-based number shown to the user
        """
        line = f" {position}) {self.name}"
        if self.description:
            line += f"\n    {self.description}"
        return line


@dataclass
class Entry:
    """All meanings recorded for one abbreviation.

    Invariants:
        - acronym is the upper-cased abbreviation and equals its storage key
        - items keep insertion order
        - a persisted Entry has at least one Item
    """
    acronym: Abbreviation
    items: list[Item] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Create an Entry from a validated storage dictionary."""
        return cls(
            acronym=Abbreviation(str(data[ACRONYM_KEY])),
            items=[Item.from_dict(item) for item in data[ITEMS_KEY]],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            ACRONYM_KEY: self.acronym,
            ITEMS_KEY: [item.to_dict() for item in self.items],
        }

    def copy(self) -> "Entry":
        """Return an independent copy; changing it leaves this Entry alone."""
        return Entry(
            acronym=self.acronym,
            items=[Item(item.name, item.description) for item in self.items],
        )

    def find_item(self, name: str) -> int | None:
        """Return the position of the Item with this name, or None."""
        for index, item in enumerate(self.items):
            if item.name == name:
                return index
        return None

    def has_item(self, name: str) -> bool:
        return self.find_item(name) is not None

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        if not self.items:
            return f"{self.acronym} has no matches"
        if len(self.items) == 1:
            header = f"{self.acronym}:"
        else:
            header = f"{self.acronym} is one of the following:"
        lines = [header]
        lines.extend(item.render(index) for index, item in enumerate(self.items, start=1))
        return "\n".join(lines)
