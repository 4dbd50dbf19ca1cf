"""Abbreviation commands.

This module provides the dictionary CLI commands:
- get: Print every meaning of an abbreviation
- put: Store a new meaning
- modify: Change the meaning or description of a stored meaning
- delete: Remove a stored meaning
- list: Print every stored abbreviation

Ids arrive from the command line 1-based and are converted to zero-based
positions before reaching Storage.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from abbr_cli.errors import NoSuchFileError, NoSuchItemError
from abbr_cli.models.common import normalize_abbreviation
from abbr_cli.models.modification import StorageModification
from abbr_cli.persistence import Storage

NOTHING_STORED = "Nothing stored yet. Use 'abbr put' to add an abbreviation."


def _to_index(user_id: int | None) -> int | None:
    """Convert a 1-based user id to a zero-based position."""
    return None if user_id is None else user_id - 1


def _load_or_empty(storage_path: Path) -> Storage:
    """Load the storage, starting from an empty one if the file doesn't exist."""
    try:
        return Storage.load(storage_path)
    except NoSuchFileError:
        return Storage()


def _load_existing(storage_path: Path, abbreviation: str) -> Storage:
    """Load the storage for an operation that needs a stored abbreviation.

    Raises:
        NoSuchItemError: If there is no storage file yet
    """
    try:
        return Storage.load(storage_path)
    except NoSuchFileError as exc:
        raise NoSuchItemError(normalize_abbreviation(abbreviation)) from exc


def cmd_get(storage_path: Path, args: argparse.Namespace) -> int:
    """Print every meaning of an abbreviation.

    Output:
        "<ABBR> has no matches", a single numbered meaning, or a numbered
        list under "<ABBR> is one of the following:"

    Returns:
        0 on success (also when nothing matches)
    """
    try:
        storage = Storage.load(storage_path)
    except NoSuchFileError:
        print(NOTHING_STORED)
        return 0

    print(storage.get(args.abbreviation))
    return 0


def cmd_put(storage_path: Path, args: argparse.Namespace) -> int:
    """Store a new meaning for an abbreviation.

    Returns:
        0 on success

    Raises:
        DuplicateEntryError: If the abbreviation already has this meaning
    """
    storage = _load_or_empty(storage_path)
    storage.put(args.abbreviation, args.meaning, args.description)
    storage.write(storage_path)

    entry = storage.get(args.abbreviation)
    print(f"Stored '{args.meaning}' as meaning {len(entry)} of {entry.acronym}")
    return 0


def cmd_modify(storage_path: Path, args: argparse.Namespace) -> int:
    """Change the meaning and/or description of a stored meaning.

    Returns:
        0 on success

    Raises:
        NoSuchItemError: If the abbreviation or id doesn't exist
        AmbiguousItemError: If several meanings exist and no id was given
        DuplicateEntryError: If the new meaning already exists
        InvalidValueError: If neither a meaning nor a description change was given
    """
    storage = _load_existing(storage_path, args.abbreviation)

    modification = StorageModification(args.abbreviation, item_id=_to_index(args.id))
    if args.meaning is not None:
        modification.with_name(args.meaning)
    if args.clear_description:
        modification.clear_description()
    elif args.description is not None:
        modification.with_description(args.description)

    item = storage.modify(modification)
    storage.write(storage_path)
    print(f"Updated {modification.abbreviation}: {item.name}")
    return 0


def cmd_delete(storage_path: Path, args: argparse.Namespace) -> int:
    """Remove a stored meaning.

    Returns:
        0 on success

    Raises:
        NoSuchItemError: If the abbreviation or id doesn't exist
        AmbiguousItemError: If several meanings exist and no id was given
    """
    storage = _load_existing(storage_path, args.abbreviation)
    item = storage.delete(args.abbreviation, _to_index(args.id))
    storage.write(storage_path)

    abbreviation = normalize_abbreviation(args.abbreviation)
    print(f"Removed '{item.name}' from {abbreviation}")
    return 0


def cmd_list(storage_path: Path, _args: argparse.Namespace) -> int:
    """List every stored abbreviation with its number of meanings.

    Returns:
        0 on success
    """
    try:
        storage = Storage.load(storage_path)
    except NoSuchFileError:
        print(NOTHING_STORED)
        return 0

    if not len(storage):
        print(NOTHING_STORED)
        return 0

    for abbreviation in storage.abbreviations():
        entry = storage.get(abbreviation)
        count = len(entry)
        noun = "meaning" if count == 1 else "meanings"
        print(f"{abbreviation:15} | {count} {noun} | {entry.items[0].name}")
    return 0
