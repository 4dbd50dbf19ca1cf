"""Validate command for the storage file.

Loading performs the full shape check, so a successful load is a passing
validation. Problems surface as ParsingError at the CLI boundary.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from abbr_cli.persistence import Storage


def cmd_validate(storage_path: Path, _args: argparse.Namespace) -> int:
    """Validate the storage file.

    Returns:
        0 if the file is a valid storage document

    Raises:
        NoSuchFileError: If there is no storage file yet
        ParsingError: If the file is not a valid storage document

    Output:
        On success: "OK: N abbreviations, M meanings in <path>"
    """
    storage = Storage.load(storage_path)
    print(f"OK: {len(storage)} abbreviations, {storage.item_count} meanings in {storage_path}")
    return 0
