"""Persistence layer for the abbreviation dictionary.

This module exports file I/O and storage components:
- JSON parsing and atomic writes
- Storage file path resolution
- The Storage aggregate
"""

from abbr_cli.persistence.json_io import read_json_file, write_json_file
from abbr_cli.persistence.storage import Storage
from abbr_cli.persistence.storage_paths import (
    get_documents_dir,
    get_storage_dir,
    resolve_storage_path,
)

__all__ = [
    # JSON I/O
    "read_json_file",
    "write_json_file",
    # Storage Paths
    "get_documents_dir",
    "get_storage_dir",
    "resolve_storage_path",
    # Storage
    "Storage",
]
