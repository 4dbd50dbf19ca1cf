"""Storage file path resolution.

Locates the storage document for the current user. The result is handed
to Storage.load()/write() as a plain Path; nothing below this layer looks
at the environment.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from abbr_cli.config import (
    DIRECTORY_NAME,
    DOCUMENTS_DIR_ENV,
    DOCUMENTS_DIRNAME,
    STORAGE_DIR_ENV,
    STORAGE_FILENAME,
)
from abbr_cli.errors import StorageLocationError

logger = logging.getLogger(__name__)


def get_documents_dir(environ: Mapping[str, str]) -> Path:
    """Find the user's documents folder.

    Args:
        environ: Environment mapping to read overrides from

    Returns:
        $XDG_DOCUMENTS_DIR if set, otherwise ~/Documents

    Raises:
        StorageLocationError: If the home directory cannot be determined
    """
    documents = environ.get(DOCUMENTS_DIR_ENV)
    if documents:
        return Path(documents).expanduser()
    try:
        return Path.home() / DOCUMENTS_DIRNAME
    except RuntimeError as exc:
        raise StorageLocationError("could not find the documents folder") from exc


def get_storage_dir(environ: Mapping[str, str]) -> Path:
    """Get the directory that holds the storage file.

    Args:
        environ: Environment mapping to read overrides from

    Returns:
        $ABBR_STORAGE_DIR if set, otherwise <documents>/abbr
    """
    override = environ.get(STORAGE_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return get_documents_dir(environ) / DIRECTORY_NAME


def resolve_storage_path(
    storage_file: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Resolve the storage file path, creating its directory if needed.

    Args:
        storage_file: Explicit file path (e.g. from --storage-file)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Path to the storage document; the file itself may not exist yet

    Raises:
        StorageLocationError: If no location can be determined
        OSError: If the directory cannot be created
    """
    if storage_file is not None:
        path = storage_file.expanduser()
    else:
        path = get_storage_dir(os.environ if environ is None else environ) / STORAGE_FILENAME

    directory = path.parent
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.info("Created directory: %s", directory)
    return path
