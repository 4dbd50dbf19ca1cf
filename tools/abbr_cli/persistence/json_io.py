"""JSON file I/O with atomic writes.

- Missing files are reported as NoSuchFileError so callers can recover
- Empty files read as "no document" rather than as an error
- Writes use the write-then-rename pattern
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from abbr_cli.errors import NoSuchFileError, ParsingError

logger = logging.getLogger(__name__)


def read_json_file(path: Path) -> Any | None:
    """Read and parse a JSON file.

    Args:
        path: File to read

    Returns:
        Parsed Python object, or None if the file is empty or whitespace

    Raises:
        NoSuchFileError: If the file doesn't exist
        ParsingError: If the content is not valid UTF-8 JSON
        OSError: For any other I/O failure (permissions, directories, ...)
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise NoSuchFileError(str(path)) from exc
    except UnicodeDecodeError as exc:
        raise ParsingError(str(path), f"not UTF-8 text ({exc.reason})") from exc

    if not raw.strip():
        logger.debug("Storage file %s is empty", path)
        return None

    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as exc:
        # Oversized integers raise a plain ValueError, deep nesting RecursionError
        raise ParsingError(str(path), str(exc) or type(exc).__name__) from exc


def write_json_file(path: Path, payload: Any) -> None:
    """Write content to a file atomically.

    1. Write to a temporary sibling file (path + ".tmp")
    2. Rename the temp file over the target

    Args:
        path: Target file path
        payload: Python object to serialize as JSON

    Invariants:
        - Parent directories are created if they don't exist
        - The target is either the old content or the complete new content
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(f"{path.suffix}.tmp")
    serialized = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    try:
        temp_path.write_text(serialized, encoding="utf-8")
        temp_path.replace(path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %d bytes to %s", len(serialized), path)
