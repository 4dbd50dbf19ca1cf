"""Logging configuration for the CLI.

Log records go to stderr so stdout carries only command output. Modules
log through ``logging.getLogger(__name__)``; this is called once from
``cli.main``.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from abbr_cli.config import LOG_LEVEL_ENV

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "abbr_cli.stderr"


def _parse_level(value: str | None) -> Optional[int]:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant.

    Returns None if the value is empty or unrecognized.
    """
    if not value:
        return None
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else None


def configure_logging(
    verbose: bool = False,
    *,
    environ: Mapping[str, str] | None = None,
) -> logging.Logger:
    """Initialize logging and return the package logger.

    Level: DEBUG with --verbose, else $ABBR_LOG_LEVEL, else WARNING.
    """
    env = os.environ if environ is None else environ
    if verbose:
        level = logging.DEBUG
    else:
        level = _parse_level(env.get(LOG_LEVEL_ENV)) or logging.WARNING

    logger = logging.getLogger("abbr_cli")
    logger.setLevel(level)
    # Replace rather than reuse: sys.stderr may have been swapped since the last call.
    for old in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(old)
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
