"""CLI commands for the abbreviation dictionary.

- entries: get, put, modify, delete, list
- validate: Storage file validation
"""

from abbr_cli.commands.entries import (
    cmd_delete,
    cmd_get,
    cmd_list,
    cmd_modify,
    cmd_put,
)
from abbr_cli.commands.validate import cmd_validate

__all__ = [
    # Entries
    "cmd_get",
    "cmd_put",
    "cmd_modify",
    "cmd_delete",
    "cmd_list",
    # Validate
    "cmd_validate",
]
