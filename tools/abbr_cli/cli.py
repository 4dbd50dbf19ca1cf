#!/usr/bin/env python3
"""CLI entry point for the abbreviation dictionary.

This module provides the argument parser and main entry point that
wires together all commands from the commands package.

Usage:
    abbr get CPU
    abbr put CPU "Central Processing Unit" --description "Runs the instructions"
    abbr modify CPU --id 2 --clear-description
    abbr delete CPU --id 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from abbr_cli import __version__
from abbr_cli.commands import (
    cmd_delete,
    cmd_get,
    cmd_list,
    cmd_modify,
    cmd_put,
    cmd_validate,
)
from abbr_cli.errors import CliError
from abbr_cli.logging_setup import configure_logging
from abbr_cli.persistence import resolve_storage_path

logger = logging.getLogger(__name__)


def _configure_stdio_utf8() -> None:
    """Make sure non-ASCII meanings can be printed on Windows terminals.

    Windows consoles may default to a code page that can't handle Unicode.
    This reconfigures stdout/stderr to use UTF-8 if possible.
    """
    stdout = getattr(sys, "stdout", None)
    stderr = getattr(sys, "stderr", None)
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]
    if hasattr(stderr, "reconfigure"):
        stderr.reconfigure(encoding="utf-8")  # type: ignore[attr-defined]


def _non_empty(value: str) -> str:
    """argparse type: reject empty or whitespace-only text."""
    if not value.strip():
        raise argparse.ArgumentTypeError("value cannot be empty")
    return value


def _user_id(value: str) -> int:
    """argparse type: 1-based meaning id."""
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a whole number") from None
    if parsed < 1:
        raise argparse.ArgumentTypeError("ids start at 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the complete argument parser with all subcommands.

    Returns:
        Configured ArgumentParser with subcommands for:
        get, put, modify, delete, list, validate
    """
    parser = argparse.ArgumentParser(
        prog="abbr",
        description="Store and look up abbreviations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  abbr put CPU "Central Processing Unit"
  abbr put cpu "Critical Path Utility" --description "Project planning"
  abbr get cpu
  abbr modify CPU --id 2 --meaning "Critical Path Unit"
  abbr modify CPU --id 2 --clear-description
  abbr delete CPU --id 2
  abbr list
""",
    )
    parser.add_argument(
        "--storage-file",
        type=Path,
        help="Storage file to use (default: <documents>/abbr/storage.json).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # get
    get_parser = subparsers.add_parser("get", help="Resolve an abbreviation.")
    get_parser.add_argument(
        "abbreviation", type=_non_empty, help="The abbreviation you want to look up."
    )
    get_parser.set_defaults(handler=cmd_get)

    # put
    put_parser = subparsers.add_parser("put", help="Add a new abbreviation.")
    put_parser.add_argument(
        "abbreviation", type=_non_empty, help="The abbreviation you want to add."
    )
    put_parser.add_argument("meaning", type=_non_empty, help="What it means.")
    put_parser.add_argument("--description", help="Optional note about the meaning.")
    put_parser.set_defaults(handler=cmd_put)

    # modify
    modify_parser = subparsers.add_parser(
        "modify",
        help="Change a stored meaning or its description.",
    )
    modify_parser.add_argument(
        "abbreviation", type=_non_empty, help="The abbreviation to modify."
    )
    modify_parser.add_argument(
        "--id",
        type=_user_id,
        help="Which meaning to modify (as numbered by 'get'); required if there are several.",
    )
    modify_parser.add_argument("--meaning", type=_non_empty, help="New meaning text.")
    description_group = modify_parser.add_mutually_exclusive_group()
    description_group.add_argument("--description", help="New description.")
    description_group.add_argument(
        "--clear-description",
        action="store_true",
        help="Remove the existing description.",
    )
    modify_parser.set_defaults(handler=cmd_modify)

    # delete
    delete_parser = subparsers.add_parser("delete", help="Remove a stored meaning.")
    delete_parser.add_argument(
        "abbreviation", type=_non_empty, help="The abbreviation to remove a meaning from."
    )
    delete_parser.add_argument(
        "--id",
        type=_user_id,
        help="Which meaning to remove (as numbered by 'get'); required if there are several.",
    )
    delete_parser.set_defaults(handler=cmd_delete)

    # list
    list_parser = subparsers.add_parser("list", help="List all stored abbreviations.")
    list_parser.set_defaults(handler=cmd_list)

    # validate
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that the storage file is well formed.",
    )
    validate_parser.set_defaults(handler=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)

    Handles:
        - CliError: User-facing error messages
        - OSError: Permissions, disk full, and other I/O failures
    """
    _configure_stdio_utf8()
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        storage_path = resolve_storage_path(args.storage_file)
        logger.debug("Using storage file %s", storage_path)
        handler = getattr(args, "handler", None)
        if handler is None:
            parser.print_help()
            return 1
        return int(handler(storage_path, args))
    except CliError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
