"""Typed error hierarchy with explicit failure states.

- All domain errors extend CliError and carry structured context
- User-facing messages are derived from error type and context
- Errors are caught at the CLI boundary and formatted as a single line
"""

from __future__ import annotations

from dataclasses import dataclass, field

from abbr_cli.config import MAX_REPORTED_ISSUES


class CliError(RuntimeError):
    """Base error for all CLI operations.

    Subclasses provide structured context; the message passed to
    RuntimeError is the user-facing text. Never raise a raw CliError.
    """
    pass


class NoSuchFileError(CliError):
    """Storage file does not exist yet.

    Recoverable: `put` starts from an empty storage, `get` prints a
    friendly message.

    Attributes:
        path: The path that was expected to exist
    """
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Storage file {path} does not exist")


class ParsingError(CliError):
    """Storage file exists but could not be understood.

    Attributes:
        path: The file that failed to parse
        detail: Parser error message
        issues: Individual shape problems, if the JSON itself was valid
    """
    def __init__(self, path: str, detail: str, issues: list[str] | None = None) -> None:
        self.path = path
        self.detail = detail
        self.issues = list(issues or [])
        message = f"Could not read storage file {path}: {detail}"
        if self.issues:
            shown = "\n".join(f" - {issue}" for issue in self.issues[:MAX_REPORTED_ISSUES])
            hidden = len(self.issues) - MAX_REPORTED_ISSUES
            extra = "" if hidden <= 0 else f"\n - ... and {hidden} more"
            message = f"{message}\n{shown}{extra}"
        super().__init__(message)


class NoSuchItemError(CliError):
    """Abbreviation, or the requested meaning of it, is not stored.

    Attributes:
        abbreviation: The abbreviation that was looked up
        item_id: Zero-based position that was requested, if any
    """
    def __init__(self, abbreviation: str, item_id: int | None = None) -> None:
        self.abbreviation = abbreviation
        self.item_id = item_id
        if item_id is None:
            message = f"'{abbreviation}' is not stored"
        else:
            message = f"'{abbreviation}' has no meaning with id {item_id + 1}"
        super().__init__(message)


class AmbiguousItemError(CliError):
    """Several meanings are stored and no id was given.

    Attributes:
        abbreviation: The abbreviation with several meanings
        count: How many meanings it has
    """
    def __init__(self, abbreviation: str, count: int) -> None:
        self.abbreviation = abbreviation
        self.count = count
        super().__init__(
            f"'{abbreviation}' has {count} meanings; pick one with --id (1-{count})"
        )


class DuplicateEntryError(CliError):
    """The meaning is already stored for this abbreviation.

    Attributes:
        abbreviation: The abbreviation being written
        name: The meaning that already exists
    """
    def __init__(self, abbreviation: str, name: str) -> None:
        self.abbreviation = abbreviation
        self.name = name
        super().__init__(f"'{abbreviation}' already means '{name}'")


class InvalidValueError(CliError):
    """Input value could not be accepted.

    Attributes:
        raw_value: The original value
        detail: Explanation of the problem
    """
    def __init__(self, raw_value: str, detail: str) -> None:
        self.raw_value = raw_value
        self.detail = detail
        super().__init__(f"Invalid value: {detail}")


class StorageLocationError(CliError):
    """The storage directory could not be determined.

    Attributes:
        detail: Explanation of what was missing
    """
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Could not fetch path to program storage: {detail}")


@dataclass
class ValidationResult:
    """Aggregated problems found in a storage document.

    Invariants:
        - is_valid is True iff issues is empty
    """
    issues: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def add(self, path: str, message: str) -> None:
        """Record an issue at a JSON path (e.g. "$.data.CPU.items[0].name")."""
        self.issues.append(f"{path}: {message}")

    def to_error(self, path: str) -> ParsingError:
        """Convert to a ParsingError for raising."""
        return ParsingError(path, "unexpected document shape", self.issues)

    def __bool__(self) -> bool:
        return self.is_valid
