from __future__ import annotations

"""Exception hierarchy shared by the parser, model and storage layers."""

from typing import Iterable, Tuple


class RosterError(Exception):
    """Base class for every user-facing roster failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# ------------------------------
# Parsing
# ------------------------------


class ParseError(RosterError):
    """Raised when user input does not conform to the expected format."""


class UsageFormatError(ParseError):
    """Malformed command shape, including a bad or overflowing index."""


class InvalidIndexError(ParseError):
    """Index is not a single non-zero unsigned integer."""


class IndexOverflowError(ParseError):
    """Index is numeric but larger than the supported maximum."""


class UnknownCommandError(ParseError):
    """Command word is not recognised."""


class NotEditedError(ParseError):
    """Edit command supplied no field to change."""


class ValidationError(ParseError):
    """Field content violates its constraint."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class DuplicatePrefixError(ParseError):
    """A single-valued prefix was supplied more than once."""

    def __init__(self, prefixes: Iterable[str], message: str) -> None:
        super().__init__(message)
        self.prefixes: Tuple[str, ...] = tuple(prefixes)


# ------------------------------
# Model / command execution
# ------------------------------


class CommandError(RosterError):
    """Raised when a parsed command cannot be executed against the model."""


class DuplicatePersonError(CommandError):
    """Operation would result in two persons sharing a student id."""

    def __init__(self, message: str = "Operation would result in duplicate persons") -> None:
        super().__init__(message)


class PersonNotFoundError(CommandError):
    """Target person is not in the roster."""

    def __init__(self, message: str = "The specified person could not be found in the roster") -> None:
        super().__init__(message)


# ------------------------------
# Persistence boundary
# ------------------------------


class StorageError(RosterError):
    """Reading or writing the roster file failed."""


class MissingFieldError(StorageError):
    """A stored record lacks a required field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Person's {field} field is missing!")
        self.field = field


class ConstraintError(StorageError):
    """A stored record carries a value that violates its field constraint."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


__all__ = [
    "RosterError",
    "ParseError",
    "UsageFormatError",
    "InvalidIndexError",
    "IndexOverflowError",
    "UnknownCommandError",
    "NotEditedError",
    "ValidationError",
    "DuplicatePrefixError",
    "CommandError",
    "DuplicatePersonError",
    "PersonNotFoundError",
    "StorageError",
    "MissingFieldError",
    "ConstraintError",
]
