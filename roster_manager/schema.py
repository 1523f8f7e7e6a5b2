from __future__ import annotations

"""Shared names: command prefixes, stored record keys and export columns."""

from typing import Tuple

# Command prefixes
PREFIX_NAME = "n/"
PREFIX_STUDENT_ID = "s/"
PREFIX_NET_ID = "e/"
PREFIX_MAJOR = "m/"
PREFIX_YEAR = "y/"
PREFIX_GROUP = "g/"
PREFIX_COMMENT = "c/"

# Order used when reporting duplicated prefixes
PERSON_PREFIXES: Tuple[str, ...] = (
    PREFIX_NAME,
    PREFIX_STUDENT_ID,
    PREFIX_NET_ID,
    PREFIX_MAJOR,
    PREFIX_YEAR,
    PREFIX_GROUP,
)

# Field labels (used in validation and missing-field messages)
FIELD_NAME = "Name"
FIELD_STUDENT_ID = "StudentId"
FIELD_EMAIL = "Email"
FIELD_MAJOR = "Major"
FIELD_YEAR = "Year"
FIELD_GROUP = "Group"
FIELD_COMMENT = "Comment"

# Keys in the JSON data file
KEY_PERSONS = "persons"
KEY_NAME = "name"
KEY_STUDENT_ID = "studentId"
KEY_EMAIL = "email"
KEY_MAJOR = "major"
KEY_YEAR = "year"
KEY_GROUP = "group"
KEY_COMMENT = "comment"

# Excel export columns
COLUMN_INDEX = "No."
COLUMN_NAME = "Name"
COLUMN_STUDENT_ID = "Student ID"
COLUMN_EMAIL = "Email"
COLUMN_MAJOR = "Major"
COLUMN_YEAR = "Year"
COLUMN_GROUP = "Group"
COLUMN_COMMENT = "Comment"

EXPORT_COLUMNS: Tuple[str, ...] = (
    COLUMN_INDEX,
    COLUMN_NAME,
    COLUMN_STUDENT_ID,
    COLUMN_EMAIL,
    COLUMN_MAJOR,
    COLUMN_YEAR,
    COLUMN_GROUP,
    COLUMN_COMMENT,
)
EXPORT_SHEET_NAME = "Roster"
GROUP_SHEET_NAME = "Groups"
COLUMN_GROUP_SIZE = "Students"

# User-facing messages shared across parsers and commands
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "%d persons listed!"
STATUS_FORMAT = "Currently displaying %d of %d Students."


def duplicate_prefixes_message(*prefixes: str) -> str:
    """Return the error message naming every duplicated prefix."""

    return MESSAGE_DUPLICATE_FIELDS + " ".join(prefixes)
