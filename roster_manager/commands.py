from __future__ import annotations

"""Command requests produced by the parsers and executed against the model."""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import ClassVar, Dict, Optional

from .config import EXPORT_DIR, EXPORT_FILENAME_FORMAT
from .errors import CommandError, DuplicatePersonError
from .model import NameContainsKeywordsPredicate, RosterModel, SortKey, show_all_persons
from .person import EditPersonDescriptor, Person, create_edited_person
from .report_builder import build_roster_tables, write_roster_workbook
from .schema import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    PREFIX_COMMENT,
    PREFIX_GROUP,
    PREFIX_MAJOR,
    PREFIX_NAME,
    PREFIX_NET_ID,
    PREFIX_STUDENT_ID,
    PREFIX_YEAR,
)

LOGGER = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "This person already exists in the roster"


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user plus flags the front end acts on."""

    feedback: str
    show_help: bool = False
    exit: bool = False


def format_person(person: Person) -> str:
    """Render *person* on one line for command feedback."""

    parts = [
        person.name,
        f"Student ID: {person.student_id}",
        f"Email: {person.email}",
        f"Major: {person.major}",
        f"Year: {person.year}",
        f"Group: {person.group}",
    ]
    if person.comment:
        parts.append(f"Comment: {person.comment}")
    return "; ".join(parts)


def _person_at(model: RosterModel, index: int) -> Person:
    """Return the person shown at 1-based *index* in the filtered view."""

    shown = model.filtered_persons
    if index > len(shown):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return shown[index - 1]


class Command:
    """Base class; subclasses set ``COMMAND_WORD`` and implement :meth:`execute`."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""
    # Whether a successful execution changes the stored roster
    MUTATES_ROSTER: ClassVar[bool] = False

    def execute(self, model: RosterModel) -> CommandResult:
        raise NotImplementedError


@dataclass(frozen=True)
class AddCommand(Command):
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a student to the roster. "
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_STUDENT_ID}STUDENT_ID "
        f"[{PREFIX_NET_ID}NETID] [{PREFIX_MAJOR}MAJOR] [{PREFIX_YEAR}YEAR] [{PREFIX_GROUP}GROUP]\n"
        f"Example: add {PREFIX_NAME}John Doe {PREFIX_STUDENT_ID}A0123456X {PREFIX_NET_ID}e1234567 "
        f"{PREFIX_MAJOR}Computer Science {PREFIX_YEAR}2 {PREFIX_GROUP}group 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New person added: %s"
    MUTATES_ROSTER: ClassVar[bool] = True

    person: Person

    def execute(self, model: RosterModel) -> CommandResult:
        if model.has_person(self.person):
            raise DuplicatePersonError(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(self.person))


@dataclass(frozen=True)
class EditCommand(Command):
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the student identified by the index number used in the displayed list. "
        "Existing values will be overwritten by the input values; an empty group value removes the group.\n"
        f"Parameters: INDEX (must be a positive integer) [{PREFIX_NAME}NAME] [{PREFIX_STUDENT_ID}STUDENT_ID] "
        f"[{PREFIX_NET_ID}NETID] [{PREFIX_MAJOR}MAJOR] [{PREFIX_YEAR}YEAR] [{PREFIX_GROUP}GROUP]\n"
        f"Example: edit 1 {PREFIX_NET_ID}e7654321 {PREFIX_YEAR}3"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Person: %s"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."
    MUTATES_ROSTER: ClassVar[bool] = True

    index: int
    descriptor: EditPersonDescriptor

    def execute(self, model: RosterModel) -> CommandResult:
        person_to_edit = _person_at(model, self.index)
        edited = create_edited_person(person_to_edit, self.descriptor)
        if not person_to_edit.is_same_person(edited) and model.has_person(edited):
            raise DuplicatePersonError(MESSAGE_DUPLICATE_PERSON)
        model.set_person(person_to_edit, edited)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(edited))


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the student identified by the index number used in the displayed list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Person: %s"
    MUTATES_ROSTER: ClassVar[bool] = True

    index: int

    def execute(self, model: RosterModel) -> CommandResult:
        person_to_delete = _person_at(model, self.index)
        model.delete_person(person_to_delete)
        return CommandResult(self.MESSAGE_SUCCESS % format_person(person_to_delete))


@dataclass(frozen=True)
class CommentCommand(Command):
    COMMAND_WORD: ClassVar[str] = "comment"
    MESSAGE_USAGE: ClassVar[str] = (
        "comment: Sets the comment of the student identified by the index number used in the displayed list. "
        "An empty comment removes it.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_COMMENT}COMMENT\n"
        f"Example: comment 1 {PREFIX_COMMENT}Needs help with tutorial 3"
    )
    MESSAGE_ADDED: ClassVar[str] = "Added comment to Person: %s"
    MESSAGE_REMOVED: ClassVar[str] = "Removed comment from Person: %s"
    MUTATES_ROSTER: ClassVar[bool] = True

    index: int
    comment: str

    def execute(self, model: RosterModel) -> CommandResult:
        person_to_edit = _person_at(model, self.index)
        edited = replace(person_to_edit, comment=self.comment)
        model.set_person(person_to_edit, edited)
        message = self.MESSAGE_ADDED if self.comment else self.MESSAGE_REMOVED
        return CommandResult(message % format_person(edited))


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all students.\nExample: list"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: RosterModel) -> CommandResult:
        model.update_filtered_person_list(show_all_persons)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FindCommand(Command):
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all students whose names contain any of the specified keywords (case-insensitive) "
        "and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: RosterModel) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW % len(model.filtered_persons))


SORT_KEYS: Dict[str, SortKey] = {
    "name": lambda person: person.name.casefold(),
    "id": lambda person: person.student_id,
    "year": lambda person: (person.year == "", person.year),
    "major": lambda person: (person.major == "", person.major.casefold()),
    "group": lambda person: (person.group == "", person.group.casefold()),
}


@dataclass(frozen=True)
class SortCommand(Command):
    COMMAND_WORD: ClassVar[str] = "sort"
    MESSAGE_USAGE: ClassVar[str] = (
        "sort: Sorts the displayed students by the given field; unset values go last.\n"
        f"Parameters: FIELD (one of: {', '.join(SORT_KEYS)})\n"
        "Example: sort name"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Sorted persons by %s"

    field_name: str

    def execute(self, model: RosterModel) -> CommandResult:
        model.update_sort_key(SORT_KEYS[self.field_name])
        return CommandResult(self.MESSAGE_SUCCESS % self.field_name)


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Removes every student from the roster.\nExample: clear"
    MESSAGE_SUCCESS: ClassVar[str] = "Roster has been cleared!"
    MUTATES_ROSTER: ClassVar[bool] = True

    def execute(self, model: RosterModel) -> CommandResult:
        model.reset_roster()
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ExportCommand(Command):
    COMMAND_WORD: ClassVar[str] = "export"
    MESSAGE_USAGE: ClassVar[str] = (
        "export: Writes the displayed students to an Excel workbook in the export folder.\n"
        "Parameters: [FILENAME.xlsx]\n"
        "Example: export tutorial_group.xlsx"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Exported %d persons to %s"
    MESSAGE_FAILED: ClassVar[str] = "Could not export roster to %s: %s"

    filename: Optional[str] = None
    export_dir: Path = field(default=EXPORT_DIR, compare=False)

    def target_path(self) -> Path:
        name = self.filename or datetime.now().strftime(EXPORT_FILENAME_FORMAT)
        return (self.export_dir / name).resolve()

    def execute(self, model: RosterModel) -> CommandResult:
        target = self.target_path()
        persons = model.filtered_persons
        roster_df, groups_df = build_roster_tables(persons)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            write_roster_workbook(str(target), roster_df, groups_df)
        except (OSError, ValueError) as exc:
            raise CommandError(self.MESSAGE_FAILED % (target, exc)) from exc
        LOGGER.info("Exported %d persons to %s", len(persons), target)
        return CommandResult(self.MESSAGE_SUCCESS % (len(persons), target))


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"
    MESSAGE_SUCCESS: ClassVar[str] = "Opened help window."

    def execute(self, model: RosterModel) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program.\nExample: exit"
    MESSAGE_SUCCESS: ClassVar[str] = "Exiting roster manager as requested ..."

    def execute(self, model: RosterModel) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)


ALL_COMMANDS = (
    AddCommand,
    EditCommand,
    CommentCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    SortCommand,
    ExportCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)


def help_text() -> str:
    """Return the usage of every command, one block per command."""

    return "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)
