from __future__ import annotations

"""Parsers turning command text into :mod:`roster_manager.commands` requests.

Every parser applies the same checks in the same order:

1. the index preamble (when the command needs one) must be a positive integer,
   otherwise the command usage is reported;
2. single-valued prefixes may not repeat;
3. field values are validated in the fixed order name, student id, net-id,
   year, major, group, and the first failure is reported.
"""

import logging
import re
from typing import Callable, Dict, Optional

from .commands import (
    AddCommand,
    ClearCommand,
    Command,
    CommentCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    SORT_KEYS,
    SortCommand,
)
from .errors import (
    IndexOverflowError,
    InvalidIndexError,
    NotEditedError,
    UnknownCommandError,
    UsageFormatError,
)
from .fields import (
    parse_comment,
    parse_name,
    parse_optional_group,
    parse_optional_major,
    parse_optional_net_id,
    parse_optional_year,
    parse_student_id,
)
from .model import NameContainsKeywordsPredicate
from .parser_util import parse_index
from .person import EditPersonDescriptor, Person
from .schema import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    PERSON_PREFIXES,
    PREFIX_COMMENT,
    PREFIX_GROUP,
    PREFIX_MAJOR,
    PREFIX_NAME,
    PREFIX_NET_ID,
    PREFIX_STUDENT_ID,
    PREFIX_YEAR,
)
from .tokenizer import ArgumentMultimap, tokenize

LOGGER = logging.getLogger(__name__)

_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


def _usage_error(usage: str) -> UsageFormatError:
    return UsageFormatError(MESSAGE_INVALID_COMMAND_FORMAT % usage)


def _parse_required_index(preamble: str, usage: str) -> int:
    """Parse the index preamble, hiding the specific index error behind *usage*."""

    try:
        return parse_index(preamble)
    except (InvalidIndexError, IndexOverflowError) as exc:
        raise _usage_error(usage) from exc


def _optional_value(multimap: ArgumentMultimap, prefix: str, parse: Callable[[str], str]) -> Optional[str]:
    value = multimap.get_value(prefix)
    return parse(value) if value is not None else None


class AddCommandParser:
    def parse(self, args: str) -> AddCommand:
        multimap = tokenize(args, *PERSON_PREFIXES)
        required_present = multimap.is_present(PREFIX_NAME) and multimap.is_present(PREFIX_STUDENT_ID)
        if not required_present or multimap.get_preamble():
            raise _usage_error(AddCommand.MESSAGE_USAGE)

        multimap.verify_no_duplicate_prefixes_for(*PERSON_PREFIXES)

        name = parse_name(multimap.get_value(PREFIX_NAME) or "")
        student_id = parse_student_id(multimap.get_value(PREFIX_STUDENT_ID) or "")
        email = parse_optional_net_id(multimap.get_value(PREFIX_NET_ID) or "")
        year = parse_optional_year(multimap.get_value(PREFIX_YEAR) or "")
        major = parse_optional_major(multimap.get_value(PREFIX_MAJOR) or "")
        group = parse_optional_group(multimap.get_value(PREFIX_GROUP) or "")
        return AddCommand(Person(name, student_id, email, major, year, group))


class EditCommandParser:
    def parse(self, args: str) -> EditCommand:
        multimap = tokenize(args, *PERSON_PREFIXES)
        index = _parse_required_index(multimap.get_preamble(), EditCommand.MESSAGE_USAGE)

        multimap.verify_no_duplicate_prefixes_for(*PERSON_PREFIXES)

        # An empty group value is a real edit that clears the group
        descriptor = EditPersonDescriptor(
            name=_optional_value(multimap, PREFIX_NAME, parse_name),
            student_id=_optional_value(multimap, PREFIX_STUDENT_ID, parse_student_id),
            email=_optional_value(multimap, PREFIX_NET_ID, parse_optional_net_id),
            year=_optional_value(multimap, PREFIX_YEAR, parse_optional_year),
            major=_optional_value(multimap, PREFIX_MAJOR, parse_optional_major),
            group=_optional_value(multimap, PREFIX_GROUP, parse_optional_group),
        )
        if not descriptor.is_any_field_edited():
            raise NotEditedError(EditCommand.MESSAGE_NOT_EDITED)
        return EditCommand(index, descriptor)


class DeleteCommandParser:
    def parse(self, args: str) -> DeleteCommand:
        return DeleteCommand(_parse_required_index(args, DeleteCommand.MESSAGE_USAGE))


class CommentCommandParser:
    def parse(self, args: str) -> CommentCommand:
        multimap = tokenize(args, PREFIX_COMMENT)
        index = _parse_required_index(multimap.get_preamble(), CommentCommand.MESSAGE_USAGE)
        if not multimap.is_present(PREFIX_COMMENT):
            raise _usage_error(CommentCommand.MESSAGE_USAGE)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_COMMENT)
        return CommentCommand(index, parse_comment(multimap.get_value(PREFIX_COMMENT) or ""))


class FindCommandParser:
    def parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise _usage_error(FindCommand.MESSAGE_USAGE)
        return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


class SortCommandParser:
    def parse(self, args: str) -> SortCommand:
        field_name = args.strip().lower()
        if field_name not in SORT_KEYS:
            raise _usage_error(SortCommand.MESSAGE_USAGE)
        return SortCommand(field_name)


class ExportCommandParser:
    def parse(self, args: str) -> ExportCommand:
        filename = args.strip()
        if not filename:
            return ExportCommand()
        if not filename.lower().endswith(".xlsx") or "/" in filename or "\\" in filename:
            raise _usage_error(ExportCommand.MESSAGE_USAGE)
        return ExportCommand(filename)


def _no_arguments(command: Callable[[], Command]) -> Callable[[str], Command]:
    return lambda _args: command()


class RosterParser:
    """Splits user input into a command word and dispatches to its parser."""

    def __init__(self) -> None:
        self._parsers: Dict[str, Callable[[str], Command]] = {
            AddCommand.COMMAND_WORD: AddCommandParser().parse,
            EditCommand.COMMAND_WORD: EditCommandParser().parse,
            DeleteCommand.COMMAND_WORD: DeleteCommandParser().parse,
            CommentCommand.COMMAND_WORD: CommentCommandParser().parse,
            FindCommand.COMMAND_WORD: FindCommandParser().parse,
            SortCommand.COMMAND_WORD: SortCommandParser().parse,
            ExportCommand.COMMAND_WORD: ExportCommandParser().parse,
            ListCommand.COMMAND_WORD: _no_arguments(ListCommand),
            ClearCommand.COMMAND_WORD: _no_arguments(ClearCommand),
            HelpCommand.COMMAND_WORD: _no_arguments(HelpCommand),
            ExitCommand.COMMAND_WORD: _no_arguments(ExitCommand),
        }

    def parse_command(self, user_input: str) -> Command:
        match = _COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise _usage_error(HelpCommand.MESSAGE_USAGE)

        word = match.group("word")
        arguments = match.group("arguments")
        parser = self._parsers.get(word)
        if parser is None:
            LOGGER.debug("Unknown command word: %s", word)
            raise UnknownCommandError(MESSAGE_UNKNOWN_COMMAND)
        return parser(arguments)


__all__ = [
    "AddCommandParser",
    "EditCommandParser",
    "DeleteCommandParser",
    "CommentCommandParser",
    "FindCommandParser",
    "SortCommandParser",
    "ExportCommandParser",
    "RosterParser",
]
