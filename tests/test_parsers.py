import pytest

from conftest import (
    AMY,
    BOB,
    GROUP_DESC_FRIEND,
    GROUP_DESC_HUSBAND,
    INVALID_MAJOR_DESC,
    INVALID_NAME_DESC,
    INVALID_YEAR_DESC,
    MAJOR_DESC_AMY,
    MAJOR_DESC_BOB,
    NAME_DESC_AMY,
    NAME_DESC_BOB,
    NET_ID_DESC_AMY,
    NET_ID_DESC_BOB,
    STUDENT_ID_DESC_AMY,
    STUDENT_ID_DESC_BOB,
    VALID_NAME_BOB,
    VALID_STUDENT_ID_BOB,
    YEAR_DESC_AMY,
    YEAR_DESC_BOB,
)
from roster_manager.commands import (
    AddCommand,
    ClearCommand,
    CommentCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    SortCommand,
)
from roster_manager.errors import (
    DuplicatePrefixError,
    UnknownCommandError,
    UsageFormatError,
    ValidationError,
)
from roster_manager.fields import NAME_CONSTRAINTS, YEAR_CONSTRAINTS
from roster_manager.model import NameContainsKeywordsPredicate
from roster_manager.parsers import (
    AddCommandParser,
    CommentCommandParser,
    DeleteCommandParser,
    ExportCommandParser,
    FindCommandParser,
    RosterParser,
    SortCommandParser,
)
from roster_manager.person import EditPersonDescriptor, Person
from roster_manager.schema import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    PERSON_PREFIXES,
    PREFIX_COMMENT,
    PREFIX_NAME,
    PREFIX_YEAR,
    duplicate_prefixes_message,
)

BOB_DESC = NAME_DESC_BOB + STUDENT_ID_DESC_BOB + NET_ID_DESC_BOB + MAJOR_DESC_BOB + YEAR_DESC_BOB \
    + GROUP_DESC_HUSBAND


# ------------------------------
# add
# ------------------------------


def test_add_all_fields_present():
    assert AddCommandParser().parse(BOB_DESC) == AddCommand(BOB)
    # leading whitespace is ignored
    assert AddCommandParser().parse("   " + BOB_DESC) == AddCommand(BOB)


def test_add_optional_fields_missing():
    command = AddCommandParser().parse(NAME_DESC_BOB + STUDENT_ID_DESC_BOB)
    assert command == AddCommand(Person(VALID_NAME_BOB, VALID_STUDENT_ID_BOB))
    assert command.person.group == ""
    assert command.person.comment == ""


def test_add_compulsory_field_missing():
    expected = MESSAGE_INVALID_COMMAND_FORMAT % AddCommand.MESSAGE_USAGE
    for user_input in (STUDENT_ID_DESC_BOB, NAME_DESC_BOB, "Bob Choo A2222222B", "some preamble" + BOB_DESC):
        with pytest.raises(UsageFormatError) as excinfo:
            AddCommandParser().parse(user_input)
        assert str(excinfo.value) == expected


def test_add_repeated_prefixes():
    with pytest.raises(DuplicatePrefixError) as excinfo:
        AddCommandParser().parse(NAME_DESC_AMY + BOB_DESC)
    assert str(excinfo.value) == duplicate_prefixes_message(PREFIX_NAME)

    all_amy = NAME_DESC_AMY + STUDENT_ID_DESC_AMY + NET_ID_DESC_AMY + MAJOR_DESC_AMY + YEAR_DESC_AMY \
        + GROUP_DESC_FRIEND
    with pytest.raises(DuplicatePrefixError) as excinfo:
        AddCommandParser().parse(BOB_DESC + all_amy)
    assert excinfo.value.prefixes == PERSON_PREFIXES


def test_add_repeated_invalid_value_is_still_duplicate():
    with pytest.raises(DuplicatePrefixError) as excinfo:
        AddCommandParser().parse(BOB_DESC + INVALID_YEAR_DESC)
    assert str(excinfo.value) == duplicate_prefixes_message(PREFIX_YEAR)


def test_add_invalid_values():
    with pytest.raises(ValidationError) as excinfo:
        AddCommandParser().parse(INVALID_NAME_DESC + STUDENT_ID_DESC_BOB)
    assert str(excinfo.value) == NAME_CONSTRAINTS

    with pytest.raises(ValidationError) as excinfo:
        AddCommandParser().parse(NAME_DESC_BOB + STUDENT_ID_DESC_BOB + INVALID_MAJOR_DESC + INVALID_YEAR_DESC)
    assert str(excinfo.value) == YEAR_CONSTRAINTS

    with pytest.raises(ValidationError) as excinfo:
        AddCommandParser().parse(NAME_DESC_BOB + STUDENT_ID_DESC_BOB + INVALID_YEAR_DESC)
    assert str(excinfo.value) == YEAR_CONSTRAINTS


def test_add_amy_without_group():
    user_input = NAME_DESC_AMY + STUDENT_ID_DESC_AMY + NET_ID_DESC_AMY + MAJOR_DESC_AMY + YEAR_DESC_AMY
    command = AddCommandParser().parse(user_input)
    assert command.person.group == ""
    assert command.person == AMY


# ------------------------------
# delete / comment
# ------------------------------


def test_delete_valid_index():
    assert DeleteCommandParser().parse(" 1") == DeleteCommand(1)


@pytest.mark.parametrize("args", ["a", "", "0", "-1", "1 2", "99999999999"])
def test_delete_invalid_index(args):
    with pytest.raises(UsageFormatError) as excinfo:
        DeleteCommandParser().parse(args)
    assert str(excinfo.value) == MESSAGE_INVALID_COMMAND_FORMAT % DeleteCommand.MESSAGE_USAGE


def test_comment_parsing():
    assert CommentCommandParser().parse(" 2 c/ Needs help  ") == CommentCommand(2, "Needs help")
    assert CommentCommandParser().parse("2 c/") == CommentCommand(2, "")


def test_comment_failures():
    usage = MESSAGE_INVALID_COMMAND_FORMAT % CommentCommand.MESSAGE_USAGE
    for args in ("2", "c/hello", "x c/hello"):
        with pytest.raises(UsageFormatError) as excinfo:
            CommentCommandParser().parse(args)
        assert str(excinfo.value) == usage

    with pytest.raises(DuplicatePrefixError) as excinfo:
        CommentCommandParser().parse("1 c/one c/two")
    assert str(excinfo.value) == duplicate_prefixes_message(PREFIX_COMMENT)


# ------------------------------
# find / sort / export
# ------------------------------


def test_find_keywords():
    expected = FindCommand(NameContainsKeywordsPredicate(("Alice", "Bob")))
    assert FindCommandParser().parse("Alice Bob") == expected
    assert FindCommandParser().parse(" \n Alice \n \t Bob  \t") == expected


def test_find_empty_args():
    with pytest.raises(UsageFormatError):
        FindCommandParser().parse("     ")


def test_sort_fields():
    assert SortCommandParser().parse(" Name ") == SortCommand("name")
    with pytest.raises(UsageFormatError):
        SortCommandParser().parse("height")


def test_export_filename():
    assert ExportCommandParser().parse("") == ExportCommand()
    assert ExportCommandParser().parse(" group1.xlsx ") == ExportCommand("group1.xlsx")
    for args in ("notes.txt", "../escape.xlsx", "dir\\file.xlsx"):
        with pytest.raises(UsageFormatError):
            ExportCommandParser().parse(args)


# ------------------------------
# dispatch
# ------------------------------


def test_roster_parser_dispatch():
    parser = RosterParser()
    assert parser.parse_command("add" + BOB_DESC) == AddCommand(BOB)
    assert parser.parse_command("edit 1 n/John Tan") == EditCommand(1, EditPersonDescriptor(name="John Tan"))
    assert parser.parse_command("delete 3") == DeleteCommand(3)
    assert parser.parse_command("list") == ListCommand()
    assert parser.parse_command("list 3") == ListCommand()
    assert parser.parse_command("clear") == ClearCommand()
    assert parser.parse_command("help") == HelpCommand()
    assert parser.parse_command("exit") == ExitCommand()
    assert parser.parse_command("sort year") == SortCommand("year")


def test_roster_parser_errors():
    parser = RosterParser()
    with pytest.raises(UsageFormatError) as excinfo:
        parser.parse_command("   ")
    assert str(excinfo.value) == MESSAGE_INVALID_COMMAND_FORMAT % HelpCommand.MESSAGE_USAGE

    with pytest.raises(UnknownCommandError) as excinfo:
        parser.parse_command("unknownCommand")
    assert str(excinfo.value) == MESSAGE_UNKNOWN_COMMAND
