from dataclasses import replace

import pytest

from conftest import ALICE, AMY, BENSON, CARL, DANIEL
from roster_manager.commands import (
    AddCommand,
    ClearCommand,
    CommentCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    SortCommand,
    format_person,
    help_text,
)
from roster_manager.errors import CommandError, DuplicatePersonError
from roster_manager.model import NameContainsKeywordsPredicate
from roster_manager.person import EditPersonDescriptor
from roster_manager.schema import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX, MESSAGE_PERSONS_LISTED_OVERVIEW


def test_add_command(model):
    result = AddCommand(AMY).execute(model)
    assert result.feedback == AddCommand.MESSAGE_SUCCESS % format_person(AMY)
    assert model.roster.as_list()[-1] == AMY


def test_add_duplicate_student_id_leaves_roster_unchanged(model):
    before = model.roster.as_list()
    with pytest.raises(DuplicatePersonError):
        AddCommand(replace(AMY, student_id=ALICE.student_id)).execute(model)
    assert model.roster.as_list() == before


def test_edit_name_only_at_index_one(model):
    result = EditCommand(1, EditPersonDescriptor(name="John Tan")).execute(model)
    edited = model.roster.as_list()[0]
    assert edited == replace(ALICE, name="John Tan")
    assert edited.group == ALICE.group
    assert model.roster.as_list()[1:] == [BENSON, CARL, DANIEL]
    assert result.feedback == EditCommand.MESSAGE_SUCCESS % format_person(edited)


def test_edit_uses_filtered_index(model):
    model.update_filtered_person_list(NameContainsKeywordsPredicate(("Meier",)))
    EditCommand(2, EditPersonDescriptor(year="5")).execute(model)
    assert model.roster.as_list()[3].year == "5"


def test_edit_reset_group(model):
    EditCommand(1, EditPersonDescriptor(group="")).execute(model)
    assert model.roster.as_list()[0].group == ""


def test_edit_duplicate_student_id(model):
    with pytest.raises(DuplicatePersonError):
        EditCommand(1, EditPersonDescriptor(student_id=BENSON.student_id)).execute(model)
    assert model.roster.as_list()[0] == ALICE


def test_index_out_of_range(model):
    for command in (
        EditCommand(5, EditPersonDescriptor(name="John Tan")),
        DeleteCommand(5),
        CommentCommand(5, "hello"),
    ):
        with pytest.raises(CommandError) as excinfo:
            command.execute(model)
        assert str(excinfo.value) == MESSAGE_INVALID_PERSON_DISPLAYED_INDEX


def test_delete_command(model):
    result = DeleteCommand(2).execute(model)
    assert result.feedback == DeleteCommand.MESSAGE_SUCCESS % format_person(BENSON)
    assert model.roster.as_list() == [ALICE, CARL, DANIEL]


def test_comment_command(model):
    result = CommentCommand(1, "Great participation").execute(model)
    assert model.roster.as_list()[0].comment == "Great participation"
    assert result.feedback.startswith("Added comment")

    result = CommentCommand(1, "").execute(model)
    assert model.roster.as_list()[0].comment == ""
    assert result.feedback.startswith("Removed comment")


def test_find_and_list(model):
    result = FindCommand(NameContainsKeywordsPredicate(("Kurz", "Elle"))).execute(model)
    assert result.feedback == MESSAGE_PERSONS_LISTED_OVERVIEW % 1
    assert model.filtered_persons == (CARL,)

    result = ListCommand().execute(model)
    assert result.feedback == ListCommand.MESSAGE_SUCCESS
    assert len(model.filtered_persons) == 4


def test_sort_command_puts_unset_last(model):
    SortCommand("group").execute(model)
    assert model.filtered_persons[-1] == DANIEL
    SortCommand("name").execute(model)
    assert [p.name for p in model.filtered_persons] == ["Alice Pauline", "Benson Meier", "Carl Kurz", "Daniel Meier"]


def test_clear_command(model):
    ClearCommand().execute(model)
    assert len(model.roster) == 0


def test_help_and_exit_flags(model):
    assert HelpCommand().execute(model).show_help
    assert ExitCommand().execute(model).exit
    assert "edit:" in help_text()
    assert "export:" in help_text()


def test_mutating_commands_are_flagged():
    assert AddCommand.MUTATES_ROSTER
    assert EditCommand.MUTATES_ROSTER
    assert not FindCommand.MUTATES_ROSTER
    assert not ListCommand.MUTATES_ROSTER
