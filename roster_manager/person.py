from __future__ import annotations

"""Person records and the sparse descriptor used to edit them."""

from dataclasses import dataclass, fields, replace
from typing import Dict, Optional

from .fields import UNSET


@dataclass(frozen=True, eq=False)
class Person:
    """A student in the roster.

    Every field is a validated string; optional fields use ``""`` when unset.
    ``student_id`` is the identity key. Equality compares the identity and
    contact fields only (name, student id, email, major, year), so two records
    that differ only in group or comment are equal.
    """

    name: str
    student_id: str
    email: str = UNSET
    major: str = UNSET
    year: str = UNSET
    group: str = UNSET
    comment: str = UNSET

    def is_same_person(self, other: Optional["Person"]) -> bool:
        """Weaker notion of equality: both records share a student id."""

        if other is self:
            return True
        return other is not None and other.student_id == self.student_id

    def _key(self) -> tuple:
        return (self.name, self.student_id, self.email, self.major, self.year)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def has_group(self) -> bool:
        return self.group != UNSET


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on an existing person; ``None`` means "keep as is".

    An empty string for ``group`` (or any optional field) is a real value and
    clears that field.
    """

    name: Optional[str] = None
    student_id: Optional[str] = None
    email: Optional[str] = None
    major: Optional[str] = None
    year: Optional[str] = None
    group: Optional[str] = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, item.name) is not None for item in fields(self))

    def edited_fields(self) -> Dict[str, str]:
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


def create_edited_person(person_to_edit: Person, descriptor: EditPersonDescriptor) -> Person:
    """Apply *descriptor* onto *person_to_edit* and return the new record.

    The comment is always carried over unchanged; it has its own command.
    """

    return replace(person_to_edit, **descriptor.edited_fields())


__all__ = ["Person", "EditPersonDescriptor", "create_edited_person"]
