from __future__ import annotations

"""JSON persistence for the roster.

The data file looks like ``{"persons": [{"name": ..., "studentId": ..., ...}]}``.
Every record must carry all seven keys; empty strings stand for unset
optional values.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .config import _load_text
from .errors import ConstraintError, DuplicatePersonError, MissingFieldError, StorageError
from .fields import (
    GROUP_CONSTRAINTS,
    MAJOR_CONSTRAINTS,
    NAME_CONSTRAINTS,
    NET_ID_CONSTRAINTS,
    STUDENT_ID_CONSTRAINTS,
    UNSET,
    YEAR_CONSTRAINTS,
    is_valid_email,
    is_valid_group,
    is_valid_major,
    is_valid_name,
    is_valid_student_id,
    is_valid_year,
)
from .model import Roster
from .person import Person
from .schema import (
    FIELD_COMMENT,
    FIELD_EMAIL,
    FIELD_GROUP,
    FIELD_MAJOR,
    FIELD_NAME,
    FIELD_STUDENT_ID,
    FIELD_YEAR,
    KEY_COMMENT,
    KEY_EMAIL,
    KEY_GROUP,
    KEY_MAJOR,
    KEY_NAME,
    KEY_PERSONS,
    KEY_STUDENT_ID,
    KEY_YEAR,
)

LOGGER = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."

# (record key, field label, validity check or None, constraint message, optional)
_FIELD_RULES = (
    (KEY_NAME, FIELD_NAME, is_valid_name, NAME_CONSTRAINTS, False),
    (KEY_STUDENT_ID, FIELD_STUDENT_ID, is_valid_student_id, STUDENT_ID_CONSTRAINTS, False),
    (KEY_EMAIL, FIELD_EMAIL, is_valid_email, NET_ID_CONSTRAINTS, True),
    (KEY_MAJOR, FIELD_MAJOR, is_valid_major, MAJOR_CONSTRAINTS, True),
    (KEY_YEAR, FIELD_YEAR, is_valid_year, YEAR_CONSTRAINTS, True),
    (KEY_GROUP, FIELD_GROUP, is_valid_group, GROUP_CONSTRAINTS, True),
    (KEY_COMMENT, FIELD_COMMENT, None, "", True),
)


def person_to_record(person: Person) -> Dict[str, str]:
    return {
        KEY_NAME: person.name,
        KEY_STUDENT_ID: person.student_id,
        KEY_EMAIL: person.email,
        KEY_MAJOR: person.major,
        KEY_YEAR: person.year,
        KEY_GROUP: person.group,
        KEY_COMMENT: person.comment,
    }


def record_to_person(record: Dict[str, object]) -> Person:
    """Convert one stored record back into a :class:`Person`.

    Raises :class:`MissingFieldError` for an absent key and
    :class:`ConstraintError` for a value violating its field constraint.
    """

    values: Dict[str, str] = {}
    for key, label, is_valid, message, optional in _FIELD_RULES:
        raw = record.get(key)
        if raw is None:
            raise MissingFieldError(label)
        if not isinstance(raw, str):
            raise ConstraintError(label, message or f"Person's {label} field must be text")
        if is_valid is not None and not is_valid(raw) and not (optional and raw == UNSET):
            raise ConstraintError(label, message)
        values[key] = raw
    return Person(
        name=values[KEY_NAME],
        student_id=values[KEY_STUDENT_ID],
        email=values[KEY_EMAIL],
        major=values[KEY_MAJOR],
        year=values[KEY_YEAR],
        group=values[KEY_GROUP],
        comment=values[KEY_COMMENT],
    )


def roster_to_document(roster: Roster) -> Dict[str, List[Dict[str, str]]]:
    return {KEY_PERSONS: [person_to_record(person) for person in roster]}


def document_to_roster(document: object) -> Roster:
    if not isinstance(document, dict) or not isinstance(document.get(KEY_PERSONS), list):
        raise StorageError(f"Roster data must be a mapping with a '{KEY_PERSONS}' list")
    roster = Roster()
    for record in document[KEY_PERSONS]:
        if not isinstance(record, dict):
            raise StorageError("Each stored person must be a mapping")
        try:
            roster.add(record_to_person(record))
        except DuplicatePersonError as exc:
            raise StorageError(MESSAGE_DUPLICATE_PERSON) from exc
    return roster


class JsonRosterStorage:
    """Reads and writes the roster to a single JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read_roster(self) -> Optional[Roster]:
        """Return the stored roster, or None when the file does not exist."""

        if not self.path.exists():
            LOGGER.info("Data file not found: %s", self.path)
            return None
        try:
            document = json.loads(_load_text(self.path))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"Could not read data file {self.path}: {exc}") from exc
        return document_to_roster(document)

    def save_roster(self, roster: Roster) -> None:
        text = json.dumps(roster_to_document(roster), indent=2, ensure_ascii=False) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not save data to file {self.path} due to: {exc}") from exc
        LOGGER.debug("Saved %d persons to %s", len(roster), self.path)


__all__ = [
    "JsonRosterStorage",
    "person_to_record",
    "record_to_person",
    "roster_to_document",
    "document_to_roster",
]
