from __future__ import annotations

"""In-memory roster and the filtered view shown to the user."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .errors import DuplicatePersonError, PersonNotFoundError
from .parser_util import contains_word_ignore_case
from .person import Person

LOGGER = logging.getLogger(__name__)

Predicate = Callable[[Person], bool]
SortKey = Callable[[Person], object]
Listener = Callable[["RosterModel"], None]


def show_all_persons(_person: Person) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word."""

    keywords: Tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        return any(contains_word_ignore_case(person.name, keyword) for keyword in self.keywords)


class Roster:
    """Ordered list of persons, unique by student id."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: List[Person] = []
        for person in persons:
            self.add(person)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._persons == other._persons

    def as_list(self) -> List[Person]:
        return list(self._persons)

    def contains(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add(self, person: Person) -> None:
        if self.contains(person):
            raise DuplicatePersonError()
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace *target* with *edited*, keeping its position."""

        position = self._position_of(target)
        if position is None:
            raise PersonNotFoundError()
        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError()
        self._persons[position] = edited

    def remove(self, person: Person) -> None:
        position = self._position_of(person)
        if position is None:
            raise PersonNotFoundError()
        del self._persons[position]

    def set_persons(self, persons: Iterable[Person]) -> None:
        replacement = Roster(persons)
        self._persons = replacement._persons

    def _position_of(self, person: Person) -> Optional[int]:
        for index, existing in enumerate(self._persons):
            if existing == person and existing.is_same_person(person):
                return index
        return None


class RosterModel:
    """Owns the roster and keeps the filtered/sorted view in sync with it.

    Listeners registered with :meth:`subscribe` are called synchronously after
    each successful mutation or view change, in the order the changes happen.
    """

    def __init__(self, roster: Optional[Roster] = None) -> None:
        self._roster = Roster(roster or ())
        self._predicate: Predicate = show_all_persons
        self._sort_key: Optional[SortKey] = None
        self._filtered: Tuple[Person, ...] = ()
        self._listeners: List[Listener] = []
        self._refresh(notify=False)

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def filtered_persons(self) -> Tuple[Person, ...]:
        return self._filtered

    @property
    def predicate(self) -> Predicate:
        return self._predicate

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------
    # Roster mutations
    # ------------------------------

    def has_person(self, person: Person) -> bool:
        return self._roster.contains(person)

    def add_person(self, person: Person) -> None:
        self._roster.add(person)
        LOGGER.debug("Added %s", person.student_id)
        self._predicate = show_all_persons
        self._refresh()

    def set_person(self, target: Person, edited: Person) -> None:
        self._roster.set_person(target, edited)
        LOGGER.debug("Replaced %s with %s", target.student_id, edited.student_id)
        self._refresh()

    def delete_person(self, target: Person) -> None:
        self._roster.remove(target)
        LOGGER.debug("Removed %s", target.student_id)
        self._refresh()

    def reset_roster(self, persons: Iterable[Person] = ()) -> None:
        self._roster.set_persons(persons)
        self._refresh()

    # ------------------------------
    # View
    # ------------------------------

    def update_filtered_person_list(self, predicate: Predicate) -> None:
        self._predicate = predicate
        self._refresh()

    def update_sort_key(self, sort_key: Optional[SortKey]) -> None:
        self._sort_key = sort_key
        self._refresh()

    def _refresh(self, notify: bool = True) -> None:
        visible = [person for person in self._roster if self._predicate(person)]
        if self._sort_key is not None:
            visible.sort(key=self._sort_key)
        self._filtered = tuple(visible)
        if notify:
            for listener in list(self._listeners):
                listener(self)


__all__ = [
    "NameContainsKeywordsPredicate",
    "Roster",
    "RosterModel",
    "show_all_persons",
]
