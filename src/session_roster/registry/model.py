from __future__ import annotations

from typing import Iterable, Sequence

from ..common.unique_list import UniqueList
from ..core.constants import PAY_RATE_NOT_FOUND
from ..core.enums import PersonSortField
from ..core.exceptions import PersonNotFoundError, SessionNotFoundError
from ..persons.model import Person
from ..persons.unique_list import UniquePersonList
from ..sessions.model import Session
from ..tags.model import Tag
from .repository import ReadOnlyRegistry


class Registry:
    """Persons, tags and sessions of one roster.

    Duplicates are not allowed in any of the three lists (by
    ``is_same_person`` / ``is_same_tag`` / ``is_same_session``).

    Sessions are owned by the registry: they are copied on the way in, and
    attendance changes are applied to a copy of the stored session which
    then replaces it. Sessions handed out by ``find_session_by_name`` and
    ``session_list`` are copies: mutating one changes neither the registry
    nor any other holder, and a later registry update never changes it.

    Sessions refer to persons by name only. Removing or renaming a person
    leaves their attendance entries in place.
    """

    def __init__(self):
        self._persons = UniquePersonList()
        self._tags: UniqueList[Tag] = UniqueList(Tag.is_same_tag)
        self._sessions: UniqueList[Session] = UniqueList(Session.is_same_session)

    @classmethod
    def from_source(cls, source: ReadOnlyRegistry) -> "Registry":
        registry = cls()
        registry.reset_data(source)
        return registry

    # list overwrite operations

    def set_persons(self, persons: Iterable[Person]) -> None:
        self._persons.set_all(persons)

    def set_tags(self, tags: Iterable[Tag]) -> None:
        self._tags.set_all(tags)

    def set_sessions(self, sessions: Iterable[Session]) -> None:
        self._sessions.set_all(s.copy() for s in sessions)

    def reset_data(self, source: ReadOnlyRegistry) -> None:
        """Replace all three lists with ``source``'s.

        All lists are checked before any is replaced, so a duplicate in the
        source leaves this registry untouched.
        """
        persons = list(source.person_list)
        tags = list(source.tag_list)
        sessions = [s.copy() for s in source.session_list]

        self._persons.ensure_unique(persons)
        self._tags.ensure_unique(tags)
        self._sessions.ensure_unique(sessions)

        self._persons.set_all(persons)
        self._tags.set_all(tags)
        self._sessions.set_all(sessions)

    # person / tag level operations

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def has_tag(self, tag: Tag) -> bool:
        return self._tags.contains(tag)

    def has_session(self, session: Session) -> bool:
        return self._sessions.contains(session)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def add_tag(self, tag: Tag) -> None:
        self._tags.add(tag)

    def add_all_tags(self, tags: Iterable[Tag]) -> None:
        for tag in tags:
            self.add_tag(tag)

    def add_session(self, session: Session) -> None:
        self._sessions.add(session.copy())

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.set_element(target, edited)

    def set_session(self, target: Session, edited: Session) -> None:
        self._sessions.set_element(target, edited.copy())

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    def remove_tag(self, tag: Tag) -> None:
        self._tags.remove(tag)

    def remove_session(self, session: Session) -> None:
        self._sessions.remove(session)

    def sort_persons(self, field: PersonSortField) -> None:
        self._persons.sort_by(field)

    # session membership

    def _stored_session(self, session: Session) -> Session:
        for stored in self._sessions:
            if stored.is_same_session(session):
                return stored
        raise SessionNotFoundError(f"Session not found: {session.name}")

    def add_person_to_session(self, person: Person, session: Session) -> None:
        """Enroll ``person`` in the stored ``session``. Enrolling twice overwrites the entry.

        Raises:
            SessionNotFoundError: If ``session`` is not in the registry.
        """
        stored = self._stored_session(session)
        updated = stored.copy()
        updated.enroll(person)
        self._sessions.set_element(stored, updated)

    def remove_person_from_session(self, person: Person, session: Session) -> None:
        """
        Raises:
            SessionNotFoundError: If ``session`` is not in the registry.
            PersonNotFoundError: If ``person`` is not enrolled in it.
        """
        stored = self._stored_session(session)
        if not stored.is_enrolled(person.name):
            raise PersonNotFoundError(f"{person.name} is not enrolled in {stored.name}")

        updated = stored.copy()
        updated.withdraw(person.name)
        self._sessions.set_element(stored, updated)

    def mark_person_present(self, person_name: str, session: Session) -> None:
        self._mark(person_name, session, present=True)

    def mark_person_absent(self, person_name: str, session: Session) -> None:
        self._mark(person_name, session, present=False)

    def _mark(self, person_name: str, session: Session, *, present: bool) -> None:
        stored = self._stored_session(session)
        updated = stored.copy()
        if present:
            updated.mark_present(person_name)
        else:
            updated.mark_absent(person_name)
        self._sessions.set_element(stored, updated)

    # lookups

    def find_session_by_name(self, name: str) -> Session:
        for session in self._sessions:
            if session.name == name:
                return session.copy()
        raise SessionNotFoundError(f"Session not found: {name}")

    def has_session_name(self, name: str) -> bool:
        return any(session.name == name for session in self._sessions)

    def find_person_by_name(self, name: str) -> Person:
        for person in self._persons:
            if person.name == name:
                return person
        raise PersonNotFoundError(f"Person not found: {name}")

    def pay_rate_for_person_named(self, name: str) -> int:
        """Pay rate of the person called ``name``, or ``PAY_RATE_NOT_FOUND`` (-1)."""
        for person in self._persons:
            if person.name == name:
                return person.pay_rate
        return PAY_RATE_NOT_FOUND

    # views

    @property
    def person_list(self) -> Sequence[Person]:
        return self._persons.as_read_only()

    @property
    def tag_list(self) -> Sequence[Tag]:
        return self._tags.as_read_only()

    @property
    def session_list(self) -> Sequence[Session]:
        return self._sessions.as_read_only(Session.copy)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Registry):
            return NotImplemented
        return self._persons == other._persons and self._tags == other._tags and self._sessions == other._sessions

    def __str__(self) -> str:
        return f"{len(self._persons)} persons"
