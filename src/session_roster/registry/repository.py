from __future__ import annotations

from typing import Protocol, Sequence

from ..persons.model import Person
from ..sessions.model import Session
from ..tags.model import Tag


class ReadOnlyRegistry(Protocol):
    """Read-only face of a registry.

    Note (DIP): loaders and report services depend on this interface, not on
    the concrete Registry.
    """

    @property
    def person_list(self) -> Sequence[Person]:
        raise NotImplementedError

    @property
    def tag_list(self) -> Sequence[Tag]:
        raise NotImplementedError

    @property
    def session_list(self) -> Sequence[Session]:
        raise NotImplementedError
