from __future__ import annotations

from typing import Iterable, Optional

from ..common.unique_list import UniqueList
from ..core.enums import PersonSortField
from .model import Person


def _sort_key(field: PersonSortField):
    if field == PersonSortField.PAY_RATE:
        return lambda p: p.pay_rate

    # persons without the field go last
    attr = field.value
    return lambda p: (getattr(p, attr) is None, (getattr(p, attr) or "").lower())


class UniquePersonList(UniqueList[Person]):
    """Person list where no two persons share a name."""

    def __init__(self, persons: Optional[Iterable[Person]] = None):
        super().__init__(Person.is_same_person, persons)

    def sort_by(self, field: PersonSortField) -> None:
        self.sort(key=_sort_key(PersonSortField(field)))
