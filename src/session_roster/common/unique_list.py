from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, overload

from ..core.exceptions import DuplicateError, ElementNotFoundError

T = TypeVar("T")


class ReadOnlyView(Sequence, Generic[T]):
    """Live read-only view over a list owned by someone else.

    With ``copy_item`` set, every element read through the view is a copy,
    so mutable elements cannot be changed through it.
    """

    def __init__(self, items: list[T], copy_item: Optional[Callable[[T], T]] = None):
        self._items = items
        self._copy_item = copy_item

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        if self._copy_item is None:
            return self._items[index]
        if isinstance(index, slice):
            return [self._copy_item(item) for item in self._items[index]]
        return self._copy_item(self._items[index])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        if self._copy_item is None:
            return iter(self._items)
        return (self._copy_item(item) for item in list(self._items))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReadOnlyView({self._items!r})"


class UniqueList(Generic[T]):
    """Ordered list where no two elements share an identity.

    Identity is decided by ``is_same``, which is usually weaker than ``==``:
    two persons with the same name are the same person even if their phone
    numbers differ. Targets of ``set_element``/``remove`` are located by
    full value equality.
    """

    def __init__(self, is_same: Callable[[T, T], bool], items: Optional[Iterable[T]] = None):
        self._is_same = is_same
        self._items: list[T] = []
        self._view: ReadOnlyView[T] = ReadOnlyView(self._items)
        if items is not None:
            self.set_all(items)

    def contains(self, candidate: T) -> bool:
        return any(self._is_same(item, candidate) for item in self._items)

    def __contains__(self, candidate: Any) -> bool:
        return self.contains(candidate)

    def add(self, element: T) -> None:
        if self.contains(element):
            raise DuplicateError(f"Operation would result in duplicate entries: {element!r}")
        self._items.append(element)

    def set_element(self, target: T, replacement: T) -> None:
        """Replace ``target`` with ``replacement`` at the same position."""
        index = self._index_of(target)
        for i, item in enumerate(self._items):
            if i != index and self._is_same(item, replacement):
                raise DuplicateError(f"Operation would result in duplicate entries: {replacement!r}")
        self._items[index] = replacement

    def remove(self, target: T) -> None:
        self._items.pop(self._index_of(target))

    def set_all(self, items: Iterable[T]) -> None:
        """Replace the whole contents; nothing changes if ``items`` has duplicates."""
        incoming = list(items)
        self.ensure_unique(incoming)
        # slice assignment keeps the live view pointed at the same list
        self._items[:] = incoming

    def ensure_unique(self, items: Sequence[T]) -> None:
        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if self._is_same(items[i], items[j]):
                    raise DuplicateError(f"Operation would result in duplicate entries: {items[j]!r}")

    def sort(self, *, key: Callable[[T], Any], reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)

    def as_read_only(self, copy_item: Optional[Callable[[T], T]] = None) -> ReadOnlyView[T]:
        if copy_item is None:
            return self._view
        return ReadOnlyView(self._items, copy_item)

    def _index_of(self, target: T) -> int:
        for i, item in enumerate(self._items):
            if item == target:
                return i
        raise ElementNotFoundError(f"Element not found: {target!r}")

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
