"""Insertion-ordered collection of unique items."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator


class OrderedSet[T: Hashable]:
    """Set that iterates in first-insertion order.

    Re-adding an existing item keeps its original position.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[T, None] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        self._items.setdefault(item, None)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
