"""Utility functions and classes for internal use."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import suppress
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_CONTAINERS = (list, tuple, set, frozenset, Iterator)


class OrderedSet(Generic[T]):
    """An insertion-ordered set.

    Hashable members are stored in a dictionary, which preserves insertion
    order and gives constant time membership tests. Members that cannot be
    hashed are kept in a list and compared by equality. Iteration always
    follows the order in which members were first added.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._index: dict[Any, int] = {}
        self._unhashable: list[int] = []
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> bool:
        """Add an item, unless an equal item is already present.

        Args:
            item: The item to add.

        Returns:
            `True` if the item was added.
        """
        if item in self:
            return False
        try:
            self._index[item] = len(self._items)
        except TypeError:
            self._unhashable.append(len(self._items))
        self._items.append(item)
        return True

    def __contains__(self, item: object) -> bool:
        with suppress(TypeError):
            if item in self._index:
                return True
        return any(self._items[idx] == item for idx in self._unhashable)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def flatten(values: Iterable[Any]) -> Iterator[Any]:
    """Recursively flatten nested containers.

    Only lists, tuples, sets, frozensets and iterators, including generators,
    are expanded. Any other object, whether iterable or not, is a single value.

    Args:
        values: The values to flatten.

    Yields:
        The individual values in order.
    """
    for value in values:
        if isinstance(value, _CONTAINERS):
            yield from flatten(value)
        else:
            yield value
