"""A growable array that tracks its capacity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

DEFAULT_CAPACITY = 10


class DynamicArray:
    """An array whose capacity starts at 10 and doubles when it fills up.

    Indexes must lie in ``0 <= index < len(array)``; anything else raises IndexError.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        self._capacity = 0
        for item in items:
            self.add(item)

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold before it grows again."""
        return self._capacity

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")

    def _grow(self) -> None:
        self._capacity = self._capacity * 2 if self._capacity else DEFAULT_CAPACITY

    def put(self, index: int, element: Any) -> None:
        """Replace the element at ``index``."""
        self._check_index(index)
        self._items[index] = element

    def add(self, element: Any) -> None:
        """Append ``element``, growing the capacity if the array is full."""
        if len(self._items) == self._capacity:
            self._grow()
        self._items.append(element)

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting later ones left."""
        self._check_index(index)
        return self._items.pop(index)

    def get(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        return self._items[index]

    def is_empty(self) -> bool:
        """Return True if the array holds no elements."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the elements as a new list."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"