"""A set of hashable items with the usual set algebra."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class HashSet:
    """An unordered collection of distinct hashable items."""

    def __init__(self, *args: Any) -> None:
        self._elements: dict[Any, None] = {}
        for item in args:
            self.add(item)

    def add(self, item: Any) -> None:
        """Add ``item``; adding an item already present does nothing."""
        self._elements[item] = None

    def delete(self, item: Any) -> None:
        """Remove ``item`` if it is present."""
        self._elements.pop(item, None)

    def items(self) -> list[Any]:
        """Return the items as a list."""
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, item: Any) -> bool:
        return item in self._elements

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashSet):
            return NotImplemented
        return self._elements.keys() == other._elements.keys()

    def __repr__(self) -> str:
        return f"HashSet({', '.join(repr(item) for item in self._elements)})"

    def is_subset_of(self, other: HashSet) -> bool:
        """Return True if every item of this set is in ``other``."""
        if len(self) > len(other):
            return False
        return all(item in other for item in self)

    def is_superset_of(self, other: HashSet) -> bool:
        """Return True if every item of ``other`` is in this set."""
        return other.is_subset_of(self)

    def union(self, other: HashSet) -> HashSet:
        """Return a new set with the items of both sets."""
        return HashSet(*self, *other)

    def intersection(self, other: HashSet) -> HashSet:
        """Return a new set with the items present in both sets."""
        smaller, larger = (other, self) if len(self) > len(other) else (self, other)
        return HashSet(*(item for item in smaller if item in larger))

    def difference(self, other: HashSet) -> HashSet:
        """Return a new set with the items of this set that are not in ``other``."""
        return HashSet(*(item for item in self if item not in other))

    def symmetric_difference(self, other: HashSet) -> HashSet:
        """Return a new set with the items in exactly one of the two sets."""
        return HashSet(
            *(item for item in self if item not in other),
            *(item for item in other if item not in self),
        )