"""Doubly and singly linked lists."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


def _print_values(values: Iterable[Any]) -> None:
    sys.stdout.write("".join(f"{value} " for value in values) + "\n")


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    val: Any
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list identified by its head node."""

    def __init__(self) -> None:
        self.head: DoublyNode | None = None

    def _last(self) -> DoublyNode | None:
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def add_at_beginning(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = DoublyNode(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def add_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        last = self._last()
        if last is None:
            self.head = DoublyNode(value)
            return
        last.next = DoublyNode(value, prev=last)

    def delete_at_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self.head
        self.head = node.next
        if self.head is not None:
            self.head.prev = None
        return node.val

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        last = self._last()
        if last is None:
            raise IndexError("delete from empty list")
        if last.prev is None:
            return self.delete_at_beginning()
        last.prev.next = None
        return last.val

    def count(self) -> int:
        """Return the number of nodes."""
        return sum(1 for _ in self)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: DoublyNode | None = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            node.prev = following
            previous = node
            node = following
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self.count()

    def iter_reversed(self) -> Iterator[Any]:
        """Yield the values from the last node back to the first."""
        node = self._last()
        while node is not None:
            yield node.val
            node = node.prev

    def display(self) -> None:
        """Print the values, each followed by a space, then a newline."""
        _print_values(self)

    def display_reversed(self) -> None:
        """Print the values last first; an empty list prints nothing."""
        if self.head is None:
            return
        _print_values(self.iter_reversed())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


@dataclass(eq=False)
class SinglyNode:
    """A node of a singly linked list."""

    val: Any
    next: SinglyNode | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A singly linked list that keeps its length."""

    def __init__(self) -> None:
        self.head: SinglyNode | None = None
        self._length = 0

    def add_at_beginning(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self.head = SinglyNode(value, self.head)
        self._length += 1

    def add_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = SinglyNode(value)
        if self.head is None:
            self.head = node
        else:
            current = self.head
            while current.next is not None:
                current = current.next
            current.next = node
        self._length += 1

    def delete_at_beginning(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        node = self.head
        self.head = node.next
        self._length -= 1
        return node.val

    def delete_at_end(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("delete from empty list")
        if self.head.next is None:
            return self.delete_at_beginning()
        current = self.head
        while current.next is not None and current.next.next is not None:
            current = current.next
        last = current.next
        current.next = None
        self._length -= 1
        return last.val if last is not None else None

    def count(self) -> int:
        """Return the number of nodes."""
        return self._length

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: SinglyNode | None = None
        node = self.head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._length

    def display(self) -> None:
        """Print the values, each followed by a space, then a newline."""
        _print_values(self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"