"""Last-in first-out stacks backed by a list, linked nodes and a deque."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class EmptyStackError(IndexError):
    """Raised when an empty stack is read from or popped."""


class ArrayStack:
    """A stack kept in a Python list."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value."""
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def to_list(self) -> list[Any]:
        """Return the values top first."""
        return self._items[::-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(top first: {self.to_list()!r})"


@dataclass(eq=False)
class _StackNode:
    val: Any
    next: _StackNode | None = None


class LinkedStack:
    """A stack of singly linked nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._top: _StackNode | None = None
        self._length = 0
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _StackNode(value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise EmptyStackError("stack is empty")
        node = self._top
        self._top = node.next
        self._length -= 1
        return node.val

    def peek(self) -> Any:
        """Return the top value."""
        if self._top is None:
            raise EmptyStackError("stack is empty")
        return self._top.val

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return self._length == 0

    def show(self) -> list[Any]:
        """Return the values top first."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.val
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedStack(top first: {self.show()!r})"


class DequeStack:
    """A stack kept in a :class:`collections.deque`, top at the left end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque()
        for item in items:
            self.push(item)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.appendleft(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyStackError("stack list is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the top value."""
        if not self._items:
            raise EmptyStackError("stack list is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DequeStack(top first: {list(self._items)!r})"