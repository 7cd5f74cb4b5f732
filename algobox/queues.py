"""First-in first-out queues backed by a list, linked nodes and a deque."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


class EmptyQueueError(IndexError):
    """Raised when an empty queue is read from or removed from."""


class ArrayQueue:
    """A queue kept in a Python list, front first."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def _require_items(self) -> None:
        if not self._items:
            raise EmptyQueueError("queue is empty")

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        self._require_items()
        return self._items.pop(0)

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        self._require_items()
        return self._items[0]

    def back(self) -> Any:
        """Return the value at the back of the queue."""
        self._require_items()
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayQueue({self._items!r})"


@dataclass(eq=False)
class _QueueNode:
    data: Any
    next: _QueueNode | None = None


class LinkedQueue:
    """A queue of singly linked nodes with head and tail references."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _QueueNode | None = None
        self._tail: _QueueNode | None = None
        self._length = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        node = _QueueNode(value)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self._head is None:
            raise EmptyQueueError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.data

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        if self._head is None:
            raise EmptyQueueError("queue is empty")
        return self._head.data

    def back(self) -> Any:
        """Return the value at the back of the queue."""
        if self._tail is None:
            raise EmptyQueueError("queue is empty")
        return self._tail.data

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._length == 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


class DequeQueue:
    """A queue kept in a :class:`collections.deque`."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise EmptyQueueError("dequeue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items[0]

    def back(self) -> Any:
        """Return the value at the back of the queue."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DequeQueue({list(self._items)!r})"