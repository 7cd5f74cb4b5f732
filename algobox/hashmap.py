"""An open-table hash map keyed by the text form of its keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 1 << 10

_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_UINT64_MASK = (1 << 64) - 1


def _text(key: Any) -> str:
    if key is None:
        return "<nil>"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _fnv1a_64(data: bytes) -> int:
    value = _FNV_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV_PRIME) & _UINT64_MASK
    return value


def _mixed_hash(key: Any) -> int:
    value = _fnv1a_64(_text(key).encode("utf-8"))
    return value ^ (value >> 16)


@dataclass
class _Entry:
    key: Any
    value: Any
    mixed: int
    previous: _Entry | None = None


class HashMap:
    """A hash map with one entry per slot that doubles its table on any collision.

    Keys are hashed with 64-bit FNV-1a over their text form.
    """

    def __init__(self) -> None:
        self._capacity = DEFAULT_CAPACITY
        self._table: list[_Entry | None] = [None] * self._capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return self._capacity

    def _slot(self, mixed: int) -> int:
        return mixed & (self._capacity - 1)

    def _entry(self, key: Any) -> _Entry | None:
        entry = self._table[self._slot(_mixed_hash(key))]
        if entry is not None and entry.key == key:
            return entry
        return None

    def _resize(self) -> None:
        old_table = self._table
        self._capacity <<= 1
        self._table = [None] * self._capacity
        for entry in old_table:
            if entry is not None:
                self._table[self._slot(entry.mixed)] = entry

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if there is none."""
        entry = self._entry(key)
        return entry.value if entry is not None else None

    def put(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key`` and return it."""
        mixed = _mixed_hash(key)
        while True:
            slot = self._slot(mixed)
            entry = self._table[slot]
            if entry is None:
                self._table[slot] = _Entry(key, value, mixed)
                self._size += 1
                return value
            if entry.key == key:
                self._table[slot] = _Entry(key, value, mixed, entry)
                return value
            if entry.mixed == mixed:
                raise ValueError(
                    f"keys {entry.key!r} and {key!r} hash identically and cannot both be stored"
                )
            self._resize()

    def contains(self, key: Any) -> bool:
        """Return True if ``key`` is stored in the map."""
        return self._entry(key) is not None

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"HashMap(size={self._size}, capacity={self._capacity})"