"""A character trie for storing words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Trie:
    """A trie node; the root node stands for the whole trie."""

    children: dict[str, Trie] = field(default_factory=dict)
    is_leaf: bool = False

    def insert(self, word: str) -> None:
        """Add ``word`` below this node."""
        node = self
        for char in word:
            node = node.children.setdefault(char, Trie())
        node.is_leaf = True

    def find(self, word: str) -> bool:
        """Return True if the path spelling ``word`` exists below this node."""
        node = self
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return True