"""Binary search tree nodes, insertion, deletion and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A tree node holding an integer value and its two children."""

    val: int
    left: Node | None = None
    right: Node | None = None


def _depth(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))


@dataclass
class BinaryTree:
    """A binary tree identified by its root node."""

    root: Node | None = None

    def depth(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
        return _depth(self.root)


def insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into the search tree at ``root`` and return the root.

    Smaller values go left; equal and larger values go right.
    """
    if root is None:
        return Node(value)
    if value < root.val:
        root.left = insert(root.left, value)
    else:
        root.right = insert(root.right, value)
    return root


def in_order_successor(root: Node | None) -> Node:
    """Return the leftmost node below ``root``, the one with the smallest value."""
    if root is None:
        raise ValueError("an empty tree has no in-order successor")
    current = root
    while current.left is not None:
        current = current.left
    return current


def bst_delete(root: Node | None, value: int) -> Node | None:
    """Remove the first node holding ``value`` from the search tree and return the new root.

    A node with two children is replaced by its right subtree, with its left
    subtree hung below the smallest node of that right subtree.
    """
    if root is None:
        return None
    if value < root.val:
        root.left = bst_delete(root.left, value)
    elif value > root.val:
        root.right = bst_delete(root.right, value)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = in_order_successor(root.right)
        successor.left = root.left
        return root.right
    return root


def in_order(node: Node | None) -> Iterator[int]:
    """Yield the values of the tree left subtree first, then the node, then the right subtree."""
    if node is not None:
        yield from in_order(node.left)
        yield node.val
        yield from in_order(node.right)


def pre_order(node: Node | None) -> Iterator[int]:
    """Yield the values of the tree, each node before its subtrees."""
    if node is not None:
        yield node.val
        yield from pre_order(node.left)
        yield from pre_order(node.right)


def post_order(node: Node | None) -> Iterator[int]:
    """Yield the values of the tree, each node after its subtrees."""
    if node is not None:
        yield from post_order(node.left)
        yield from post_order(node.right)
        yield node.val


def level_order(root: Node | None) -> Iterator[int]:
    """Yield the values of the tree level by level, left to right."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.val
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)