"""An ordered set stored in an unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .base import Compare, Discard, SortedSetBase, natural_compare


@dataclass(eq=False)
class BSTNode:
    """A node of the binary search tree; ``value`` is the stored value."""

    value: Any
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None


def _min_node(node: Optional[BSTNode]) -> Optional[BSTNode]:
    while node is not None and node.left is not None:
        node = node.left
    return node


def _max_node(node: Optional[BSTNode]) -> Optional[BSTNode]:
    while node is not None and node.right is not None:
        node = node.right
    return node


class BSTSet(SortedSetBase):
    """An ordered set kept in a binary search tree.

    ``compare(a, b)`` returns a negative number, zero or a positive number;
    values that compare equal are the same element. If ``on_discard`` is
    given, it is called with every value that leaves the set: on removal,
    on replacement by an equivalent value, and on :meth:`clear`.
    """

    def __init__(self, compare: Compare = natural_compare, on_discard: Discard = None) -> None:
        self.compare = compare
        self.on_discard = on_discard
        self._root: Optional[BSTNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _discard(self, value: Any) -> None:
        if self.on_discard is not None:
            self.on_discard(value)

    def _nodes(self) -> Iterator[BSTNode]:
        """Yield every node: each before its right subtree, then its left one."""
        pending = [] if self._root is None else [self._root]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(child for child in (node.left, node.right) if child is not None)

    def insert(self, value: Any) -> bool:
        """Add ``value``, or replace an equivalent one. Return True if added."""
        parent: Optional[BSTNode] = None
        node = self._root
        result = 0
        while node is not None:
            result = self.compare(value, node.value)
            if result == 0:
                old, node.value = node.value, value
                self._discard(old)
                return False
            parent = node
            node = node.left if result < 0 else node.right

        new = BSTNode(value)
        if parent is None:
            self._root = new
        elif result < 0:
            parent.left = new
        else:
            parent.right = new
        self._size += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove the value equivalent to ``value``. Return True if one was found."""
        parent: Optional[BSTNode] = None
        node = self._root
        while node is not None:
            result = self.compare(value, node.value)
            if result == 0:
                break
            parent = node
            node = node.left if result < 0 else node.right
        if node is None:
            return False

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            # Splice the smallest node of the right subtree into node's place.
            min_parent = node
            smallest = node.right
            while smallest.left is not None:
                min_parent = smallest
                smallest = smallest.left
            if min_parent is node:
                node.right = smallest.right
            else:
                min_parent.left = smallest.right
            smallest.left = node.left
            smallest.right = node.right
            replacement = smallest

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

        self._size -= 1
        self._discard(node.value)
        return True

    def find_node(self, value: Any) -> Optional[BSTNode]:
        """Return the node holding a value equivalent to ``value``, or None."""
        node = self._root
        while node is not None:
            result = self.compare(value, node.value)
            if result == 0:
                return node
            node = node.left if result < 0 else node.right
        return None

    def first(self) -> Optional[BSTNode]:
        """Return the node with the smallest value, or None if empty."""
        return _min_node(self._root)

    def last(self) -> Optional[BSTNode]:
        """Return the node with the largest value, or None if empty."""
        return _max_node(self._root)

    def _neighbour(self, node: BSTNode, forward: bool) -> Optional[BSTNode]:
        sign = 1 if forward else -1
        candidate: Optional[BSTNode] = None
        current = self._root
        while current is not node:
            if current is None:
                raise ValueError("node does not belong to this set")
            if sign * self.compare(node.value, current.value) > 0:
                current = current.right if forward else current.left
            else:
                candidate = current
                current = current.left if forward else current.right
        below = _min_node(node.right) if forward else _max_node(node.left)
        return below if below is not None else candidate

    def next(self, node: BSTNode) -> Optional[BSTNode]:
        """Return the node after ``node`` in order, or None if it is the last."""
        return self._neighbour(node, forward=True)

    def previous(self, node: BSTNode) -> Optional[BSTNode]:
        """Return the node before ``node`` in order, or None if it is the first."""
        return self._neighbour(node, forward=False)

    def clear(self) -> None:
        """Remove every value, discarding children before their parents."""
        nodes = list(self._nodes())
        self._root, self._size = None, 0
        for node in reversed(nodes):
            self._discard(node.value)

    def is_proper(self) -> bool:
        """Check the search-tree ordering and the recorded size."""
        count = 0
        pending: list[tuple[BSTNode, Optional[BSTNode], Optional[BSTNode]]] = []
        if self._root is not None:
            pending.append((self._root, None, None))
        while pending:
            node, low, high = pending.pop()
            count += 1
            if low is not None and self.compare(node.value, low.value) <= 0:
                return False
            if high is not None and self.compare(node.value, high.value) >= 0:
                return False
            if node.left is not None:
                pending.append((node.left, low, node))
            if node.right is not None:
                pending.append((node.right, node, high))
        return count == self._size