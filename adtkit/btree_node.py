"""Nodes of a (3,5) B-tree and the local operations that keep it balanced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .base import Compare

MIN_CHILDREN = 3
MAX_CHILDREN = 5
MIN_VALUES = MIN_CHILDREN - 1
MAX_VALUES = MAX_CHILDREN - 1


@dataclass(eq=False)
class Entry:
    """One stored value and the B-tree node that currently holds it."""

    value: Any
    owner: Optional["BTreeNode"] = None


def _index_of(items: list, item: Any) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError("item not found")


class BTreeNode:
    """A B-tree node: ordered entries and, unless a leaf, one more child.

    A node may hold one entry more than ``MAX_VALUES`` for the short time
    between an insertion and the :meth:`split` that follows it.
    """

    __slots__ = ("parent", "entries", "children")

    def __init__(self, parent: Optional[BTreeNode] = None) -> None:
        self.parent = parent
        self.entries: list[Entry] = []
        self.children: list[BTreeNode] = []

    def __repr__(self) -> str:
        values = [entry.value for entry in self.entries]
        return f"{type(self).__name__}({values!r})"

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return not self.children

    def add_value(self, entry: Entry, index: int) -> None:
        """Place ``entry`` at position ``index`` and make this node its owner."""
        entry.owner = self
        self.entries.insert(index, entry)

    def add_child(self, child: BTreeNode, index: int) -> None:
        """Place ``child`` at position ``index`` and make this node its parent."""
        child.parent = self
        self.children.insert(index, child)

    def find(self, compare: Compare, value: Any) -> tuple[BTreeNode, Optional[int]]:
        """Locate ``value`` in the subtree rooted here.

        Return ``(node, index)`` where ``node.entries[index]`` holds a value
        equivalent to ``value``; if there is none, return the leaf where it
        belongs with ``index`` set to None.
        """
        node = self
        while True:
            position = len(node.entries)
            for index, entry in enumerate(node.entries):
                result = compare(value, entry.value)
                if result == 0:
                    return node, index
                if result < 0:
                    position = index
                    break
            if node.is_leaf():
                return node, None
            node = node.children[position]

    def find_min(self) -> Entry:
        """Return the entry with the smallest value in this subtree."""
        node = self
        while not node.is_leaf():
            node = node.children[0]
        if not node.entries:
            raise ValueError("empty node")
        return node.entries[0]

    def find_max(self) -> Entry:
        """Return the entry with the largest value in this subtree."""
        node = self
        while not node.is_leaf():
            node = node.children[-1]
        if not node.entries:
            raise ValueError("empty node")
        return node.entries[-1]

    def left_sibling(self) -> Optional[BTreeNode]:
        """Return the sibling just left of this node, or None."""
        if self.parent is None:
            return None
        index = _index_of(self.parent.children, self)
        return self.parent.children[index - 1] if index > 0 else None

    def right_sibling(self) -> Optional[BTreeNode]:
        """Return the sibling just right of this node, or None."""
        if self.parent is None:
            return None
        siblings = self.parent.children
        index = _index_of(siblings, self)
        return siblings[index + 1] if index + 1 < len(siblings) else None

    def split(self, compare: Compare) -> Optional[BTreeNode]:
        """Split an overflowing node in two, sending its median to the parent.

        Overflow in the parent is split in turn. Return the new root if the
        tree grew a level, otherwise None.
        """
        if len(self.entries) <= MAX_VALUES:
            raise ValueError("only an overflowing node can be split")

        half = len(self.entries) // 2
        right = BTreeNode(self.parent)
        if not self.is_leaf():
            for child in self.children[half + 1:]:
                right.add_child(child, len(right.children))
            del self.children[half + 1:]
        for entry in self.entries[half + 1:]:
            right.add_value(entry, len(right.entries))
        median = self.entries[half]
        del self.entries[half:]

        parent = self.parent
        if parent is None:
            root = BTreeNode(None)
            root.add_value(median, 0)
            root.add_child(self, 0)
            root.add_child(right, 1)
            return root

        index = next(
            (i for i, entry in enumerate(parent.entries) if compare(median.value, entry.value) < 0),
            len(parent.entries),
        )
        parent.add_child(right, index + 1)
        parent.add_value(median, index)
        if len(parent.entries) > MAX_VALUES:
            return parent.split(compare)
        return None

    def repair_underflow(self) -> None:
        """Restore the minimum fill of a non-root node that has lost a value.

        Borrow through the parent from a sibling that can spare a value, or
        merge with a sibling and repair the parent in turn. The root is left
        alone even if it becomes empty.
        """
        if len(self.entries) >= MIN_VALUES or self.parent is None:
            return
        left = self.left_sibling()
        right = self.right_sibling()
        if right is not None and len(right.entries) > MIN_VALUES:
            self._borrow_from_right(right)
        elif left is not None and len(left.entries) > MIN_VALUES:
            self._borrow_from_left(left)
        elif left is not None:
            left._absorb(self)
        elif right is not None:
            self._absorb(right)

    def _borrow_from_left(self, left: BTreeNode) -> None:
        parent = self.parent
        assert parent is not None
        separator = _index_of(parent.children, self) - 1
        self.add_value(parent.entries[separator], 0)
        moved = left.entries.pop()
        moved.owner = parent
        parent.entries[separator] = moved
        if not self.is_leaf() or not left.is_leaf():
            self.add_child(left.children.pop(), 0)

    def _borrow_from_right(self, right: BTreeNode) -> None:
        parent = self.parent
        assert parent is not None
        separator = _index_of(parent.children, self)
        self.add_value(parent.entries[separator], len(self.entries))
        moved = right.entries.pop(0)
        moved.owner = parent
        parent.entries[separator] = moved
        if not self.is_leaf() or not right.is_leaf():
            self.add_child(right.children.pop(0), len(self.children))

    def _absorb(self, right: BTreeNode) -> None:
        """Merge ``right``, the next sibling, into this node."""
        parent = self.parent
        assert parent is not None
        separator = _index_of(parent.children, self)
        self.add_value(parent.entries[separator], len(self.entries))
        for child in right.children:
            self.add_child(child, len(self.children))
        for entry in right.entries:
            self.add_value(entry, len(self.entries))
        right.children = []
        right.entries = []
        del parent.entries[separator]
        del parent.children[separator + 1]
        parent.repair_underflow()