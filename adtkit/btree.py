"""An ordered set stored in a (3,5) B-tree."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .base import Compare, Discard, SortedSetBase, natural_compare
from .btree_node import MAX_VALUES, MIN_VALUES, BTreeNode, Entry


def _position(entries: list[Entry], entry: Entry) -> int:
    for index, candidate in enumerate(entries):
        if candidate is entry:
            return index
    raise ValueError("entry does not belong to this set")


def _post_order(node: BTreeNode) -> Iterator[Any]:
    for child in node.children:
        yield from _post_order(child)
    for entry in node.entries:
        yield entry.value


class BTreeSet(SortedSetBase):
    """An ordered set kept in a B-tree whose nodes hold 2 to 4 values.

    ``compare(a, b)`` returns a negative number, zero or a positive number;
    values that compare equal are the same element. If ``on_discard`` is
    given, it is called with every value that leaves the set: on removal,
    on replacement by an equivalent value, and on :meth:`clear`.
    """

    def __init__(self, compare: Compare = natural_compare, on_discard: Discard = None) -> None:
        self.compare = compare
        self.on_discard = on_discard
        self._root: Optional[BTreeNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _discard(self, value: Any) -> None:
        if self.on_discard is not None:
            self.on_discard(value)

    def _owned(self, entry: Entry) -> tuple[BTreeNode, int]:
        """Return the node holding ``entry`` and its index, checking membership."""
        node = entry.owner
        if node is None:
            raise ValueError("entry does not belong to this set")
        index = _position(node.entries, entry)
        top = node
        while top.parent is not None:
            top = top.parent
        if top is not self._root:
            raise ValueError("entry does not belong to this set")
        return node, index

    def insert(self, value: Any) -> bool:
        """Add ``value``, or replace an equivalent one. Return True if added."""
        if self._root is None:
            self._root = BTreeNode(None)
            self._root.add_value(Entry(value), 0)
            self._size = 1
            return True

        node, index = self._root.find(self.compare, value)
        if index is not None:
            entry = node.entries[index]
            old, entry.value = entry.value, value
            self._discard(old)
            return False

        position = next(
            (i for i, entry in enumerate(node.entries) if self.compare(value, entry.value) <= 0),
            len(node.entries),
        )
        node.add_value(Entry(value), position)
        if len(node.entries) > MAX_VALUES:
            new_root = node.split(self.compare)
            if new_root is not None:
                self._root = new_root
        self._size += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove the value equivalent to ``value``. Return True if one was found."""
        if self._root is None:
            return False
        node, index = self._root.find(self.compare, value)
        if index is None:
            return False

        removed = node.entries[index]
        if node.is_leaf():
            del node.entries[index]
            node.repair_underflow()
        else:
            # Replace the separator with the largest value of its left subtree.
            largest = node.children[index].find_max()
            holder = largest.owner
            assert holder is not None
            holder.entries.pop()
            node.entries[index] = largest
            largest.owner = node
            holder.repair_underflow()
        removed.owner = None

        root = self._root
        if not root.entries:
            child = root.children[0] if root.children else None
            if child is not None:
                child.parent = None
            self._root = child

        self._size -= 1
        self._discard(removed.value)
        return True

    def find_node(self, value: Any) -> Optional[Entry]:
        """Return the entry holding a value equivalent to ``value``, or None."""
        if self._root is None:
            return None
        node, index = self._root.find(self.compare, value)
        return None if index is None else node.entries[index]

    def first(self) -> Optional[Entry]:
        """Return the entry with the smallest value, or None if empty."""
        return None if self._root is None else self._root.find_min()

    def last(self) -> Optional[Entry]:
        """Return the entry with the largest value, or None if empty."""
        return None if self._root is None else self._root.find_max()

    def next(self, node: Entry) -> Optional[Entry]:
        """Return the entry after ``node`` in order, or None if it is the last."""
        owner, index = self._owned(node)
        if not owner.is_leaf():
            return owner.children[index + 1].find_min()
        if index + 1 < len(owner.entries):
            return owner.entries[index + 1]
        current = owner
        while current.parent is not None and self.compare(
            node.value, current.parent.entries[-1].value
        ) > 0:
            current = current.parent
        if current.parent is None:
            return None
        for entry in current.parent.entries:
            if self.compare(node.value, entry.value) < 0:
                return entry
        return None

    def previous(self, node: Entry) -> Optional[Entry]:
        """Return the entry before ``node`` in order, or None if it is the first."""
        owner, index = self._owned(node)
        if not owner.is_leaf():
            return owner.children[index].find_max()
        if index > 0:
            return owner.entries[index - 1]
        current = owner
        while current.parent is not None and self.compare(
            node.value, current.parent.entries[0].value
        ) < 0:
            current = current.parent
        if current.parent is None:
            return None
        for entry in reversed(current.parent.entries):
            if self.compare(node.value, entry.value) > 0:
                return entry
        return None

    def clear(self) -> None:
        """Remove every value, discarding a node's children before the node."""
        root, self._root, self._size = self._root, None, 0
        if root is None or self.on_discard is None:
            return
        for value in list(_post_order(root)):
            self.on_discard(value)

    def is_proper(self) -> bool:
        """Check fill limits, ordering, uniform leaf depth, links and size."""
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False
        count = 0
        leaf_depths: set[int] = set()

        def check(node: BTreeNode, low: Optional[Entry], high: Optional[Entry], depth: int) -> bool:
            nonlocal count
            entries = node.entries
            if len(entries) > MAX_VALUES or not entries:
                return False
            if node.parent is not None and len(entries) < MIN_VALUES:
                return False
            if any(entry.owner is not node for entry in entries):
                return False
            bounds = [low, *entries, high]
            for before, after in zip(bounds, bounds[1:]):
                if before is not None and after is not None:
                    if self.compare(before.value, after.value) >= 0:
                        return False
            count += len(entries)
            if node.is_leaf():
                leaf_depths.add(depth)
                return True
            if len(node.children) != len(entries) + 1:
                return False
            for i, child in enumerate(node.children):
                if child.parent is not node:
                    return False
                if not check(child, bounds[i], bounds[i + 1], depth + 1):
                    return False
            return True

        return check(self._root, None, None, 0) and len(leaf_depths) == 1 and count == self._size