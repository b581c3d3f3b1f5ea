"""An ordered set stored in a self-balancing AVL tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .base import natural_compare
from .bst import BSTNode, BSTSet

_MISSING = object()


@dataclass(eq=False)
class AVLNode(BSTNode):
    """A node of the AVL tree, recording the height of its subtree."""

    height: int = 1


def _height(node: Optional[AVLNode]) -> int:
    return 0 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(node: AVLNode) -> AVLNode:
    right = node.right
    assert right is not None
    node.right = right.left
    right.left = node
    _update_height(node)
    _update_height(right)
    return right


def _rotate_right(node: AVLNode) -> AVLNode:
    left = node.left
    assert left is not None
    node.left = left.right
    left.right = node
    _update_height(node)
    _update_height(left)
    return left


def _repair_balance(node: AVLNode) -> AVLNode:
    """Restore the AVL property at ``node`` and return the subtree's new root."""
    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _remove_min(node: AVLNode) -> tuple[Optional[AVLNode], AVLNode]:
    """Detach the smallest node of the subtree; return (new root, smallest)."""
    if node.left is None:
        return node.right, node
    node.left, smallest = _remove_min(node.left)
    return _repair_balance(node), smallest


class AVLSet(BSTSet):
    """An ordered set kept in a height-balanced binary search tree.

    Behaves as :class:`BSTSet`, but rebalances after every insertion and
    removal so that lookups stay logarithmic.
    """

    def __init__(
        self,
        compare: Callable[[Any, Any], int] = natural_compare,
        on_discard: Optional[Callable[[Any], None]] = None,
    ) -> None:
        super().__init__(compare, on_discard)

    def __len__(self) -> int:
        return self._size

    def _insert(self, node: Optional[AVLNode], value: Any) -> tuple[AVLNode, Any]:
        if node is None:
            return AVLNode(value), _MISSING
        result = self.compare(value, node.value)
        if result == 0:
            old, node.value = node.value, value
            return node, old
        if result < 0:
            node.left, old = self._insert(node.left, value)
        else:
            node.right, old = self._insert(node.right, value)
        return _repair_balance(node), old

    def _remove(
        self, node: Optional[AVLNode], value: Any
    ) -> tuple[Optional[AVLNode], Optional[AVLNode]]:
        if node is None:
            return None, None
        result = self.compare(value, node.value)
        if result == 0:
            if node.left is None:
                return node.right, node
            if node.right is None:
                return node.left, node
            node.right, smallest = _remove_min(node.right)
            smallest.left = node.left
            smallest.right = node.right
            return _repair_balance(smallest), node
        if result < 0:
            node.left, removed = self._remove(node.left, value)
        else:
            node.right, removed = self._remove(node.right, value)
        return _repair_balance(node), removed

    def insert(self, value: Any) -> bool:
        """Add ``value``, or replace an equivalent one. Return True if added."""
        self._root, old = self._insert(self._root, value)
        if old is _MISSING:
            self._size += 1
            return True
        self._discard(old)
        return False

    def remove(self, value: Any) -> bool:
        """Remove the value equivalent to ``value``. Return True if one was found."""
        self._root, removed = self._remove(self._root, value)
        if removed is None:
            return False
        self._size -= 1
        self._discard(removed.value)
        return True

    def find_node(self, value: Any) -> Optional[AVLNode]:
        """Return the node holding a value equivalent to ``value``, or None."""
        return super().find_node(value)

    def first(self) -> Optional[AVLNode]:
        """Return the node with the smallest value, or None if empty."""
        return super().first()

    def last(self) -> Optional[AVLNode]:
        """Return the node with the largest value, or None if empty."""
        return super().last()

    def next(self, node: AVLNode) -> Optional[AVLNode]:
        """Return the node following ``node`` in order, or None."""
        return super().next(node)

    def previous(self, node: AVLNode) -> Optional[AVLNode]:
        """Return the node preceding ``node`` in order, or None."""
        return super().previous(node)

    def clear(self) -> None:
        """Remove every value, discarding each one."""
        super().clear()

    def is_proper(self) -> bool:
        """Check ordering, size, recorded heights and balance of the tree."""
        return super().is_proper() and all(
            node.height == 1 + max(_height(node.left), _height(node.right))
            and -1 <= _balance(node) <= 1
            for node in self._nodes()
        )