"""An ordered key-value map built on the AVL set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from .avl import AVLSet
from .base import Compare, Discard, natural_compare


@dataclass(eq=False)
class MapNode:
    """One key-value association of a :class:`TreeMap`."""

    key: Any
    value: Any = None


class TreeMap:
    """A map ordered by its keys.

    ``compare(a, b)`` orders the keys; keys that compare equal are the same
    key. ``on_discard_key`` and ``on_discard_value``, if given, are called
    with keys and values that leave the map: on removal, on replacement by
    a different object, and on :meth:`clear`.
    """

    def __init__(
        self,
        compare: Compare = natural_compare,
        on_discard_key: Discard = None,
        on_discard_value: Discard = None,
    ) -> None:
        self.compare = compare
        self.on_discard_key = on_discard_key
        self.on_discard_value = on_discard_value
        self._set = AVLSet(self._compare_nodes, self._discard_node)

    def _compare_nodes(self, a: MapNode, b: MapNode) -> int:
        return self.compare(a.key, b.key)

    def _discard_node(self, node: MapNode) -> None:
        if self.on_discard_key is not None:
            self.on_discard_key(node.key)
        if self.on_discard_value is not None:
            self.on_discard_value(node.value)

    def __len__(self) -> int:
        return len(self._set)

    def __contains__(self, key: Any) -> bool:
        return self.find_node(key) is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in order."""
        for node in self._set:
            yield node.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def find(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node = self.find_node(key)
        return default if node is None else node.value

    def insert(self, key: Any, value: Any) -> bool:
        """Store ``value`` under ``key``. Return True if the key was new."""
        node = self.find_node(key)
        if node is None:
            self._set.insert(MapNode(key, value))
            return True
        if key is not node.key and self.on_discard_key is not None:
            self.on_discard_key(node.key)
        if value is not node.value and self.on_discard_value is not None:
            self.on_discard_value(node.value)
        node.key = key
        node.value = value
        return False

    def remove(self, key: Any) -> bool:
        """Remove ``key`` and its value. Return True if the key was present."""
        return self._set.remove(MapNode(key))

    def find_node(self, key: Any) -> Optional[MapNode]:
        """Return the association for ``key``, or None."""
        return self._set.find(MapNode(key))

    def first(self) -> Optional[MapNode]:
        """Return the association with the smallest key, or None if empty."""
        node = self._set.first()
        return None if node is None else node.value

    def next(self, node: MapNode) -> Optional[MapNode]:
        """Return the association after ``node``, or None if it is the last."""
        set_node = self._set.find_node(node)
        if set_node is None or set_node.value is not node:
            raise ValueError("node does not belong to this map")
        following = self._set.next(set_node)
        return None if following is None else following.value

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._set:
            yield node.key, node.value

    def clear(self) -> None:
        """Remove every association, discarding keys and values."""
        self._set.clear()