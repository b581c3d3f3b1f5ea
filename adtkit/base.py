"""Shared pieces of the ordered set implementations."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

Compare = Callable[[Any, Any], int]
Discard = Optional[Callable[[Any], None]]


def natural_compare(a: Any, b: Any) -> int:
    """Order two values by ``<``: negative, zero or positive."""
    return (a > b) - (a < b)


class SortedSetBase:
    """Iteration and lookup for ordered sets.

    Subclasses provide ``first()``, ``last()``, ``next(node)``,
    ``previous(node)`` and ``find_node(value)``; nodes carry a ``value``
    attribute and the navigation methods return ``None`` past either end.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        node = self.first()  # type: ignore[attr-defined]
        while node is not None:
            yield node.value
            node = self.next(node)  # type: ignore[attr-defined]

    def __reversed__(self) -> Iterator[Any]:
        node = self.last()  # type: ignore[attr-defined]
        while node is not None:
            yield node.value
            node = self.previous(node)  # type: ignore[attr-defined]

    def __contains__(self, value: Any) -> bool:
        return self.find_node(value) is not None  # type: ignore[attr-defined]

    def find(self, value: Any, default: Any = None) -> Any:
        """Return the stored value equivalent to ``value``, or ``default``."""
        node = self.find_node(value)  # type: ignore[attr-defined]
        return default if node is None else node.value