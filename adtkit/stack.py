"""A last-in, first-out stack."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional

Discard = Optional[Callable[[Any], None]]


class _Sequence:
    """Shared storage and helpers for the deque-backed containers."""

    __slots__ = ("_items", "on_discard")
    _kind = "sequence"

    _items: Deque[Any]
    on_discard: Discard

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __iter__(self) -> Iterator[Any]:  # pragma: no cover - overridden
        return iter(self._items)

    def _end(self, index: int, action: str) -> Any:
        if not self._items:
            raise IndexError(f"{action} of an empty {self._kind}")
        return self._items[index]

    def _check_not_empty(self) -> None:
        if not self._items:
            raise IndexError(f"pop from an empty {self._kind}")

    def _discard(self, value: Any) -> None:
        if self.on_discard is not None:
            self.on_discard(value)

    def _discard_all(self, values: Iterable[Any]) -> None:
        if self.on_discard is not None:
            for value in values:
                self.on_discard(value)


class Stack(_Sequence):
    """A LIFO stack.

    If ``on_discard`` is given, it is called with every value that leaves
    the stack, whether through :meth:`pop` or :meth:`clear` (top first).
    """

    __slots__ = ()
    _kind = "stack"

    def __init__(self, on_discard: Discard = None) -> None:
        self._items = deque()
        self.on_discard = on_discard

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the top of the stack to the bottom."""
        return reversed(self._items)

    def top(self) -> Any:
        """Return the value on top of the stack without removing it."""
        return self._end(-1, "top")

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove the value on top of the stack and return it."""
        self._check_not_empty()
        value = self._items.pop()
        self._discard(value)
        return value

    def clear(self) -> None:
        """Remove every value, top first."""
        leaving = list(self)
        self._items = deque()
        self._discard_all(leaving)