"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from .stack import Discard, _Sequence


class Queue(_Sequence):
    """A FIFO queue: values are added at the back and removed from the front.

    If ``on_discard`` is given, it is called with every value that leaves
    the queue, whether through :meth:`pop` or :meth:`clear` (front first).
    """

    __slots__ = ()
    _kind = "queue"

    def __init__(self, on_discard: Discard = None) -> None:
        self._items = deque()
        self.on_discard = on_discard

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from the front of the queue to the back."""
        return iter(self._items)

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        return self._end(0, "front")

    def back(self) -> Any:
        """Return the value at the back without removing it."""
        return self._end(-1, "back")

    def push(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove the value at the front of the queue and return it."""
        self._check_not_empty()
        value = self._items.popleft()
        self._discard(value)
        return value

    def clear(self) -> None:
        """Remove every value, front first."""
        leaving = list(self)
        self._items = deque()
        self._discard_all(leaving)