"""First-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class Queue:
    """Queue with items taken from the front and added at the back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def copy(self) -> Queue:
        """Return an independent copy."""
        return Queue(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def push(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the front item."""
        if not self._items:
            raise IndexError("empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it."""
        if not self._items:
            raise IndexError("empty queue")
        return self._items[0]