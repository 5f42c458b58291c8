"""Double-ended queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class Deque:
    """Queue that takes and gives items at both the front and the back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front to the back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def copy(self) -> Deque:
        """Return an independent copy."""
        return Deque(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("empty deque")

    def front(self) -> Any:
        """Return the front item without removing it."""
        self._require_items()
        return self._items[0]

    def back(self) -> Any:
        """Return the back item without removing it."""
        self._require_items()
        return self._items[-1]

    def push_front(self, item: Any) -> None:
        """Add ``item`` at the front."""
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        """Add ``item`` at the back."""
        self._items.append(item)

    def pop_front(self) -> Any:
        """Remove and return the front item."""
        self._require_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back item."""
        self._require_items()
        return self._items.pop()