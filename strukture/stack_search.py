"""Stack of sorted lists and a binary search across it."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Sequence


class Stack:
    """Last-in, first-out stack."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def copy(self) -> Stack:
        """Return an independent copy."""
        return Stack(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def top(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("empty stack")
        return self._items[-1]

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("empty stack")
        return self._items.pop()


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the sorted ``values``, or ``None``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def stack_search(stack: Stack, target: Any) -> Optional[tuple[int, int]]:
    """Find ``target`` in a stack of sorted lists whose contents grow towards the top.

    Lists are examined from the top down; the first non-empty list whose first
    item is not larger than ``target`` is searched. Returns the index in that
    list and the list's position counted from the bottom of the stack, or
    ``None`` when ``target`` is absent. The stack is left as it was.
    """
    removed: list[Any] = []
    try:
        while len(stack):
            values = stack.top()
            if values and values[0] <= target:
                index = binary_search(values, target)
                return None if index is None else (index, len(stack) - 1)
            removed.append(stack.pop())
        return None
    finally:
        for values in reversed(removed):
            stack.push(values)