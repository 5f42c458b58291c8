"""Doubly linked list with a movable cursor."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, slots=True)
class _Node:
    value: Any = None
    prev: Optional[_Node] = field(default=None, repr=False)
    next: Optional[_Node] = field(default=None, repr=False)


class DoublyLinkedList:
    """Sequence of linked nodes with a cursor marking the current item.

    Inserting into an empty list makes the new item current; otherwise
    ``insert_before`` and ``insert_after`` place the item next to the
    current one and leave the cursor where it was. Operations that need a
    current item raise ``IndexError`` on an empty list.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._head.prev = self._head.next = self._head
        self._size = 0
        self._current: Optional[_Node] = None
        for item in items:
            self._link(item, self._head.prev, self._head)
        if self._size:
            self._current = self._head.next

    def _link(self, value: Any, before: _Node, after: _Node) -> _Node:
        node = _Node(value, before, after)
        before.next = node
        after.prev = node
        self._size += 1
        return node

    def _require_items(self) -> _Node:
        if self._current is None:
            raise IndexError("empty list")
        return self._current

    def _node_at(self, index: int) -> _Node:
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        if index < self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._head.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the first item to the last."""
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        """Iterate from the last item to the first."""
        node = self._head.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def copy(self) -> DoublyLinkedList:
        """Return an independent copy whose cursor is on the first item."""
        return DoublyLinkedList(self)

    @property
    def current(self) -> Any:
        """The item under the cursor; assignable."""
        return self._require_items().value

    @current.setter
    def current(self, value: Any) -> None:
        self._require_items().value = value

    def previous(self) -> bool:
        """Move the cursor back; return False if it is already on the first item."""
        node = self._require_items()
        if node.prev is self._head:
            return False
        self._current = node.prev
        return True

    def next(self) -> bool:
        """Move the cursor forward; return False if it is already on the last item."""
        node = self._require_items()
        if node.next is self._head:
            return False
        self._current = node.next
        return True

    def to_start(self) -> None:
        """Put the cursor on the first item."""
        self._require_items()
        self._current = self._head.next

    def to_end(self) -> None:
        """Put the cursor on the last item."""
        self._require_items()
        self._current = self._head.prev

    def remove(self) -> None:
        """Remove the current item.

        The cursor moves to the following item, or to the preceding one when
        the last item was removed.
        """
        node = self._require_items()
        if node.next is not self._head:
            self._current = node.next
        elif node.prev is not self._head:
            self._current = node.prev
        else:
            self._current = None
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1

    def insert_before(self, item: Any) -> None:
        """Insert ``item`` in front of the current item."""
        if self._current is None:
            self._current = self._link(item, self._head, self._head)
        else:
            self._link(item, self._current.prev, self._current)

    def insert_after(self, item: Any) -> None:
        """Insert ``item`` behind the current item."""
        if self._current is None:
            self._current = self._link(item, self._head, self._head)
        else:
            self._link(item, self._current, self._current.next)

    def __getitem__(self, index: int) -> Any:
        """Return the item at ``index``; negative indices are not accepted."""
        return self._node_at(index).value

    def __setitem__(self, index: int, value: Any) -> None:
        self._node_at(index).value = value


def max_element(items: Iterable[Any]) -> Any:
    """Return the largest item, the first of equals; raise ValueError if empty."""
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("max_element of an empty sequence") from None
    for item in iterator:
        if item > best:
            best = item
    return best