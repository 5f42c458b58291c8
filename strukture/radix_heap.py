"""Radix sort and a binary max-heap kept in a list."""

from __future__ import annotations

from itertools import chain
from typing import Any, MutableSequence


def radix_sort(values: MutableSequence[int]) -> None:
    """Sort non-negative integers in place, least significant decimal digit first."""
    if not values:
        return
    if min(values) < 0:
        raise ValueError("radix sort needs non-negative integers")
    digits = len(str(max(values)))
    divisor = 1
    for _ in range(digits):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in values:
            buckets[(value // divisor) % 10].append(value)
        values[:] = list(chain.from_iterable(buckets))
        divisor *= 10


def fix_downwards(heap: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``heap[index]`` down within the first ``size`` items."""
    if size < 0 or size > len(heap) or index < 0 or index >= size:
        raise ValueError("invalid argument")
    while index < size // 2:
        left, right = 2 * index + 1, 2 * index + 2
        child = right if right < size and heap[right] > heap[left] else left
        if heap[index] > heap[child]:
            return
        heap[index], heap[child] = heap[child], heap[index]
        index = child


def fix_upwards(heap: MutableSequence[Any], index: int) -> None:
    """Sift ``heap[index]`` up towards the root."""
    if index < 0 or index >= len(heap):
        raise ValueError("invalid argument")
    while index != 0 and heap[index] > heap[(index - 1) // 2]:
        parent = (index - 1) // 2
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def make_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max-heap."""
    for index in range(len(values) // 2 - 1, -1, -1):
        fix_downwards(values, len(values), index)


def heap_insert(heap: MutableSequence[Any], value: Any, size: int) -> int:
    """Insert ``value`` into the heap held in ``heap[:size]``; return the new size."""
    if size < 0 or size > len(heap):
        raise ValueError("invalid argument")
    if size == len(heap):
        heap.append(value)
    else:
        heap[size] = value
    fix_upwards(heap, size)
    return size + 1


def heap_extract(heap: MutableSequence[Any], size: int) -> tuple[Any, int]:
    """Remove the largest item of ``heap[:size]``.

    The item is moved to ``heap[size - 1]``. Returns it and the new size.
    """
    if size < 0 or size > len(heap):
        raise ValueError("invalid argument")
    if size == 0:
        raise IndexError("empty heap")
    size -= 1
    heap[0], heap[size] = heap[size], heap[0]
    if size != 0:
        fix_downwards(heap, size, 0)
    return heap[size], size


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in ascending order using a max-heap."""
    make_heap(values)
    size = len(values)
    for _ in range(len(values) - 1):
        _, size = heap_extract(values, size)