"""Heap sort and a summary of the highest and lowest marks."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple


class MarkRange(NamedTuple):
    """Highest and lowest marks in a subject."""

    highest: int
    lowest: int


def _sift_down(items: list, index: int, size: int) -> None:
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable) -> list:
    """Return the values in ascending order, sorted with a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, index, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def mark_range(marks: Iterable[int]) -> MarkRange:
    """Highest and lowest of the marks, found by heap sorting them."""
    ordered = heap_sort(marks)
    if not ordered:
        raise ValueError("no marks given")
    return MarkRange(highest=ordered[-1], lowest=ordered[0])