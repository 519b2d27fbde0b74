"""Quadratic in-place sorting routines.

Each routine takes an `order(a, b)` predicate answering whether `a` belongs
before `b`; `ascending` sorts smallest first and `descending` largest first.
"""

from __future__ import annotations

from typing import MutableSequence

from thicket.common import Order

__all__ = ["bubble_sort", "insertion_sort", "selection_sort"]


def bubble_sort[T](values: MutableSequence[T], order: Order[T]) -> None:
    """Sort in place by repeatedly swapping adjacent out-of-order pairs.

    Stops early once a pass makes no swap.
    """
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if order(values[j + 1], values[j]):
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def insertion_sort[T](values: MutableSequence[T], order: Order[T]) -> None:
    """Sort in place by growing a sorted prefix one element at a time."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and order(key, values[j]):
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def selection_sort[T](values: MutableSequence[T], order: Order[T]) -> None:
    """Sort in place by moving the first-ordered remaining element to the front."""
    n = len(values)
    for i in range(n - 1):
        best = i
        for j in range(i + 1, n):
            if order(values[j], values[best]):
                best = j
        if best != i:
            values[i], values[best] = values[best], values[i]
