"""Array-backed binary heap with a pluggable ordering predicate.

The heap property is relative to the `order` predicate given at
construction: `order(a, b)` answers whether `a` should sit above `b`, so
`ascending` gives a min-heap and `descending` a max-heap.

Indices returned by `list()` or used with `remove`/`replace` are not stable
across mutation, since removal moves the last element into the freed slot.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, override

from thicket.common import EmptyError, Iterating, Order, Sized, check_index

__all__ = ["BinaryHeap"]


class BinaryHeap[T](Sized, Iterating[T]):
    """A mutable binary heap stored in a dense list."""

    def __init__(self, storage: List[T], order: Order[T]) -> None:
        """Initialize from a list that already satisfies the heap property.

        Use mk() to build a heap from arbitrary values.
        """
        self._storage = storage
        self._order = order

    @staticmethod
    def empty(order: Order[T]) -> BinaryHeap[T]:
        """Create an empty heap ordered by the given predicate."""
        return BinaryHeap([], order)

    @staticmethod
    def mk(values: Iterable[T], order: Order[T]) -> BinaryHeap[T]:
        """Build a heap from an iterable of elements.

        Time Complexity: O(n)

        Args:
            values: Elements to copy into the heap.
            order: Predicate answering whether the first argument belongs above the second.

        Returns:
            A heap containing all the given elements.
        """
        heap = BinaryHeap(list(values), order)
        for index in range(heap.size() // 2 - 1, -1, -1):
            heap._sift_down(index)
        logging.debug("built heap of %d elements", heap.size())
        return heap

    @override
    def size(self) -> int:
        """Return the number of elements in the heap."""
        return len(self._storage)

    @override
    def iter(self) -> Iterator[T]:
        """Iterate over the elements in storage order (not priority order)."""
        return iter(list(self._storage))

    def peek(self) -> T:
        """Return the highest priority element without removing it.

        Raises:
            EmptyError: If the heap is empty.
        """
        if not self._storage:
            raise EmptyError("Cannot peek into an empty heap")
        return self._storage[0]

    def insert(self, value: T) -> None:
        """Insert a new element.

        Time Complexity: O(log n)
        """
        self._storage.append(value)
        self._sift_up(len(self._storage) - 1)

    def remove(self, index: int) -> T:
        """Remove the element at a storage index.

        The last element takes the freed slot and is sifted down, or up if it
        belongs above its new parent.

        Time Complexity: O(log n)

        Args:
            index: Storage index in [0, size-1].

        Returns:
            The removed element.

        Raises:
            IndexOutOfRangeError: If the index is out of bounds.
        """
        check_index(index, len(self._storage))
        removed = self._storage[index]
        last = self._storage.pop()
        if index < len(self._storage):
            self._storage[index] = last
            if self._sift_down(index) == index:
                self._sift_up(index)
        return removed

    def replace(self, index: int, value: T) -> None:
        """Overwrite the element at a storage index and sift it down.

        Only sifts down: replacing an element with one that belongs above its
        parent leaves the heap property violated. Use remove() followed by
        insert() for an arbitrary priority change.

        Time Complexity: O(log n)

        Raises:
            IndexOutOfRangeError: If the index is out of bounds.
        """
        check_index(index, len(self._storage))
        self._storage[index] = value
        self._sift_down(index)

    def pop(self) -> T:
        """Remove and return the highest priority element.

        Raises:
            EmptyError: If the heap is empty.
        """
        value = self.peek()
        self.remove(0)
        return value

    def drain(self) -> Iterator[T]:
        """Pop every element in priority order, emptying the heap."""
        while self._storage:
            yield self.pop()

    def _sift_up(self, index: int) -> int:
        storage = self._storage
        while index > 0:
            parent = (index - 1) // 2
            if not self._order(storage[index], storage[parent]):
                break
            storage[index], storage[parent] = storage[parent], storage[index]
            index = parent
        return index

    def _sift_down(self, index: int) -> int:
        storage = self._storage
        size = len(storage)
        while True:
            left = 2 * index + 1
            right = left + 1
            top = index
            if left < size and self._order(storage[left], storage[top]):
                top = left
            if right < size and self._order(storage[right], storage[top]):
                top = right
            if top == index:
                return index
            storage[index], storage[top] = storage[top], storage[index]
            index = top

    def __repr__(self) -> str:
        return f"BinaryHeap({self._storage!r})"
