"""Circular FIFO queue backed by a singly linked ring of nodes.

The queue only holds a handle to the rear node; the rear's successor is the
front, so enqueue, dequeue and rotation are all O(1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, override

from thicket.common import EmptyError, Iterating, Sized

__all__ = ["CircularQueue"]


@dataclass(eq=False)
class _RingNode[T]:
    value: T
    next: Optional[_RingNode[T]] = None


class CircularQueue[T](Sized, Iterating[T]):
    """A mutable FIFO queue that can rotate its front element to the rear."""

    def __init__(self) -> None:
        self._rear: Optional[_RingNode[T]] = None
        self._size = 0

    @staticmethod
    def mk(values: Iterable[T]) -> CircularQueue[T]:
        """Create a queue holding the values, first value at the front."""
        queue: CircularQueue[T] = CircularQueue()
        for value in values:
            queue.add(value)
        return queue

    @override
    def size(self) -> int:
        return self._size

    @override
    def iter(self) -> Iterator[T]:
        """Iterate from front to rear."""
        if self._rear is None:
            return
        node = self._front()
        for _ in range(self._size):
            yield node.value
            node = node.next  # type: ignore[assignment]

    def add(self, value: T) -> None:
        """Enqueue a value at the rear."""
        node = _RingNode(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def peek(self) -> T:
        """Return the front value without removing it.

        Raises:
            EmptyError: If the queue is empty.
        """
        return self._front().value

    def remove(self) -> T:
        """Dequeue and return the front value.

        Raises:
            EmptyError: If the queue is empty.
        """
        front = self._front()
        rear = self._rear
        assert rear is not None
        if front is rear:
            self._rear = None
        else:
            rear.next = front.next
        front.next = None
        self._size -= 1
        return front.value

    def move(self) -> T:
        """Rotate the front value to the rear and return it.

        Raises:
            EmptyError: If the queue is empty.
        """
        front = self._front()
        self._rear = front
        return front.value

    def _front(self) -> _RingNode[T]:
        if self._rear is None or self._rear.next is None:
            raise EmptyError("Queue is empty")
        return self._rear.next

    def __repr__(self) -> str:
        return f"CircularQueue({self.list()!r})"
