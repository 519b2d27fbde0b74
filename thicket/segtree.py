"""Segment tree over a fixed-size sequence with a pluggable combine function.

The tree is stored in a flat list of 4n slots where node i has children
2i+1 and 2i+2. Every internal node holds the combination of its two
children, so any closed range [left, right] can be answered by combining
O(log n) stored nodes. The combine function must be associative; it need
not be commutative, as children are always combined left to right.

Example:
    >>> from thicket.ops import SUM
    >>> tree = SegmentTree.of(range(1, 11), SUM)
    >>> tree.query(0, 9)
    55
    >>> tree.update(0, 10)
    >>> tree.query(0, 9)
    64
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, override

from thicket.common import Combine, Iterating, Sized, check_index, check_range
from thicket.ops import Monoid

__all__ = ["SegmentTree"]


class SegmentTree[T](Sized, Iterating[T]):
    """A mutable segment tree answering associative range queries."""

    def __init__(self, size: int, combine: Combine[T], identity: T) -> None:
        """Initialize a tree of `size` leaves, all holding the identity.

        Use mk() or of() to build a tree from values.
        """
        if size < 0:
            raise ValueError("SegmentTree size must be non-negative")
        self._size = size
        self._combine = combine
        self._identity = identity
        self._storage: List[T] = [identity] * (4 * size)

    @staticmethod
    def mk(values: Iterable[T], combine: Combine[T], identity: T) -> SegmentTree[T]:
        """Build a tree from values.

        Time Complexity: O(n)

        Args:
            values: The leaf values, in order.
            combine: Associative binary operator.
            identity: Identity element of the operator, returned by disjoint subtrees.

        Returns:
            A tree whose leaves are the given values.
        """
        items = list(values)
        tree = SegmentTree(len(items), combine, identity)
        if items:
            tree._build(items, 0, 0, len(items) - 1)
        logging.debug("built segment tree of %d leaves", len(items))
        return tree

    @staticmethod
    def of(values: Iterable[T], monoid: Monoid[T]) -> SegmentTree[T]:
        """Build a tree from values using a monoid's combine and identity."""
        return SegmentTree.mk(values, monoid.combine, monoid.identity)

    @override
    def size(self) -> int:
        """Return the number of leaves."""
        return self._size

    @override
    def iter(self) -> Iterator[T]:
        """Iterate over the leaf values in index order."""
        for index in range(self._size):
            yield self.get(index)

    @property
    def identity(self) -> T:
        return self._identity

    def total(self) -> T:
        """Combine every leaf, or return the identity for an empty tree."""
        return self._storage[0] if self._size else self._identity

    def get(self, index: int) -> T:
        """Get the leaf value at an index.

        Time Complexity: O(log n)

        Raises:
            IndexOutOfRangeError: If the index is out of bounds.
        """
        check_index(index, self._size)
        node, left, right = 0, 0, self._size - 1
        while left != right:
            mid = (left + right) // 2
            if index <= mid:
                node, right = 2 * node + 1, mid
            else:
                node, left = 2 * node + 2, mid + 1
        return self._storage[node]

    def update(self, index: int, value: T) -> None:
        """Set the leaf at an index and recombine its ancestors.

        Time Complexity: O(log n)

        Args:
            index: Leaf index in [0, size-1].
            value: The new leaf value.

        Raises:
            IndexOutOfRangeError: If the index is out of bounds.
        """
        check_index(index, self._size)
        self._update(0, 0, self._size - 1, index, value)

    def query(self, left: int, right: int) -> T:
        """Combine the leaves in the closed range [left, right].

        Time Complexity: O(log n)

        Args:
            left: First leaf index of the range.
            right: Last leaf index of the range (inclusive).

        Returns:
            combine folded over the range, in index order.

        Raises:
            IndexOutOfRangeError: Unless 0 <= left <= right < size.
        """
        check_range(left, right, self._size)
        return self._query(0, 0, self._size - 1, left, right)

    def _build(self, values: List[T], node: int, left: int, right: int) -> None:
        if left == right:
            self._storage[node] = values[left]
            return
        mid = (left + right) // 2
        self._build(values, 2 * node + 1, left, mid)
        self._build(values, 2 * node + 2, mid + 1, right)
        self._pull(node)

    def _update(self, node: int, left: int, right: int, index: int, value: T) -> None:
        if left == right:
            self._storage[node] = value
            return
        mid = (left + right) // 2
        if index <= mid:
            self._update(2 * node + 1, left, mid, index, value)
        else:
            self._update(2 * node + 2, mid + 1, right, index, value)
        self._pull(node)

    def _query(
        self, node: int, left: int, right: int, query_left: int, query_right: int
    ) -> T:
        if query_left > right or query_right < left:
            return self._identity
        if query_left <= left and right <= query_right:
            return self._storage[node]
        mid = (left + right) // 2
        return self._combine(
            self._query(2 * node + 1, left, mid, query_left, query_right),
            self._query(2 * node + 2, mid + 1, right, query_left, query_right),
        )

    def _pull(self, node: int) -> None:
        self._storage[node] = self._combine(
            self._storage[2 * node + 1], self._storage[2 * node + 2]
        )

    def __repr__(self) -> str:
        return f"SegmentTree({self.list()!r})"
