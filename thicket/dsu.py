"""Disjoint set union (union-find) over the integers 0..n-1.

Uses union by rank and path compression, giving near-constant amortized
cost per operation.
"""

from __future__ import annotations

from typing import Dict, List, override

from thicket.common import Sized, check_index

__all__ = ["DisjointSet"]


class DisjointSet(Sized):
    """A partition of 0..n-1 into disjoint sets."""

    def __init__(self, size: int) -> None:
        """Start with every element in its own singleton set.

        Raises:
            ValueError: If size is negative.
        """
        if size < 0:
            raise ValueError("DisjointSet size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._count = size

    @staticmethod
    def mk(size: int) -> DisjointSet:
        return DisjointSet(size)

    @override
    def size(self) -> int:
        """Return the number of elements (not sets)."""
        return len(self._parent)

    def count(self) -> int:
        """Return the number of disjoint sets."""
        return self._count

    def find(self, element: int) -> int:
        """Return the representative of the set containing an element.

        Raises:
            IndexOutOfRangeError: If the element is out of bounds.
        """
        check_index(element, len(self._parent))
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, first: int, second: int) -> bool:
        """Join the sets containing two elements.

        Returns:
            True if two distinct sets were joined, False if already joined.

        Raises:
            IndexOutOfRangeError: If either element is out of bounds.
        """
        x = self.find(first)
        y = self.find(second)
        if x == y:
            return False
        if self._rank[x] < self._rank[y]:
            self._parent[x] = y
        elif self._rank[y] < self._rank[x]:
            self._parent[y] = x
        else:
            self._parent[x] = y
            self._rank[y] += 1
        self._count -= 1
        return True

    def same(self, first: int, second: int) -> bool:
        """Check whether two elements are in the same set."""
        return self.find(first) == self.find(second)

    def groups(self) -> List[List[int]]:
        """Return the sets as sorted lists, ordered by smallest element."""
        by_root: Dict[int, List[int]] = {}
        for element in range(len(self._parent)):
            by_root.setdefault(self.find(element), []).append(element)
        return list(by_root.values())
