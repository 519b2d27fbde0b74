"""Sparse table for O(1) idempotent range queries.

`table[i][j]` holds the combination of the 2^j elements starting at i, so
any range is covered by two (possibly overlapping) power-of-two blocks.
Because the blocks may overlap, the combine function must be idempotent
(min, max, gcd, ...). A non-idempotent operator such as addition gives
wrong answers.

Point updates are partial: `update(i, v)` recomputes only the blocks that
start at i. Blocks that start before i and span it keep their old value,
so queries starting before i and covering it may read stale data until
`rebuild()` is called.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, override

from thicket.common import Combine, Iterating, Sized, check_index, check_range
from thicket.ops import Monoid

__all__ = ["SparseTable"]


def _build_logs(size: int) -> List[int]:
    logs = [0] * (size + 1)
    for i in range(2, size + 1):
        logs[i] = logs[i // 2] + 1
    return logs


class SparseTable[T](Sized, Iterating[T]):
    """A power-of-two interval table over a fixed-size sequence."""

    def __init__(self, values: List[T], combine: Combine[T]) -> None:
        """Build the table from a list of values.

        Time Complexity: O(n log n)
        Space Complexity: O(n log n)
        """
        self._size = len(values)
        self._combine = combine
        self._logs = _build_logs(self._size)
        # Row i holds the blocks of length 1, 2, 4, ... that fit from i.
        self._table: List[List[T]] = [[value] for value in values]
        self._fill()

    @staticmethod
    def mk(values: Iterable[T], combine: Combine[T]) -> SparseTable[T]:
        """Build a table from values with an idempotent combine function."""
        table = SparseTable(list(values), combine)
        logging.debug("built sparse table of %d elements", table.size())
        return table

    @staticmethod
    def of(values: Iterable[T], monoid: Monoid[T]) -> SparseTable[T]:
        """Build a table from values using a monoid's combine function.

        Logs a warning if the monoid is not idempotent, since overlapping
        query blocks would then be double counted.
        """
        if not monoid.idempotent:
            logging.warning(
                "sparse table built with non-idempotent operator %r; "
                "range queries will double count overlaps",
                monoid.combine,
            )
        return SparseTable.mk(values, monoid.combine)

    @override
    def size(self) -> int:
        return self._size

    @override
    def iter(self) -> Iterator[T]:
        """Iterate over the current element values in index order."""
        for row in self._table:
            yield row[0]

    def get(self, index: int) -> T:
        """Get the current element value at an index.

        Raises:
            IndexOutOfRangeError: If the index is out of bounds.
        """
        check_index(index, self._size)
        return self._table[index][0]

    def query(self, left: int, right: int) -> T:
        """Combine the elements in the closed range [left, right].

        Time Complexity: O(1)

        Raises:
            IndexOutOfRangeError: Unless 0 <= left <= right < size.
        """
        check_range(left, right, self._size)
        j = self._logs[right - left + 1]
        return self._combine(
            self._table[left][j], self._table[right - (1 << j) + 1][j]
        )

    def update(self, index: int, value: T) -> None:
        """Set the element at an index and recompute the blocks starting there.

        Blocks that start before `index` are not recomputed; see the module
        documentation.

        Time Complexity: O(log n)

        Raises:
            IndexOutOfRangeError: If the index is out of bounds.
        """
        check_index(index, self._size)
        row = self._table[index]
        row[0] = value
        for j in range(1, len(row)):
            row[j] = self._combine(
                row[j - 1], self._table[index + (1 << (j - 1))][j - 1]
            )

    def rebuild(self) -> None:
        """Recompute every block from the current element values.

        Time Complexity: O(n log n)
        """
        for row in self._table:
            del row[1:]
        self._fill()

    def _fill(self) -> None:
        j = 1
        while (1 << j) <= self._size:
            half = 1 << (j - 1)
            for i in range(self._size - (1 << j) + 1):
                self._table[i].append(
                    self._combine(
                        self._table[i][j - 1], self._table[i + half][j - 1]
                    )
                )
            j += 1

    def __repr__(self) -> str:
        return f"SparseTable({self.list()!r})"
