"""Operator bundles and ordering predicates.

A Monoid packages an associative combine function with its identity element
so range structures never have to guess a neutral value. The `idempotent`
flag records whether combining overlapping ranges is safe, which the sparse
table relies on.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any

from thicket.common import Combine, Ordering, compare

__all__ = [
    "GCD",
    "MAX",
    "MIN",
    "Monoid",
    "PRODUCT",
    "SUM",
    "ascending",
    "descending",
]


@dataclass(frozen=True)
class Monoid[T]:
    """An associative operator with its identity element.

    Attributes:
        combine: Associative binary operator.
        identity: Element e with combine(e, x) == combine(x, e) == x.
        idempotent: Whether combine(x, x) == x for every x.
    """

    combine: Combine[T]
    identity: T
    idempotent: bool = False

    def fold(self, *values: T) -> T:
        """Combine values from left to right, starting at the identity."""
        acc = self.identity
        for value in values:
            acc = self.combine(acc, value)
        return acc


SUM: Monoid[Any] = Monoid(operator.add, 0)
PRODUCT: Monoid[Any] = Monoid(operator.mul, 1)
MIN: Monoid[Any] = Monoid(min, math.inf, idempotent=True)
MAX: Monoid[Any] = Monoid(max, -math.inf, idempotent=True)
GCD: Monoid[int] = Monoid(math.gcd, 0, idempotent=True)


def ascending[T](a: T, b: T) -> bool:
    """Order predicate placing smaller values first (min-heap order)."""
    return compare(a, b) == Ordering.Lt


def descending[T](a: T, b: T) -> bool:
    """Order predicate placing larger values first (max-heap order)."""
    return compare(a, b) == Ordering.Gt
