"""Binary and ternary search over sequences and real functions."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from thicket.common import Impossible, Ordering, compare

__all__ = ["binary_search", "binary_search_function", "ternary_search"]


def binary_search[T](values: Sequence[T], target: T) -> Optional[int]:
    """Find the index of a target in an ascending sequence.

    Time Complexity: O(log n)

    Args:
        values: Sequence sorted in ascending order.
        target: The value to look for.

    Returns:
        An index holding the target, or None if it is absent.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        match compare(values[mid], target):
            case Ordering.Eq:
                return mid
            case Ordering.Gt:
                right = mid - 1
            case Ordering.Lt:
                left = mid + 1
            case _:
                raise Impossible
    return None


def binary_search_function(
    fn: Callable[[float], float],
    target: float,
    left: float = 0.0,
    right: float = 1e3,
    eps: float = 1e-6,
) -> float:
    """Find the argument at which a monotonically increasing function reaches a target.

    Args:
        fn: Monotonically increasing function.
        target: The value to solve fn(x) == target for.
        left: Lower bound of the search interval.
        right: Upper bound of the search interval.
        eps: Width of the interval at which the search stops.

    Returns:
        The midpoint of the final interval.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    while right - left > eps:
        mid = left + (right - left) / 2
        if fn(mid) < target:
            left = mid
        else:
            right = mid
    return (left + right) / 2


def ternary_search(
    fn: Callable[[float], float],
    left: float,
    right: float,
    eps: float = 1e-6,
    maximize: bool = True,
) -> float:
    """Find the maximum (or minimum) of a unimodal function on [left, right].

    When the two probes tie, the right bound moves in.

    Args:
        fn: Unimodal function.
        left: Lower bound of the search interval.
        right: Upper bound of the search interval.
        eps: Width of the interval at which the search stops.
        maximize: Search for the maximum if True, the minimum otherwise.

    Returns:
        The midpoint of the final interval.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    while right - left > eps:
        m1 = left + (right - left) / 3
        m2 = right - (right - left) / 3
        match compare(fn(m1), fn(m2)):
            case Ordering.Lt if maximize:
                left = m1
            case Ordering.Gt if not maximize:
                left = m1
            case _:
                right = m2
    return (left + right) / 2
