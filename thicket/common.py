"""Common utility types and functions for the thicket data structure library.

This module provides the container base classes, comparison utilities and
the error taxonomy shared by every structure in the library.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from enum import Enum
from typing import Callable, Iterator, List

__all__ = [
    "Combine",
    "EmptyError",
    "Impossible",
    "IndexOutOfRangeError",
    "Iterating",
    "NotFoundError",
    "Order",
    "Ordering",
    "Sized",
    "check_index",
    "check_range",
    "compare",
]

type Order[T] = Callable[[T, T], bool]
"""Predicate answering whether the first argument belongs before (above) the second."""

type Combine[T] = Callable[[T, T], T]
"""Binary operator used to aggregate values."""


class Impossible(Exception):
    """Exception raised when encountering theoretically impossible states.

    Used to indicate internal consistency violations in data structure operations.
    """

    pass


class EmptyError(LookupError):
    """Raised when an operation needs at least one element but the container is empty."""

    pass


class IndexOutOfRangeError(IndexError):
    """Raised when an index or range argument violates the container bounds."""

    pass


class NotFoundError(KeyError):
    """Raised when removing a key that is not stored."""

    pass


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def null(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.null()

    def __len__(self) -> int:
        return self.size()


class Iterating[U](metaclass=ABCMeta):
    @abstractmethod
    def iter(self) -> Iterator[U]: ...

    def list(self) -> List[U]:
        return list(self.iter())

    def __iter__(self) -> Iterator[U]:
        return self.iter()


class Ordering(Enum):
    """Enumeration representing the result of a comparison operation."""

    Lt = -1
    Eq = 0
    Gt = 1


def compare[T](a: T, b: T) -> Ordering:
    """Compare two values and return their ordering relationship.

    Uses the == and < operators so mixed numeric types compare correctly.

    Args:
        a: First value to compare.
        b: Second value to compare.

    Returns:
        Ordering indicating the relationship between a and b.
    """
    if a == b:
        return Ordering.Eq
    elif a < b:  # type: ignore[operator]
        return Ordering.Lt
    else:
        return Ordering.Gt


def check_index(index: int, size: int) -> None:
    """Ensure that index lies in [0, size).

    Raises:
        IndexOutOfRangeError: If the index is out of bounds.
    """
    if not (0 <= index < size):
        raise IndexOutOfRangeError(
            f"Index {index} out of bounds for container of size {size}"
        )


def check_range(left: int, right: int, size: int) -> None:
    """Ensure that the closed range [left, right] satisfies 0 <= left <= right < size.

    Raises:
        IndexOutOfRangeError: If the range is empty, reversed or out of bounds.
    """
    if not (0 <= left <= right < size):
        raise IndexOutOfRangeError(
            f"Range [{left}, {right}] out of bounds for container of size {size}"
        )
