from thicket.common import (
    EmptyError,
    Impossible,
    IndexOutOfRangeError,
    NotFoundError,
    Ordering,
)
from thicket.config import ALPHANUMERIC, LOWERCASE, Alphabet
from thicket.dsu import DisjointSet
from thicket.heap import BinaryHeap
from thicket.ops import GCD, MAX, MIN, PRODUCT, SUM, Monoid, ascending, descending
from thicket.ring import CircularQueue
from thicket.search import binary_search, binary_search_function, ternary_search
from thicket.segtree import SegmentTree
from thicket.sort import bubble_sort, insertion_sort, selection_sort
from thicket.sparse import SparseTable
from thicket.trie import Trie

__all__ = [
    "ALPHANUMERIC",
    "Alphabet",
    "BinaryHeap",
    "CircularQueue",
    "DisjointSet",
    "EmptyError",
    "GCD",
    "Impossible",
    "IndexOutOfRangeError",
    "LOWERCASE",
    "MAX",
    "MIN",
    "Monoid",
    "NotFoundError",
    "Ordering",
    "PRODUCT",
    "SUM",
    "SegmentTree",
    "SparseTable",
    "Trie",
    "ascending",
    "binary_search",
    "binary_search_function",
    "bubble_sort",
    "descending",
    "insertion_sort",
    "selection_sort",
    "ternary_search",
]
