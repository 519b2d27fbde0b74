import operator

import pytest

from thicket.common import IndexOutOfRangeError
from thicket.ops import MAX, MIN, SUM, Monoid
from thicket.segtree import SegmentTree


def test_sum_full_range():
    """Test sum over 1..10 before and after a point update"""
    tree = SegmentTree.of(range(1, 11), SUM)
    assert tree.size() == 10
    assert tree.query(0, 9) == 55
    tree.update(0, 10)
    assert tree.query(0, 9) == 64
    assert tree.query(0, 0) == 10


def test_sum_twelve_elements():
    """Test a size that is not a power of two"""
    tree = SegmentTree.of(range(1, 13), SUM)
    assert tree.query(0, 11) == 78
    tree.update(0, 10)
    assert tree.query(0, 11) == 87
    assert tree.query(3, 6) == 4 + 5 + 6 + 7


def test_max_query():
    """Test max queries, including one spanning a partial subtree"""
    tree = SegmentTree.of([5, 7, 8, 1, 12, 3, 3, 3, 4, 1, 9, 7], MAX)
    assert tree.query(3, 11) == 12
    assert tree.query(5, 9) == 4
    tree.update(0, 100)
    assert tree.query(0, 7) == 100
    assert tree.query(1, 7) == 12


def test_min_query_uses_identity():
    """Test that disjoint subtrees contribute the identity rather than zero"""
    tree = SegmentTree.of([5, 7, 8, 6], MIN)
    assert tree.query(1, 3) == 6
    assert tree.query(2, 2) == 8


def test_non_commutative_combine():
    """Test that leaves are combined in index order"""
    tree = SegmentTree.mk("abcdefg", operator.add, "")
    assert tree.query(0, 6) == "abcdefg"
    assert tree.query(2, 5) == "cdef"
    tree.update(3, "X")
    assert tree.query(1, 4) == "bcXe"
    assert tree.total() == "abcXefg"


def test_single_element():
    """Test a tree with a single leaf"""
    tree = SegmentTree.of([42], SUM)
    assert tree.query(0, 0) == 42
    tree.update(0, 7)
    assert tree.get(0) == 7
    assert tree.total() == 7


def test_empty_tree():
    """Test that an empty tree has no valid indices"""
    tree = SegmentTree.of([], SUM)
    assert tree.null()
    assert tree.total() == 0
    assert tree.list() == []

    with pytest.raises(IndexOutOfRangeError):
        tree.query(0, 0)

    with pytest.raises(IndexOutOfRangeError):
        tree.update(0, 1)


def test_get_and_iter():
    """Test reading leaves back"""
    values = [4, 8, 15, 16, 23, 42]
    tree = SegmentTree.of(values, SUM)
    assert [tree.get(i) for i in range(len(values))] == values
    assert list(tree) == values
    assert repr(tree) == f"SegmentTree({values!r})"


def test_bounds_checking_leaves_tree_unchanged():
    """Test out-of-range update and query arguments"""
    tree = SegmentTree.of(range(1, 6), SUM)

    with pytest.raises(IndexOutOfRangeError):
        tree.update(5, 100)

    with pytest.raises(IndexOutOfRangeError):
        tree.update(-1, 100)

    with pytest.raises(IndexOutOfRangeError):
        tree.query(-1, 2)

    with pytest.raises(IndexOutOfRangeError):
        tree.query(0, 5)

    with pytest.raises(IndexOutOfRangeError):
        tree.query(3, 2)

    with pytest.raises(IndexOutOfRangeError):
        tree.get(5)

    assert tree.list() == [1, 2, 3, 4, 5]
    assert tree.query(0, 4) == 15


def test_negative_size_rejected():
    """Test that a negative size is invalid"""
    with pytest.raises(ValueError, match="non-negative"):
        SegmentTree(-1, operator.add, 0)


def test_custom_monoid():
    """Test a user-defined monoid with a non-zero identity"""
    bitand = Monoid(operator.and_, -1, idempotent=True)
    tree = SegmentTree.of([0b1110, 0b0111, 0b1111], bitand)
    assert tree.identity == -1
    assert tree.query(0, 2) == 0b0110
    assert tree.query(2, 2) == 0b1111
