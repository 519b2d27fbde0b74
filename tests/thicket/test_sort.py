from typing import Callable, List, MutableSequence

import pytest
from hypothesis import given
from hypothesis import strategies as st

from thicket.common import Order
from thicket.ops import ascending, descending
from thicket.sort import bubble_sort, insertion_sort, selection_sort
from tests.thicket.hypo import configure_hypo

configure_hypo()

type Sorter = Callable[[MutableSequence[int], Order[int]], None]

SORTERS = [bubble_sort, insertion_sort, selection_sort]


@pytest.mark.parametrize("sorter", SORTERS)
def test_descending_ints(sorter: Sorter) -> None:
    values = [5, 4, 3, 2, 1]
    sorter(values, descending)
    assert values == [5, 4, 3, 2, 1]

    values = [1, 3, 2, 5, 4]
    sorter(values, descending)
    assert values == [5, 4, 3, 2, 1]


@pytest.mark.parametrize("sorter", SORTERS)
def test_ascending_ints(sorter: Sorter) -> None:
    values = [5, 4, 3, 2, 1]
    sorter(values, ascending)
    assert values == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("sorter", SORTERS)
def test_empty_and_single(sorter: Sorter) -> None:
    empty: List[int] = []
    sorter(empty, ascending)
    assert empty == []

    single = [7]
    sorter(single, ascending)
    assert single == [7]


@pytest.mark.parametrize("sorter", SORTERS)
def test_floats_and_strings(sorter) -> None:
    floats = [1.1, -3.5, 2.3, 1123.3]
    sorter(floats, descending)
    assert floats == [1123.3, 2.3, 1.1, -3.5]

    words = ["abc", "a", "aaa", "zxc"]
    sorter(words, descending)
    assert words == ["zxc", "abc", "aaa", "a"]


@pytest.mark.parametrize("sorter", [bubble_sort, insertion_sort])
def test_stable(sorter) -> None:
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    sorter(pairs, lambda x, y: x[0] < y[0])
    assert pairs == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


@pytest.mark.parametrize("sorter", SORTERS)
@given(values=st.lists(st.integers(), max_size=40))
def test_matches_sorted(sorter: Sorter, values: List[int]) -> None:
    expected = sorted(values, reverse=True)
    sorter(values, descending)
    assert values == expected
