"""Property-based tests for SparseTable using Hypothesis."""

from functools import reduce
from typing import List, Tuple

from hypothesis import given
from hypothesis import strategies as st

from thicket.ops import GCD, MAX, MIN, Monoid
from thicket.sparse import SparseTable
from tests.thicket.hypo import configure_hypo

configure_hypo()


@st.composite
def values_and_range_strategy(
    draw: st.DrawFn, value_strategy: st.SearchStrategy[int] = st.integers()
) -> Tuple[List[int], int, int]:
    """Generate non-empty values with a valid closed range."""
    values = draw(st.lists(value_strategy, min_size=1, max_size=64))
    left = draw(st.integers(min_value=0, max_value=len(values) - 1))
    right = draw(st.integers(min_value=left, max_value=len(values) - 1))
    return values, left, right


@given(
    values_and_range_strategy(st.integers(min_value=0)),
    st.sampled_from([MIN, MAX, GCD]),
)
def test_query_matches_fold(
    case: Tuple[List[int], int, int], monoid: Monoid[int]
) -> None:
    """An idempotent range query equals folding combine over the range."""
    values, left, right = case
    table = SparseTable.of(values, monoid)
    assert table.query(left, right) == reduce(monoid.combine, values[left : right + 1])


@given(values_and_range_strategy(), st.integers(), st.integers(min_value=0))
def test_update_visible_from_own_start(
    case: Tuple[List[int], int, int], value: int, position: int
) -> None:
    """Queries that start at or after the updated index see the new value."""
    values, _, _ = case
    index = position % len(values)
    table = SparseTable.of(values, MIN)
    table.update(index, value)
    values[index] = value
    for left in range(index, len(values)):
        for stop in range(left, len(values)):
            assert table.query(left, stop) == min(values[left : stop + 1])


@given(values_and_range_strategy(), st.integers(), st.integers(min_value=0))
def test_rebuild_restores_every_query(
    case: Tuple[List[int], int, int], value: int, position: int
) -> None:
    """After rebuild every range reflects the updated values."""
    values, left, right = case
    index = position % len(values)
    table = SparseTable.of(values, MAX)
    table.update(index, value)
    table.rebuild()
    values[index] = value
    assert table.query(left, right) == max(values[left : right + 1])
    assert table.list() == values
