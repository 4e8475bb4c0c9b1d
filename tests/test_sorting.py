from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import merge_sort


def test_source_example_is_sorted():
    data = [2, 1, 5, 9, 4, 5]
    assert merge_sort(data) == sorted(data)


def test_input_is_left_untouched():
    data = [3, 1, 2]
    merge_sort(data)
    assert data == [3, 1, 2]


def test_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([7]) == [7]


def test_accepts_any_iterable():
    assert merge_sort(iter([5, 4, 3])) == [3, 4, 5]


@given(st.lists(st.integers()))
def test_matches_builtin_sort(data):
    assert merge_sort(data) == sorted(data)


@given(st.lists(st.integers()))
def test_idempotent(data):
    once = merge_sort(data)
    assert merge_sort(once) == once