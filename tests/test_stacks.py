import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import (
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
    TwoStack,
    insert_sorted,
    middle_element,
    monotonic_increasing,
    next_smaller,
    previous_greater,
    previous_smaller,
)

small_ints = st.lists(st.integers(min_value=0, max_value=50), max_size=30)


def test_two_stack_pops_each_side():
    st2 = TwoStack(5)
    st2.push1(1)
    st2.push1(2)
    st2.push2(9)
    st2.push2(8)
    assert st2.pop1() == 2
    assert st2.pop2() == 8
    assert st2.pop1() == 1
    assert st2.pop2() == 9


def test_two_stack_overflow_when_shared_space_full():
    st2 = TwoStack(3)
    st2.push1(1)
    st2.push2(2)
    st2.push1(3)
    with pytest.raises(StackOverflowError):
        st2.push2(4)
    with pytest.raises(StackOverflowError):
        st2.push1(4)


def test_two_stack_underflow():
    st2 = TwoStack(2)
    with pytest.raises(StackUnderflowError):
        st2.pop1()
    with pytest.raises(StackUnderflowError):
        st2.pop2()


def test_bounded_stack_push_pop_peek():
    s = BoundedStack(5)
    s.push(3)
    s.push(2)
    s.push(9)
    assert s.pop() == 9
    assert s.peek() == 2
    assert len(s) == 2
    assert s.is_empty() is False


def test_bounded_stack_overflow_and_underflow():
    s = BoundedStack(1)
    assert s.is_empty() is True
    s.push(7)
    with pytest.raises(StackOverflowError):
        s.push(8)
    s.pop()
    with pytest.raises(StackUnderflowError):
        s.pop()
    with pytest.raises(StackUnderflowError):
        s.peek()


def test_middle_element_even_and_odd():
    assert middle_element([10, 20, 30, 40, 50, 60]) == 30
    assert middle_element([1, 2, 3, 4, 5]) == 2


def test_middle_element_too_small():
    with pytest.raises(StackUnderflowError):
        middle_element([4])
    with pytest.raises(StackUnderflowError):
        middle_element([])


def test_insert_sorted_example():
    s = [10, 20, 30, 40]
    insert_sorted(s, 25)
    assert s == [10, 20, 25, 30, 40]


@given(small_ints, st.integers(min_value=0, max_value=50))
def test_insert_sorted_keeps_order(items, num):
    s = sorted(items)
    insert_sorted(s, num)
    assert s == sorted(items + [num])


def test_monotonic_example():
    assert monotonic_increasing([3, 1, 4, 1, 5, 9, 2, 6]) == [1, 1, 2, 6]


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=30))
def test_monotonic_invariants(nums):
    result = monotonic_increasing(nums)
    assert result == sorted(result)
    assert result[-1] == nums[-1]
    it = iter(nums)
    assert all(any(x == y for y in it) for x in result)


def test_next_smaller_example():
    assert next_smaller([5, 6, 2, 1]) == [2, 2, 1, -1]


def test_previous_greater_example():
    assert previous_greater([2, 1, 4, 3]) == [-1, 2, -1, 4]


def test_previous_smaller_example():
    assert previous_smaller([2, 1, 4, 3]) == [-1, -1, 1, 1]


def _check_nearest(values, answers, candidates, qualifies):
    assert len(answers) == len(values)
    for value, answer, others in zip(values, answers, candidates):
        hits = [o for o in others if qualifies(o, value)]
        if answer == -1:
            assert hits == []
        else:
            assert hits and hits[0] == answer


@given(small_ints)
def test_next_smaller_property(values):
    answers = next_smaller(values)
    rights = [values[i + 1:] for i in range(len(values))]
    _check_nearest(values, answers, rights, lambda o, v: o < v)


@given(small_ints)
def test_previous_greater_property(values):
    answers = previous_greater(values)
    lefts = [values[:i][::-1] for i in range(len(values))]
    _check_nearest(values, answers, lefts, lambda o, v: o > v)


@given(small_ints)
def test_previous_smaller_property(values):
    answers = previous_smaller(values)
    lefts = [values[:i][::-1] for i in range(len(values))]
    _check_nearest(values, answers, lefts, lambda o, v: o < v)