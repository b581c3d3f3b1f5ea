import pytest
from hypothesis import given, strategies as st

from adtkit.stack import Stack


def _stack_of(values, on_discard=None):
    stack = Stack(on_discard)
    for value in values:
        stack.push(value)
    return stack


def test_top_follows_each_push():
    stack = Stack()
    for count, value in enumerate([3, 1, 4], start=1):
        stack.push(value)
        assert stack.top() == value
        assert len(stack) == count


def test_iterates_from_top_down():
    assert list(_stack_of("abcd")) == list("dcba")


@pytest.mark.parametrize("operation", [Stack.top, Stack.pop])
def test_empty_stack_raises(operation):
    with pytest.raises(IndexError):
        operation(Stack())


def test_pop_discards_and_reveals_next():
    discarded = []
    stack = _stack_of([1, 2], discarded.append)
    assert stack.pop() == 2
    assert discarded == [2]
    assert stack.top() == 1


def test_clear_discards_top_first():
    discarded = []
    stack = _stack_of([5, 6, 7], discarded.append)
    stack.clear()
    assert len(stack) == 0
    assert discarded == [7, 6, 5]


def test_replacing_on_discard_redirects_later_pops():
    first, second = [], []
    stack = _stack_of("xy", first.append)
    stack.on_discard = second.append
    stack.pop()
    assert (first, second) == ([], ["y"])


def test_repr_lists_top_first():
    assert repr(_stack_of([1, 2])) == "Stack([2, 1])"


@given(st.lists(st.integers()))
def test_popping_everything_reverses_input(values):
    stack = _stack_of(values)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]