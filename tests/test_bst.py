import pytest
from hypothesis import given, strategies as st

from adtkit.bst import BSTSet


def _by_key(a, b):
    return (a[0] > b[0]) - (a[0] < b[0])


def _filled(values, **options):
    s = BSTSet(**options)
    for value in values:
        s.insert(value)
    return s


def test_inserts_report_new_values_and_iterate_sorted():
    s = BSTSet()
    values = [5, 3, 8, 1, 4, 7, 9]
    assert [s.insert(value) for value in values] == [True] * len(values)
    assert len(s) == len(values)
    assert list(s) == sorted(values)
    assert list(reversed(s)) == sorted(values, reverse=True)
    assert s.is_proper()


def test_duplicate_insert_keeps_size():
    s = _filled([2])
    assert s.insert(2) is False
    assert len(s) == 1


def test_equivalent_insert_replaces_and_discards_old():
    discarded = []
    s = _filled([(1, "a"), (1, "b")], compare=_by_key, on_discard=discarded.append)
    assert len(s) == 1
    assert discarded == [(1, "a")]
    assert s.find((1, None)) == (1, "b")


@pytest.mark.parametrize(
    "removed, remaining",
    [(4, [1, 2, 3, 5, 6, 7]), (1, [2, 3, 4, 5, 6, 7]), (6, [1, 2, 3, 4, 5, 7])],
)
def test_remove_keeps_order(removed, remaining):
    discarded = []
    s = _filled([4, 2, 6, 1, 3, 5, 7], on_discard=discarded.append)
    assert s.remove(removed) is True
    assert discarded == [removed]
    assert removed not in s
    assert list(s) == remaining
    assert s.is_proper()


@pytest.mark.parametrize("values", [[], [4, 2, 6]])
def test_remove_missing_value(values):
    s = _filled(values)
    assert s.remove(42) is False
    assert len(s) == len(values)


def test_navigation():
    s = _filled([10, 5, 15, 12])
    assert (s.first().value, s.last().value) == (5, 15)
    assert s.previous(s.first()) is None
    assert s.next(s.last()) is None
    middle = s.find_node(10)
    assert (s.previous(middle).value, s.next(middle).value) == (5, 12)


def test_empty_set_navigation():
    s = BSTSet()
    assert (s.first(), s.last(), s.find_node(3)) == (None, None, None)
    assert s.find(3, "none") == "none"


@pytest.mark.parametrize("method", ["next", "previous"])
def test_foreign_node_raises(method):
    s, other = _filled([1]), _filled([1])
    with pytest.raises(ValueError):
        getattr(s, method)(other.first())


def test_clear_discards_children_first():
    discarded = []
    s = _filled([3, 1, 2, 5, 4], on_discard=discarded.append)
    s.clear()
    assert len(s) == 0
    assert list(s) == []
    assert sorted(discarded) == [1, 2, 3, 4, 5]
    assert discarded[-1] == 3


def test_is_proper_detects_broken_order():
    s = _filled([2, 1, 3])
    s.find_node(1).value = 100
    assert not s.is_proper()


def test_degenerate_tree_of_many_values():
    n = 3000
    s = _filled(range(n))
    assert list(s) == list(range(n))
    assert all(s.remove(value) for value in range(0, n, 2))
    assert list(s) == list(range(1, n, 2))
    assert s.is_proper()


def test_custom_compare_reverses_order():
    s = _filled([1, 3, 2], compare=lambda a, b: (b > a) - (b < a))
    assert list(s) == [3, 2, 1]
    assert s.is_proper()


@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50))))
def test_behaves_like_builtin_set(operations):
    s = BSTSet()
    model = set()
    for insert, value in operations:
        if insert:
            assert s.insert(value) == (value not in model)
            model.add(value)
        else:
            assert s.remove(value) == (value in model)
            model.discard(value)
        assert s.is_proper()
    assert len(s) == len(model)
    assert list(s) == sorted(model)
    assert list(reversed(s)) == sorted(model, reverse=True)
    assert all(value in s for value in model)