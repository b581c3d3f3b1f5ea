import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from adtkit.btree import BTreeSet


def _build(values, **kwargs):
    s = BTreeSet(**kwargs)
    for v in values:
        s.insert(v)
    return s


def test_empty_set():
    s = BTreeSet()
    assert len(s) == 0
    assert s.first() is None
    assert s.last() is None
    assert list(s) == []
    assert s.is_proper()
    assert s.remove(1) is False
    assert s.find_node(1) is None


def test_insert_ascending_keeps_order_and_shape():
    s = BTreeSet()
    for v in range(200):
        assert s.insert(v) is True
        assert s.is_proper()
    assert len(s) == 200
    assert list(s) == list(range(200))
    assert list(reversed(s)) == list(reversed(range(200)))


def test_insert_shuffled_and_first_last():
    values = list(range(500))
    random.Random(7).shuffle(values)
    s = _build(values)
    assert s.is_proper()
    assert s.first().value == 0
    assert s.last().value == 499
    assert list(s) == sorted(values)


def test_duplicate_insert_replaces_and_discards_old():
    discarded = []
    s = BTreeSet(compare=lambda a, b: (a[0] > b[0]) - (a[0] < b[0]), on_discard=discarded.append)
    for k in range(20):
        s.insert((k, "old"))
    assert s.insert((5, "new")) is False
    assert len(s) == 20
    assert s.find((5, None)) == (5, "new")
    assert discarded == [(5, "old")]


def test_remove_leaves_and_internal_values():
    s = _build(range(100))
    for v in range(0, 100, 2):
        assert s.remove(v) is True
        assert s.is_proper()
    assert list(s) == list(range(1, 100, 2))
    assert len(s) == 50
    assert s.remove(0) is False
    assert len(s) == 50


def test_remove_all_empties_tree():
    values = list(range(300))
    random.Random(3).shuffle(values)
    s = _build(values)
    order = values[:]
    random.Random(11).shuffle(order)
    for v in order:
        assert s.remove(v)
        assert s.is_proper()
    assert len(s) == 0
    assert s.first() is None
    assert list(s) == []


def test_remove_calls_on_discard():
    discarded = []
    s = _build(range(30), on_discard=discarded.append)
    s.remove(10)
    s.remove(29)
    s.remove(100)
    assert discarded == [10, 29]


def test_next_and_previous_walk():
    values = list(range(0, 300, 3))
    s = _build(reversed(values))
    node = s.first()
    walked = []
    while node is not None:
        walked.append(node.value)
        node = s.next(node)
    assert walked == values
    node = s.last()
    back = []
    while node is not None:
        back.append(node.value)
        node = s.previous(node)
    assert back == values[::-1]


def test_find_and_contains():
    s = _build(range(0, 50, 5))
    assert 25 in s
    assert 26 not in s
    assert s.find(25) == 25
    assert s.find(26, "missing") == "missing"
    assert s.find_node(45).value == 45


def test_custom_compare_reverse_order():
    s = _build(range(40), compare=lambda a, b: (b > a) - (b < a))
    assert list(s) == list(range(39, -1, -1))
    assert s.is_proper()


def test_clear_discards_every_value():
    discarded = []
    s = _build(range(60), on_discard=discarded.append)
    s.clear()
    assert len(s) == 0
    assert list(s) == []
    assert sorted(discarded) == list(range(60))


def test_clear_children_before_parent():
    discarded = []
    s = _build(range(5), on_discard=discarded.append)
    root_value = s.first().owner.parent.entries[0].value
    s.clear()
    assert discarded[-1] == root_value


def test_foreign_node_rejected():
    a = _build(range(10))
    b = _build(range(10))
    node = b.find_node(3)
    with pytest.raises(ValueError):
        a.next(node)
    removed = a.find_node(4)
    a.remove(4)
    with pytest.raises(ValueError):
        a.previous(removed)


@settings(max_examples=60, deadline=None)
@given(st.lists(st.tuples(st.booleans(), st.integers(-50, 50)), max_size=200))
def test_matches_builtin_set(ops):
    s = BTreeSet()
    model = set()
    for add, v in ops:
        if add:
            assert s.insert(v) == (v not in model)
            model.add(v)
        else:
            assert s.remove(v) == (v in model)
            model.discard(v)
        assert s.is_proper()
    assert list(s) == sorted(model)
    assert len(s) == len(model)