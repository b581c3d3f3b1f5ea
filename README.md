# adtkit

Classic abstract data types in plain Python, with no dependencies:

- `adtkit.stack.Stack`: last in, first out.
- `adtkit.fifo.Queue`: first in, first out.
- `adtkit.bst.BSTSet`: an ordered set kept in an unbalanced binary search tree.
- `adtkit.avl.AVLSet`: an ordered set kept in a self-balancing AVL tree.
- `adtkit.btree.BTreeSet`: an ordered set kept in a (3,5) B-tree, whose
  nodes hold 2 to 4 values (`adtkit.btree_node` holds the node type
  `BTreeNode` and the `Entry` records it stores).
- `adtkit.treemap.TreeMap`: an ordered key/value map built on `AVLSet`.

The ordered containers take a three-way `compare(a, b)` that returns a
negative number, zero or a positive number; values that compare equal are
the same element. `adtkit.base.natural_compare` (the default) orders values
by `<` and `>`.

Every container also takes optional "discard" callbacks, called with a
value whenever the container lets go of it: on removal, on replacement by
an equivalent value, and on `clear()`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stack and queue

```python
from adtkit.stack import Stack
from adtkit.fifo import Queue

stack = Stack(None)
stack.push(1)
stack.push(2)
assert stack.top() == 2
assert list(stack) == [2, 1]        # top to bottom
assert stack.pop() == 2
assert len(stack) == 1

queue = Queue(None)
queue.push("a")
queue.push("b")
assert queue.front() == "a" and queue.back() == "b"
assert queue.pop() == "a"
assert list(queue) == ["b"]         # front to back
```

`top()`, `front()`, `back()` and `pop()` on an empty container raise
`IndexError`. `pop()` returns the value and also passes it to `on_discard`
if one was given; `clear()` discards every value, top (or front) first.

## Ordered sets

`BSTSet`, `AVLSet` and `BTreeSet` share one interface:

```python
from adtkit.base import natural_compare
from adtkit.avl import AVLSet

values = AVLSet(natural_compare, None)
for number in (5, 3, 8, 1):
    values.insert(number)

assert list(values) == [1, 3, 5, 8]
assert list(reversed(values)) == [8, 5, 3, 1]
assert 3 in values
assert values.find(4, None) is None

node = values.find_node(3)
assert values.next(node).value == 5
assert values.previous(node).value == 1

assert values.remove(3) is True
assert values.remove(3) is False
assert values.is_proper()
```

- `insert(value)` returns `True` if the value was added and `False` if it
  replaced an equivalent one (the old value is discarded).
- `remove(value)` returns whether an equivalent value was found.
- `find_node(value)`, `first()` and `last()` return a node (with a `value`
  attribute) or `None`; `next(node)` and `previous(node)` walk between them
  and return `None` past either end. A node that is not in the set raises
  `ValueError`.
- `is_proper()` checks the tree's invariants: ordering and size for all
  three, plus heights and balance for `AVLSet`, and fill limits, links and
  uniform leaf depth for `BTreeSet`.

## Ordered map

```python
from adtkit.base import natural_compare
from adtkit.treemap import TreeMap

ages = TreeMap(natural_compare, None, None)
ages.insert("bob", 31)
ages.insert("alice", 29)

assert "alice" in ages
assert ages.find("carol", 0) == 0
assert list(ages) == ["alice", "bob"]
assert list(ages.items()) == [("alice", 29), ("bob", 31)]

node = ages.first()
assert (node.key, node.value) == ("alice", 29)
assert ages.next(node).key == "bob"

assert ages.remove("bob") is True
assert len(ages) == 1
```

`insert(key, value)` returns `True` for a new key. When a key is already
present, the stored key and value are replaced; the old ones are passed to
`on_discard_key` and `on_discard_value` only if they are different objects.

## What it does not do

This is a library only: it has no command-line tool, and nothing is
persisted. There is no hash-based set or map; every ordered container
relies on the comparison function.