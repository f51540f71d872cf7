# bplustree

The nodes of an in-memory B+ tree that maps integer keys to values of
any type, along with the local operations that keep them balanced.

Leaf nodes hold sorted keys and their values, and are chained to their
neighbours through `prev` and `next`. Root and internal nodes hold only
separator keys and their `children`. Each node also records its `size`,
the key count the tree logic relies on when it decides to split, borrow
or merge.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Everything lives in `bplustree.node`:

```python
from bplustree.node import Node, NodeType

leaf = Node()                    # a NodeType.LEAF node by default
for key in (3, 1, 2, 4):
    leaf.set(key, str(key))      # keys stay sorted; an existing key is overwritten
leaf.keys                        # [1, 2, 3, 4]
leaf.find_key(2)                 # 1
leaf.find_key(5)                 # None

root = leaf.split()              # no parent, so a new NodeType.ROOT is returned
root.keys                        # [3]
root.children[0] is leaf         # True
root.children[1].keys            # [3, 4]
leaf.next is root.children[1]    # True
root.key_insert_index(3)         # 1, the child to descend into for key 3
```

### Node operations

- `find_key(key)` returns the position of a key, or `None` if it is absent.
- `key_insert_index(key)` returns the first position whose key is greater
  than `key`.
- `index_of_child(child)` returns a child's position, and raises
  `ValueError` if the node is not a child.
- `set(key, value)` inserts into or updates a leaf.
- `split()` divides a node around its middle key and places that key in
  the parent. If the node has no parent, it returns a new root. Otherwise
  it returns `None`.
- `remove_from_leaf(key)` and `remove_from_internal(key)` drop a key and
  refresh the affected separator.
- `borrow_from_right_leaf()`, `borrow_from_left_leaf()`,
  `merge_with_right_leaf()` and `merge_with_left_leaf()` rebalance a leaf
  against its linked neighbours.
- `borrow_from_right_internal(sibling)`, `borrow_from_left_internal(sibling)`,
  `merge_with_right_internal(sibling)` and `merge_with_left_internal(sibling)`
  rebalance an internal node against a sibling through their parent.

`NodeType` has the members `ROOT`, `INTERNAL` and `LEAF`. The `is_leaf`
property tells whether a node is a leaf.

## What this package does not do

It provides only the node-level building blocks. No object manages a
whole tree. Nothing keeps track of the root and the depth, descends from
the root to the right leaf, keeps splitting upward after an insert, or
collapses an emptied root after a removal. The caller does that work.
There is also no command-line program and no drawing of a tree's shape.