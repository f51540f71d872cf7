"""Nodes of a B+ tree and the local operations that rebalance them."""

from __future__ import annotations

import enum
from bisect import bisect_left, bisect_right
from typing import Generic, List, Optional, TypeVar

V = TypeVar("V")


class NodeType(enum.Enum):
    """Role of a node in the tree."""

    ROOT = "root"
    INTERNAL = "internal"
    LEAF = "leaf"


class Node(Generic[V]):
    """A B+ tree node.

    Leaves hold ``keys`` with matching ``values`` and are chained through
    ``prev``/``next``. Internal and root nodes hold separator ``keys`` and
    ``children``. ``size`` is the node's key count as the tree accounts for
    it; rebalancing decisions are made on it.
    """

    def __init__(self, node_type: NodeType = NodeType.LEAF) -> None:
        self.type = node_type
        self.parent: Optional[Node[V]] = None
        self.size = 0
        self.keys: List[int] = []
        self.children: List[Node[V]] = []
        self.values: List[V] = []
        self.prev: Optional[Node[V]] = None
        self.next: Optional[Node[V]] = None

    def __repr__(self) -> str:
        return f"Node({self.type.name}, keys={self.keys!r})"

    @property
    def is_leaf(self) -> bool:
        return self.type is NodeType.LEAF

    def _detach(self) -> None:
        self.keys = []
        self.children = []
        self.values = []
        self.prev = self.next = self.parent = None

    # ---- lookups -------------------------------------------------------

    def find_key(self, key: int) -> Optional[int]:
        """Return the position of ``key`` in this node, or None if absent."""
        index = bisect_left(self.keys, key)
        if index < len(self.keys) and self.keys[index] == key:
            return index
        return None

    def key_insert_index(self, key: int) -> int:
        """Return the first position whose key is greater than ``key``."""
        return bisect_right(self.keys, key)

    def index_of_child(self, child: Node[V]) -> int:
        """Return the position of ``child`` among this node's children."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                return index
        raise ValueError(f"{child!r} is not a child of {self!r}")

    # ---- removal -------------------------------------------------------

    def remove_from_leaf(self, key: int) -> None:
        """Drop ``key`` from this leaf and refresh the parent's separator."""
        index = self.find_key(key)
        if index is None:
            return
        del self.keys[index]
        del self.values[index]
        self.size -= 1

        if self.parent is not None and self.keys:
            parent_index = self.parent.find_key(key)
            if parent_index is not None:
                self.parent.keys[parent_index] = self.keys[0]

    def remove_from_internal(self, key: int) -> None:
        """Replace separator ``key`` with the smallest key of its left subtree."""
        index = self.find_key(key)
        if index is None:
            return
        leaf = self.children[index]
        while leaf.type is not NodeType.LEAF:
            leaf = leaf.children[0]
        self.keys[index] = leaf.keys[0]
        self.size -= 1

    # ---- leaf rebalancing ----------------------------------------------

    def borrow_from_right_leaf(self) -> None:
        """Move the first entry of the next leaf to the end of this one."""
        right = self.next
        right_parent = right.parent

        self.keys.append(right.keys.pop(0))
        self.values.append(right.values.pop(0))
        self.size += 1
        right.size -= 1

        if right.keys:
            right_parent.keys[right_parent.index_of_child(right) - 1] = right.keys[0]

    def borrow_from_left_leaf(self) -> None:
        """Move the last entry of the previous leaf to the front of this one."""
        left = self.prev
        parent = self.parent

        self.keys.insert(0, left.keys.pop())
        self.values.insert(0, left.values.pop())
        self.size += 1
        left.size -= 1

        parent.keys[parent.index_of_child(self) - 1] = self.keys[0]

    def merge_with_right_leaf(self) -> None:
        """Absorb the next leaf into this one and drop it from its parent."""
        right = self.next
        right_parent = right.parent

        for key, value in zip(right.keys, right.values):
            self.set(key, value)

        self.next = right.next
        if self.next is not None:
            self.next.prev = self

        child_index = right_parent.index_of_child(right)
        del right_parent.keys[child_index - 1]
        del right_parent.children[child_index]
        right_parent.size -= 1

        right._detach()

    def merge_with_left_leaf(self) -> None:
        """Pour this leaf into the previous one and drop it from its parent."""
        left = self.prev
        parent = self.parent

        for key, value in zip(self.keys, self.values):
            left.set(key, value)

        left.next = self.next
        if left.next is not None:
            left.next.prev = left

        child_index = parent.index_of_child(self)
        del parent.keys[child_index - 1]
        del parent.children[child_index]
        parent.size -= 1

        self._detach()

    # ---- internal rebalancing ------------------------------------------

    def borrow_from_right_internal(self, sibling: Node[V]) -> None:
        """Rotate a key and the first child of ``sibling`` through the parent."""
        parent = self.parent
        child_index = parent.index_of_child(self)

        self.keys.append(parent.keys[child_index])
        parent.keys[child_index] = sibling.keys.pop(0)
        self.size += 1
        sibling.size -= 1

        moved = sibling.children.pop(0)
        self.children.append(moved)
        moved.parent = self

    def borrow_from_left_internal(self, sibling: Node[V]) -> None:
        """Rotate a key and the last child of ``sibling`` through the parent."""
        parent = self.parent
        child_index = parent.index_of_child(self)

        self.keys.insert(0, parent.keys[child_index - 1])
        parent.keys[child_index - 1] = sibling.keys.pop()
        self.size += 1
        sibling.size -= 1

        moved = sibling.children.pop()
        self.children.insert(0, moved)
        moved.parent = self

    def merge_with_right_internal(self, sibling: Node[V]) -> None:
        """Pull the separator down and absorb ``sibling`` into this node."""
        parent = self.parent
        child_index = parent.index_of_child(self)

        self.keys.append(parent.keys[child_index])
        del parent.keys[child_index]
        del parent.children[child_index + 1]
        self.size += sibling.size + 1
        parent.size -= 1

        self.keys.extend(sibling.keys)
        for child in sibling.children:
            self.children.append(child)
            child.parent = self

        sibling._detach()

    def merge_with_left_internal(self, sibling: Node[V]) -> None:
        """Pull the separator down and pour this node into ``sibling``."""
        parent = self.parent
        child_index = parent.index_of_child(self)

        sibling.keys.append(parent.keys[child_index - 1])
        del parent.keys[child_index - 1]
        del parent.children[child_index]
        sibling.size += self.size + 1
        parent.size -= 1

        sibling.keys.extend(self.keys)
        for child in self.children:
            sibling.children.append(child)
            child.parent = sibling

        self._detach()

    # ---- insertion and splitting ---------------------------------------

    def set(self, key: int, value: V) -> None:
        """Store ``value`` under ``key``, keeping keys sorted."""
        index = self.find_key(key)
        if index is not None:
            self.values[index] = value
            return
        position = self.key_insert_index(key)
        self.keys.insert(position, key)
        self.values.insert(position, value)
        self.size += 1

    def _split_leaf(self, split_at: int) -> Node[V]:
        sibling: Node[V] = Node(NodeType.LEAF)

        sibling.prev = self
        sibling.next = self.next
        self.next = sibling
        if sibling.next is not None:
            sibling.next.prev = sibling

        sibling.keys = self.keys[split_at:]
        sibling.values = self.values[split_at:]
        del self.keys[split_at:]
        del self.values[split_at:]

        sibling.size = len(sibling.keys)
        self.size = len(self.keys)
        return sibling

    def _split_internal(self, split_at: int) -> Node[V]:
        count = self.size
        sibling: Node[V] = Node(NodeType.INTERNAL)

        sibling.children = self.children[split_at + 1 : count + 1]
        for child in sibling.children:
            child.parent = sibling
        del self.children[split_at + 1 :]

        # The key at split_at moves up to the parent and stays in neither half.
        sibling.keys = self.keys[split_at + 1 : count]
        del self.keys[split_at:]

        sibling.size = len(sibling.keys)
        self.size = len(self.keys)
        return sibling

    def split(self) -> Optional[Node[V]]:
        """Split this node in two around its middle key.

        The middle key is inserted into the parent, with the new right-hand
        sibling placed just after this node. If there is no parent, a new
        root is created and returned; otherwise None is returned.
        """
        split_at = self.size >> 1
        separator = self.keys[split_at]

        if self.type is NodeType.LEAF:
            sibling = self._split_leaf(split_at)
        else:
            sibling = self._split_internal(split_at)

        if self.parent is not None:
            parent = self.parent
            index = parent.key_insert_index(separator)
            parent.keys.insert(index, separator)
            parent.size += 1
            parent.children.insert(index + 1, sibling)
            sibling.parent = parent
            return None

        new_root: Node[V] = Node(NodeType.ROOT)
        new_root.keys = [separator]
        new_root.size = 1
        new_root.children = [self, sibling]

        if self.type is NodeType.ROOT:
            self.type = NodeType.INTERNAL

        self.parent = new_root
        sibling.parent = new_root
        return new_root