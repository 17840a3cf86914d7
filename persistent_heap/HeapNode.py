"This module operates with Max-Heap"
from collections.abc import Iterable
from functools import reduce
from typing import Any, NamedTuple, Optional


class HeapNode(NamedTuple):
    value: Any
    left: Optional["HeapNode"]
    right: Optional["HeapNode"]
    size: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    @property
    def is_leaf(self) -> bool:
        return self.size > 0 and self.left is None and self.right is None


EMPTY = HeapNode(None, None, None, 0, 0)


def new() -> HeapNode:
    return EMPTY


def _leaf(value: Any) -> HeapNode:
    return HeapNode(value, None, None, 1, 1)


def _next_leaf_in_left_subtree(size: int) -> bool:
    # the bit right below the leading one of the 1-based breadth-first index selects the child
    target = size + 1
    return not target >> (target.bit_length() - 2) & 1


def _bubble_up(node: HeapNode) -> HeapNode:
    left, right = node.left, node.right
    if left is not None and right is not None and right.value > node.value and right.value > left.value:
        return node._replace(value=right.value, right=right._replace(value=node.value))
    if left is not None and left.value > node.value:
        return node._replace(value=left.value, left=left._replace(value=node.value))
    return node


def push(heap: HeapNode, value: Any) -> HeapNode:
    """Return a new heap holding the values of `heap` and `value`.

    Walks the single root-to-leaf path that ends in the next free slot of the
    complete tree, rebuilding every node on it and restoring the heap order at
    each level as the recursion unwinds. Subtrees off the path are shared with
    `heap`, which is left untouched.
    """
    if heap.size == 0:
        return _leaf(value)
    left, right = heap.left, heap.right
    if left is None and right is None:
        node = HeapNode(heap.value, _leaf(value), None, heap.size + 1, heap.height + 1)
    elif right is None:
        node = HeapNode(heap.value, left, _leaf(value), heap.size + 1, heap.height)
    elif _next_leaf_in_left_subtree(heap.size):
        left = push(left, value)
        node = HeapNode(heap.value, left, right, heap.size + 1, 1 + max(left.height, right.height))
    else:
        right = push(right, value)
        node = HeapNode(heap.value, left, right, heap.size + 1, 1 + max(left.height, right.height))
    return _bubble_up(node)


def from_iterable(values: Iterable, heap: HeapNode = EMPTY) -> HeapNode:
    return reduce(push, values, heap)
