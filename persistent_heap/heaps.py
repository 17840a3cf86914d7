"This module operates with Max-Heap"
from collections import deque
from collections.abc import Callable, Generator, Sequence
from functools import cache
from math import comb
from typing import Any, Optional

from .HeapNode import HeapNode


class HeapInvariantError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__("Heap invariant violated: " + msg)


def _sub_heap_sizes(N: int) -> tuple[int, int]:
    t = 1 << (N.bit_length() - 2)
    M = 1 + N - (t << 1)
    L = t - 1 + min(t, M)
    R = t - 1 + max(0, M - t)
    return L, R


@cache
def heaps_total(N: int) -> int:
    if N <= 1:
        return 1
    L, R = _sub_heap_sizes(N)
    return comb(L + R, L) * heaps_total(L) * heaps_total(R)


def is_heap(arr: Sequence) -> bool:
    for i in range(1, len(arr)):
        if arr[(i - 1) >> 1] < arr[i]:
            return False
    return True


def reference_push(arr: Sequence, value: Any) -> list:
    "Array-backed push, returns a new list"
    res = list(arr)
    res.append(value)
    k = len(res) - 1
    while k > 0:
        parent = (k - 1) >> 1
        if res[parent] < res[k]:
            res[parent], res[k] = res[k], res[parent]
            k = parent
        else:
            break
    return res


def iter_nodes(heap: HeapNode) -> Generator[HeapNode, None, None]:
    if heap.size == 0:
        return
    Q = deque([heap])
    while Q:
        node = Q.popleft()
        yield node
        for child in (node.left, node.right):
            if child is not None:
                Q.append(child)


def heap_map(f: Callable[[Any], Any], node: Optional[HeapNode]) -> Optional[HeapNode]:
    if node is None or node.size == 0:
        return node
    return node._replace(value=f(node.value), left=heap_map(f, node.left), right=heap_map(f, node.right))


def breadth_first(heap: HeapNode) -> list:
    return [node.value for node in iter_nodes(heap)]


def rebuilt_nodes(old: HeapNode, new: HeapNode) -> int:
    "Number of nodes of `new` that are not shared with `old`"
    shared = {id(node) for node in iter_nodes(old)}
    cnt = 0
    Q = deque([new] if new.size else [])
    while Q:
        node = Q.popleft()
        if id(node) in shared:
            continue
        cnt += 1
        for child in (node.left, node.right):
            if child is not None:
                Q.append(child)
    return cnt


def check_invariants(heap: HeapNode) -> None:
    if heap.size == 0:
        if heap.height != 0 or heap.left is not None or heap.right is not None:
            raise HeapInvariantError(f"empty heap must have height 0 and no children, got {heap}")
        return

    def dfs(node: HeapNode, N: int, path: str) -> None:
        if node.size != N:
            raise HeapInvariantError(f"size at {path} is {node.size}, expected {N}")
        if node.height != N.bit_length():
            raise HeapInvariantError(f"height at {path} is {node.height}, expected {N.bit_length()}")
        L, R = _sub_heap_sizes(N) if N > 1 else (0, 0)
        for child, n, side in ((node.left, L, "L"), (node.right, R, "R")):
            if child is None:
                if n:
                    raise HeapInvariantError(f"missing {side} child at {path}, the tree is not complete")
                continue
            if not n:
                raise HeapInvariantError(f"unexpected {side} child at {path}, the tree is not complete")
            if child.value > node.value:
                raise HeapInvariantError(f"{side} child value {child.value!r} exceeds {node.value!r} at {path}")
            dfs(child, n, f"{path}.{side}")
        heights = [child.height for child in (node.left, node.right) if child is not None]
        if node.height != 1 + max(heights, default=0):
            raise HeapInvariantError(f"height at {path} is inconsistent with its children")

    dfs(heap, heap.size, "root")
