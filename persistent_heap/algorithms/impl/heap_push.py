from collections.abc import Sequence

from ...heaps import breadth_first, heap_map, heaps_total, is_heap
from ...HeapNode import HeapNode, from_iterable
from ..Algorithm import Algorithm


def heap_push(arr: list) -> HeapNode:
    return from_iterable(arr)


def _validator(arr: Sequence[int], heap: HeapNode) -> bool:
    values = breadth_first(heap)
    return sorted(values) == sorted(arr) and is_heap(values)


algorithm = Algorithm(
    "heap push",
    heap_push,
    9,
    output_total=heaps_total,
    validator=_validator,
    map_result=heap_map,
)
