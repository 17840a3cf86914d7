from collections.abc import Sequence
from functools import reduce

from ...heaps import heaps_total, is_heap, reference_push
from ..Algorithm import Algorithm


def array_heap_push(arr: list) -> list:
    return reduce(reference_push, arr, [])


def _validator(arr: Sequence[int], heap: list) -> bool:
    return sorted(heap) == sorted(arr) and is_heap(heap)


algorithm = Algorithm(
    "array heap push",
    array_heap_push,
    9,
    output_total=heaps_total,
    validator=_validator,
    map_result=lambda f, heap: [f(x) for x in heap],
)
