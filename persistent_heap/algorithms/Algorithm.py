from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import Any, NamedTuple, Optional, TypeVar


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


class IdxVal(NamedTuple):
    idx: int
    val: Any


T = TypeVar("T")


class Algorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], Optional[Any]]
    max_N: int
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    output_total: Callable[[int], int] = lambda _: 1
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Sequence[int], Optional[Any]], bool] = lambda arr, _: all(i == v for i, v in enumerate(arr))
    map: Callable[[Callable[[Any], T], Sequence], Sequence[T]] = lambda f, arr: [f(x) for x in arr]
    map_enumerate: Callable[[Callable[[IdxVal], T], Sequence], Sequence[T]] = lambda f, arr: [f(IdxVal(i, x)) for i, x in enumerate(arr)]
    map_result: Callable[[Callable[[Any], Any], Optional[Any]], Optional[Any]] = lambda f, res: res
