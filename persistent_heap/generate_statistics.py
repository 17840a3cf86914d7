from collections.abc import Iterable
from decimal import Decimal
from functools import cmp_to_key
from itertools import product
from math import log2, nan
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time

import numpy as np
import pandas as pd
from tqdm import tqdm

from .algorithms.Algorithm import Algorithm, IdxVal
from .algorithms.algorithms import algorithms
from .Config import *
from .heaps import rebuilt_nodes
from .HeapNode import EMPTY, push

RESULT_DIR = Path("logs/statistics.csv")


class InvalidAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid algorithm: `{name}` produced a result its validator rejects")


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def _unwrap(x):
    return x.obj.val


def get_avg_operation_cnt(algorithm: Algorithm, N: int) -> tuple[int, int, float]:
    def cmp(x: IdxVal, y: IdxVal) -> int:
        if x.idx == y.idx:
            return 0
        nonlocal operation_cnt
        operation_cnt += 1
        return (x.val > y.val) - (x.val < y.val)

    key = cmp_to_key(cmp)

    do_sample = N > algorithm.max_N
    total = 0
    best = float("inf")
    worst = 0
    avg_sum = 0
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    for val_array in algorithm.sampler(N, r) if do_sample else algorithm.generator(N):
        idx_array = algorithm.map_enumerate(key, val_array)
        operation_cnt = 0
        result = algorithm.func(idx_array)
        cnt = operation_cnt
        if not algorithm.validator(algorithm.map(_unwrap, idx_array), algorithm.map_result(_unwrap, result)):
            raise InvalidAlgorithmError(algorithm.name)
        avg_sum += cnt
        total += 1
        best = min(best, cnt)
        worst = max(worst, cnt)
        if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break

    return best, worst, avg_sum / total


def push_costs(values: Iterable) -> pd.DataFrame:
    "One row per push: size and height after it, rebuilt and shared node counts, comparisons made"

    def cmp(x: IdxVal, y: IdxVal) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return (x.val > y.val) - (x.val < y.val)

    key = cmp_to_key(cmp)

    rows = []
    heap = EMPTY
    for i, value in enumerate(values):
        operation_cnt = 0
        new_heap = push(heap, key(IdxVal(i, value)))
        rebuilt = rebuilt_nodes(heap, new_heap)
        rows.append((new_heap.size, new_heap.height, rebuilt, new_heap.size - rebuilt, operation_cnt))
        heap = new_heap
    return pd.DataFrame(np.array(rows, dtype=np.int64).reshape(-1, 5), columns=["size", "height", "rebuilt", "shared", "comparisons"])


def _work(args: tuple[int, int]) -> str:
    algorithm_idx, N = args
    algorithm = algorithms[algorithm_idx]
    best, worst, avg = get_avg_operation_cnt(algorithm, N)
    input_total = algorithm.input_total(N)
    output_total = algorithm.output_total(N)
    lower_bound = log2(input_total) - log2(output_total)
    ratio = nan if input_total <= output_total else avg / lower_bound
    return ",".join(map(str, (algorithm.name, N, to_displayable_int(input_total), to_displayable_int(output_total), lower_bound, best, worst, avg, ratio)))


def generate_statistics() -> None:
    Ns = list(range(3, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
    tasks = list(product(range(len(algorithms)), Ns))
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    print(f"init: {len(algorithms)} algorithms with {len(Ns)} sizes each")
    with Pool() as pool, open(RESULT_DIR, "w") as f:
        f.write("name,N,input,output,lower bound,best,worst,avg,ratio\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    print(f"fin:  results written to {RESULT_DIR}")


def sort_result() -> None:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["name", "N"])
    df.to_csv(RESULT_DIR, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{name}.csv", index=False)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
