from __future__ import annotations

import os
import sys
from multiprocessing import Pool, cpu_count
from typing import Dict, Iterable, List, Tuple

from isomertools.partitions.partitioner import Partitioner
from isomertools.trees.isomers import (
    _bicentroid_count,
    _centroid_partitions,
    _check_arguments,
    _forest_count,
)


DEFAULT_PROCESSES = int(os.environ.get("ISOMERTOOLS_PROCESSES", max(1, cpu_count() - 1)))

Pairs = Tuple[Tuple[int, int], ...]

# Per-process rooted-tree counts; reset by the pool initializer so that a
# worker never reuses counts computed for another branching bound.
_ROOTED_CACHE: Dict[int, int] = {}


def _worker_init() -> None:
    global _ROOTED_CACHE
    _ROOTED_CACHE = {}


def _worker(job: Tuple[List[Pairs], int]) -> int:
    """
    Return the summed contribution of a batch of centroid partitions.
    """
    batch, branching = job
    return sum(_forest_count(_ROOTED_CACHE, pairs, branching) for pairs in batch)


def _chunked(it: Iterable[Pairs], size: int) -> Iterable[List[Pairs]]:
    buf: List[Pairs] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def tree_permutations_parallel(
    vertices: int,
    degree: int,
    *,
    processes: int = DEFAULT_PROCESSES,
    batch_size: int = 64,
    verbose: bool = False,
) -> int:
    """
    Same result as tree_permutations, with the outer partition loop spread
    over a process pool.

    The centroid partitions are materialized first and shipped as immutable
    snapshots; each worker process keeps its own rooted-tree cache.
    processes=1 evaluates inline.
    """
    if vertices == 1 and degree >= 0:
        return 1
    _check_arguments(vertices, degree, "degree")
    if processes < 1:
        raise ValueError(f"processes must be >= 1, got {processes}.")
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}.")

    partitioner: Partitioner = _centroid_partitions(vertices, degree)
    snapshots = [p.as_tuple() for p in partitioner.to_list()]
    branching = degree - 1

    if verbose:
        print(
            f"[n={vertices} d={degree}] {len(snapshots)} centroid partitions, "
            f"{processes} process(es)",
            file=sys.stderr,
        )

    jobs = [(batch, branching) for batch in _chunked(snapshots, batch_size)]
    total = 0
    if processes == 1:
        cache: Dict[int, int] = {}
        for batch, b in jobs:
            total += sum(_forest_count(cache, pairs, b) for pairs in batch)
        total += _bicentroid_count(cache, vertices, degree)
    else:
        with Pool(processes=processes, initializer=_worker_init) as pool:
            for part in pool.imap_unordered(_worker, jobs, chunksize=1):
                total += part
        total += _bicentroid_count({}, vertices, degree)

    if verbose:
        print(f"[n={vertices} d={degree}] done: {total}", file=sys.stderr)
    return total
