from __future__ import annotations

from functools import lru_cache
from typing import Iterator, Optional, Tuple


def _bounds(total: int, max_parts: Optional[int], max_value: Optional[int]) -> Tuple[int, int]:
    if max_parts is None:
        max_parts = total
    if max_value is None:
        max_value = total
    for name, value in (("total", total), ("max_parts", max_parts), ("max_value", max_value)):
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}.")
    return max_parts, max_value


def partitions_bruteforce(
    total: int,
    max_parts: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Iterator[Tuple[int, ...]]:
    """
    Recursively generate partitions as non-increasing tuples of parts.

    Independent of Partitioner; only meant for cross-checking small cases.
    """
    max_parts, max_value = _bounds(total, max_parts, max_value)

    def rec(remaining: int, parts_left: int, cap: int) -> Iterator[Tuple[int, ...]]:
        if remaining == 0:
            yield ()
            return
        if parts_left == 0:
            return
        for largest in range(min(cap, remaining), 0, -1):
            for rest in rec(remaining - largest, parts_left - 1, largest):
                yield (largest,) + rest

    yield from rec(total, max_parts, max_value)


def partition_count(
    total: int,
    max_parts: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Number of partitions of `total` into <= max_parts parts, each <= max_value."""
    max_parts, max_value = _bounds(total, max_parts, max_value)

    @lru_cache(maxsize=None)
    def count(remaining: int, parts_left: int, cap: int) -> int:
        if remaining == 0:
            return 1
        if parts_left == 0 or cap == 0:
            return 0
        return sum(
            count(remaining - largest, parts_left - 1, largest)
            for largest in range(1, min(cap, remaining) + 1)
        )

    return count(total, max_parts, max_value)
