"""
Enumeration of integer partitions under a part-count and part-size bound.

An integer partition of X is a multiset of positive integers which sum to X.
Each partition is exposed as (value, multiplicity) pairs in increasing value
order. Every admissible partition is produced exactly once, starting from the
partition with the fewest, largest parts and stepping to the next one in
descending lexicographic order without rebuilding the whole partition.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from isomertools.utils.naming import partition_label


class Partition:
    """
    A single integer partition.

    Runs are stored largest value first so that the low end, which is the part
    rewritten on every step, sits at the tail of the list.

    The cursor form of Partitioner.__iter__ reuses one instance for the whole
    enumeration: copy() it before advancing if it must be kept.
    """

    __slots__ = ("_runs", "_size", "_total")

    def __init__(self, total: int = 0) -> None:
        self._runs: List[List[int]] = []
        self._size = 0
        self._total = total

    @property
    def size(self) -> int:
        """Number of parts, counted with multiplicity."""
        return self._size

    @property
    def total(self) -> int:
        """The value to which the parts sum."""
        return self._total

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for value, mult in reversed(self._runs):
            yield value, mult

    def __len__(self) -> int:
        return len(self._runs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._runs == other._runs

    def __str__(self) -> str:
        return partition_label(self)

    def __repr__(self) -> str:
        return f"Partition({self.as_tuple()!r})"

    def copy(self) -> "Partition":
        p = Partition(self._total)
        p._runs = [run[:] for run in self._runs]
        p._size = self._size
        return p

    def as_tuple(self) -> Tuple[Tuple[int, int], ...]:
        """Immutable snapshot of the (value, multiplicity) pairs."""
        return tuple(self)

    def parts(self) -> List[int]:
        """Expanded parts, largest first."""
        out: List[int] = []
        for value, mult in self._runs:
            out.extend([value] * mult)
        return out

    def _distribute(self, amount: int, cap: int) -> None:
        """Append parts worth `amount` at the low end, largest possible values first."""
        while amount > 0:
            count = amount // cap
            if count:
                self._runs.append([cap, count])
                self._size += count
            amount %= cap
            cap -= 1

    def _increment(self, max_parts: int) -> bool:
        """
        Advance to the next partition in place.

        Returns False when no further partition exists.
        """
        runs = self._runs
        if not runs:
            return False

        # Value stripped from the low end, to be re-added.
        pending = 0
        # Largest value any re-added part may take.
        cap = 1
        # A part of value 1 cannot be reduced, so that run always goes whole.
        remove_lowest = runs[-1][0] == 1

        while True:
            if remove_lowest:
                value, mult = runs.pop()
                pending += value * mult
                self._size -= mult

            if not runs:
                return False

            # Peel one part off the lowest remaining run.
            lowest = runs[-1]
            pending += lowest[0]
            cap = lowest[0] - 1
            lowest[1] -= 1
            self._size -= 1
            # If equal parts remain and the budget still fails, they all go next.
            remove_lowest = lowest[1] > 0
            if not remove_lowest:
                runs.pop()

            # ceil(pending / cap) parts are needed to re-add the stripped value.
            if -(-pending // cap) <= max_parts - self._size:
                break

        self._distribute(pending, cap)
        return True


class Partitioner:
    """
    Enumerates partitions of `total` into at most `max_parts` parts, none
    larger than `max_value`. Both bounds default to `total` and are clamped
    to it.

    Iterating yields one shared Partition that is mutated on every step; use
    to_list() for independent copies (e.g. before handing partitions to
    several workers).
    """

    def __init__(
        self,
        total: int,
        max_parts: Optional[int] = None,
        max_value: Optional[int] = None,
    ) -> None:
        if max_parts is None:
            max_parts = total
        if max_value is None:
            max_value = total
        for name, value in (("total", total), ("max_parts", max_parts), ("max_value", max_value)):
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}.")

        self._total = total
        self._max_parts = min(max_parts, total)
        self._max_value = min(max_value, total)

    @property
    def total(self) -> int:
        return self._total

    @property
    def max_parts(self) -> int:
        return self._max_parts

    @property
    def max_value(self) -> int:
        return self._max_value

    def __repr__(self) -> str:
        return (
            f"Partitioner(total={self._total}, max_parts={self._max_parts}, "
            f"max_value={self._max_value})"
        )

    def __iter__(self) -> Iterator[Partition]:
        partition = Partition(self._total)
        if self._total > self._max_parts * self._max_value:
            return
        partition._distribute(self._total, self._max_value)
        yield partition
        while partition._increment(self._max_parts):
            yield partition

    def to_list(self) -> List[Partition]:
        """All partitions as independent copies, in enumeration order."""
        return [p.copy() for p in self]

    def count(self) -> int:
        """Number of partitions satisfying the bounds."""
        return sum(1 for _ in self)
