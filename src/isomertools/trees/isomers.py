"""
Counting unlabeled trees with a bounded vertex degree.

With degree 4 the unrooted count is the number of structural isomers of the
alkane C_nH_{2n+2} (carbon skeletons are trees, hydrogens fill the rest).
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from isomertools.partitions.partitioner import Partitioner
from isomertools.utils.combinatorics import multisets


def _check_arguments(vertices: int, bound: int, bound_name: str) -> None:
    if vertices < 1:
        raise ValueError(f"vertices must be >= 1, got {vertices}.")
    if bound < 0:
        raise ValueError(f"{bound_name} must be >= 0, got {bound}.")
    if bound == 0 and vertices > 1:
        raise ValueError(f"{bound_name}=0 admits no tree on {vertices} vertices.")


def _forest_count(
    cache: Dict[int, int],
    pairs: Iterable[Tuple[int, int]],
    branching: int,
) -> int:
    """
    Shapes of an unordered forest whose subtree sizes are given as
    (size, multiplicity) pairs.

    Subtrees of equal size form a multiset drawn from the r shapes of that size.
    """
    p = 1
    for size, mult in pairs:
        r = _rooted_trees(cache, size, branching)
        p *= multisets(r, mult)
    return p


def _rooted_trees(cache: Dict[int, int], vertices: int, branching: int) -> int:
    if vertices == 1:
        return 1
    # Reached from degree-1 unrooted trees: a root with no children is alone.
    if branching == 0:
        return 0
    if vertices == 2:
        return 1
    if vertices in cache:
        return cache[vertices]

    total = 0
    # Children of the root partition the remaining vertices.
    for partition in Partitioner(vertices - 1, branching):
        total += _forest_count(cache, partition, branching)

    cache[vertices] = total
    return total


def rooted_trees(
    vertices: int,
    branching: int,
    cache: Optional[Dict[int, int]] = None,
) -> int:
    """
    Number of rooted unlabeled trees on `vertices` nodes in which every node
    has at most `branching` children.

    cache: optional dict of previously computed counts keyed by vertex count.
    It is only valid for a single `branching`; a fresh dict is used if omitted.
    """
    _check_arguments(vertices, branching, "branching")
    if cache is None:
        cache = {}
    return _rooted_trees(cache, vertices, branching)


def _centroid_partitions(vertices: int, degree: int) -> Partitioner:
    # No branch off the centroid may hold more than half of the other vertices.
    return Partitioner(vertices - 1, degree, (vertices - 1) // 2)


def _bicentroid_count(cache: Dict[int, int], vertices: int, degree: int) -> int:
    """Trees made of two equal halves joined by a central edge."""
    if vertices % 2:
        return 0
    r = _rooted_trees(cache, vertices // 2, degree - 1)
    return multisets(r, 2)


def tree_permutations(vertices: int, degree: int) -> int:
    """
    Number of unrooted unlabeled trees on `vertices` nodes with maximum
    vertex degree `degree`.

    Each tree is counted once from its centroid: either a vertex whose branches
    each hold at most (vertices-1)//2 vertices, or, for even `vertices`, an edge
    splitting the tree into two halves of equal size.
    """
    if vertices == 1 and degree >= 0:
        return 1
    _check_arguments(vertices, degree, "degree")

    cache: Dict[int, int] = {}
    total = 0
    for partition in _centroid_partitions(vertices, degree):
        # Each branch root already spends one degree on the centroid.
        total += _forest_count(cache, partition, degree - 1)

    total += _bicentroid_count(cache, vertices, degree)
    return total


def isomer_counts(max_vertices: int, degree: int = 4) -> List[int]:
    """
    [tree_permutations(n, degree) for n = 1..max_vertices].

    With the default degree this is the alkane isomer sequence
    1, 1, 1, 2, 3, 5, 9, 18, 35, 75, ...
    """
    return [tree_permutations(n, degree) for n in range(1, max_vertices + 1)]
