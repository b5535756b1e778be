from __future__ import annotations

import os
from typing import Iterator, Optional, Set

import networkx as nx


# Explicit enumeration grows like the counts themselves; past this size use
# the counting functions in isomertools.trees.isomers instead.
ENUMERATION_LIMIT = int(os.environ.get("ISOMERTOOLS_ENUMERATION_LIMIT", "14"))


def _check_size(vertices: int) -> None:
    if vertices < 1:
        raise ValueError(f"vertices must be >= 1, got {vertices}.")
    if vertices > ENUMERATION_LIMIT:
        raise ValueError(
            f"Explicit tree enumeration is impractical for n={vertices} "
            f"(limit {ENUMERATION_LIMIT}). Use tree_permutations() instead."
        )


def _max_degree(T: nx.Graph) -> int:
    return max((d for _, d in T.degree()), default=0)


def unrooted_trees(vertices: int, degree: Optional[int] = None) -> Iterator[nx.Graph]:
    """
    Stream one networkx Graph per unlabeled tree on `vertices` nodes whose
    maximum degree is at most `degree` (no bound if None).
    """
    _check_size(vertices)
    if vertices == 1:
        T = nx.Graph()
        T.add_node(0)
        yield T
        return

    for T in nx.nonisomorphic_trees(vertices):
        if degree is None or _max_degree(T) <= degree:
            yield T


def count_unrooted_trees(vertices: int, degree: Optional[int] = None) -> int:
    return sum(1 for _ in unrooted_trees(vertices, degree))


def rooted_tree_shapes(vertices: int, branching: int) -> Set[tuple]:
    """
    Canonical nested-tuple forms of the rooted trees on `vertices` nodes in
    which no node has more than `branching` children.

    Every rooted tree is an unrooted tree with a chosen root, so each unrooted
    tree is tried with each admissible vertex as root and duplicates collapse
    in the canonical form.
    """
    shapes: Set[tuple] = set()
    for T in unrooted_trees(vertices):
        for root in T.nodes():
            if T.degree(root) > branching:
                continue
            # Every other node has a parent edge besides its children.
            if any(T.degree(v) - 1 > branching for v in T.nodes() if v != root):
                continue
            shapes.add(nx.to_nested_tuple(T, root, canonical_form=True))
    return shapes


def count_rooted_trees(vertices: int, branching: int) -> int:
    return len(rooted_tree_shapes(vertices, branching))
