from __future__ import annotations

from typing import Iterable, Tuple

import networkx as nx


def tree_name(T: nx.Graph) -> str:
    """Human-readable name for an unlabeled tree.

    Handles: K1, K2, P{n}, K1,{r}, fork, and general T{nv}[{deg_seq}].
    The fork is the 5-vertex tree with one degree-3 vertex (isopentane).
    """
    nv = T.number_of_nodes()
    if nv <= 1:
        return "K1"

    nedges = T.number_of_edges()
    degs = sorted((d for _, d in T.degree()), reverse=True)
    max_d = degs[0]

    if nedges == 1:
        return "K2"

    # Path: all degrees <= 2
    if max_d <= 2:
        return f"P{nv}"

    # Star: one hub adjacent to every other vertex
    if max_d == nedges:
        return f"K1,{nedges}"

    if nv == 5 and max_d == 3:
        return "fork"

    ds_str = "".join(str(d) for d in degs)
    return f"T{nv}[{ds_str}]"


def partition_label(pairs: Iterable[Tuple[int, int]]) -> str:
    """Format (value, multiplicity) pairs as '4 + 3^2 + 1', largest part first."""
    terms = [
        str(value) if mult == 1 else f"{value}^{mult}"
        for value, mult in sorted(pairs, reverse=True)
    ]
    if not terms:
        return "0"
    return " + ".join(terms)
