from .isomers import rooted_trees, tree_permutations, isomer_counts
from .parallel import DEFAULT_PROCESSES, tree_permutations_parallel
from .enumerate import (
    ENUMERATION_LIMIT,
    unrooted_trees,
    count_unrooted_trees,
    rooted_tree_shapes,
    count_rooted_trees,
)

__all__ = [
    "rooted_trees",
    "tree_permutations",
    "isomer_counts",
    "DEFAULT_PROCESSES",
    "tree_permutations_parallel",
    "ENUMERATION_LIMIT",
    "unrooted_trees",
    "count_unrooted_trees",
    "rooted_tree_shapes",
    "count_rooted_trees",
]
