"""
isomertools: constrained integer partition enumeration and counting of
degree-bounded rooted and unrooted trees (alkane isomer counts).
"""

from .partitions.partitioner import Partition, Partitioner
from .partitions.bruteforce import partitions_bruteforce, partition_count
from .trees.isomers import rooted_trees, tree_permutations, isomer_counts
from .trees.parallel import tree_permutations_parallel

# Explicit enumeration (networkx)
from .trees.enumerate import (
    unrooted_trees,
    count_unrooted_trees,
    rooted_tree_shapes,
    count_rooted_trees,
)

# Shared utilities
from .utils.combinatorics import factorial, permutations, combinations, multisets
from .utils.naming import tree_name, partition_label

__all__ = [
    # Partitions
    "Partition",
    "Partitioner",
    "partitions_bruteforce",
    "partition_count",
    # Counting
    "rooted_trees",
    "tree_permutations",
    "isomer_counts",
    "tree_permutations_parallel",
    # Enumeration
    "unrooted_trees",
    "count_unrooted_trees",
    "rooted_tree_shapes",
    "count_rooted_trees",
    # Utils
    "factorial",
    "permutations",
    "combinations",
    "multisets",
    "tree_name",
    "partition_label",
]
