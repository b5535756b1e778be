from .combinatorics import factorial, permutations, combinations, multisets
from .naming import tree_name, partition_label

__all__ = [
    "factorial",
    "permutations",
    "combinations",
    "multisets",
    "tree_name",
    "partition_label",
]
