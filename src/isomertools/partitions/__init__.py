from .partitioner import Partition, Partitioner
from .bruteforce import partitions_bruteforce, partition_count

__all__ = [
    "Partition",
    "Partitioner",
    "partitions_bruteforce",
    "partition_count",
]
