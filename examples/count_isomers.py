#!/usr/bin/env python3
"""
Table of degree-bounded tree counts (alkane isomers for degree 4).

For each n in [1, max-n] prints n, the unrooted count and, when degree >= 2,
the rooted count with branching = degree - 1. With --check, small n are also
enumerated explicitly with networkx and the trees of up to --names vertices
are listed by name. With --trials, the last row is timed.

Usage: python3 count_isomers.py [--max-n 20] [--degree 4] [--check] [--names 6]
                                [--parallel] [--trials 0]
"""

from __future__ import annotations
import sys
import time
import argparse
from typing import List, Optional

from isomertools import (
    rooted_trees,
    tree_name,
    tree_permutations,
    tree_permutations_parallel,
    unrooted_trees,
)
from isomertools.trees.enumerate import ENUMERATION_LIMIT


def enumerated_names(n: int, degree: int) -> List[str]:
    """Names of the enumerated trees on n vertices, one per tree."""
    return sorted(tree_name(T) for T in unrooted_trees(n, degree))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Degree-bounded tree counts.")
    ap.add_argument("--max-n", type=int, default=20)
    ap.add_argument("--degree", type=int, default=4)
    ap.add_argument("--check", action="store_true",
                    help=f"cross-check n <= {ENUMERATION_LIMIT} by enumeration")
    ap.add_argument("--names", type=int, default=6,
                    help="with --check, list tree names for n up to this size")
    ap.add_argument("--parallel", action="store_true",
                    help="use a process pool for the unrooted count")
    ap.add_argument("--trials", type=int, default=0,
                    help="repeat the last count this many times and report the mean time")
    args = ap.parse_args(argv)

    count = tree_permutations_parallel if args.parallel else tree_permutations
    d = args.degree

    print(f"{'n':>4}  {'unrooted':>24}  {'rooted':>24}")
    for n in range(1, args.max_n + 1):
        u = count(n, d)
        # Rooted subtrees hang off a parent, so they branch at most d - 1 ways.
        r = str(rooted_trees(n, d - 1)) if d >= 2 else "-"
        line = f"{n:>4}  {u:>24}  {r:>24}"
        if args.check and n <= ENUMERATION_LIMIT:
            names = enumerated_names(n, d)
            if len(names) != u:
                print(f"{line}  MISMATCH (enumerated {len(names)})")
                return 1
            line += "  ok"
            if n <= args.names:
                line += "  " + ", ".join(names)
        print(line)

    if args.trials > 0:
        t0 = time.perf_counter()
        for _ in range(args.trials):
            permutations = tree_permutations(args.max_n, d)
        dt = (time.perf_counter() - t0) / args.trials * 1e6
        print(f"{permutations} Permutations ({dt:.0f}us)", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
