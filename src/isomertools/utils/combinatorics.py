from __future__ import annotations

import math


def _check_nonnegative(**kwargs: int) -> None:
    for name, value in kwargs.items():
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}.")


def _check_selection(n: int, k: int) -> None:
    _check_nonnegative(n=n, k=k)
    if k > n:
        raise ValueError(f"k must be <= n, got n={n}, k={k}.")


def factorial(n: int) -> int:
    """n! = n * (n-1) * ... * 2 * 1, with 0! = 1."""
    _check_nonnegative(n=n)
    return math.factorial(n)


def permutations(n: int, k: int) -> int:
    """Ordered selections of k items from n distinct items: n! / (n-k)!."""
    _check_selection(n, k)
    return math.perm(n, k)


def combinations(n: int, k: int) -> int:
    """Unordered selections of k items from n distinct items."""
    _check_selection(n, k)
    return math.comb(n, k)


def multisets(n: int, k: int) -> int:
    """Multisets of size k drawn from n kinds: C(n+k-1, k).

    With no kinds to draw from only the empty multiset exists.
    """
    _check_nonnegative(n=n, k=k)
    if n == 0:
        return 1 if k == 0 else 0
    return math.comb(n + k - 1, k)
