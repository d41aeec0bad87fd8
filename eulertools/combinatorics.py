"""Binomial coefficients, factorials and related counts."""

from __future__ import annotations

import math


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r); ``r`` may not exceed ``n``."""
    if r > n:
        raise ValueError(f"r ({r}) must not exceed n ({n})")
    return math.comb(n, r)


def catalan(n: int) -> int:
    """Return ``C(2n, n) // n + 1``; raises ZeroDivisionError for ``n == 0``."""
    return n_choose_r(2 * n, n) // n + 1


def factorial(n: int) -> int:
    """Return n!, taking the factorial of any n below 2 as 1."""
    return math.prod(range(2, n + 1))