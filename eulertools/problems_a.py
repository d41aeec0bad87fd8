"""Solutions to a first batch of number puzzles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date

from .combinatorics import factorial, n_choose_r
from .digits import sum_digits
from .number_theory import DivisorSum
from .primes import Factorized, fast_is_square, primes

GRID: tuple[tuple[int, ...], ...] = (
    (8, 2, 22, 97, 38, 15, 0, 40, 0, 75, 4, 5, 7, 78, 52, 12, 50, 77, 91, 8),
    (49, 49, 99, 40, 17, 81, 18, 57, 60, 87, 17, 40, 98, 43, 69, 48, 4, 56, 62, 0),
    (81, 49, 31, 73, 55, 79, 14, 29, 93, 71, 40, 67, 53, 88, 30, 3, 49, 13, 36, 65),
    (52, 70, 95, 23, 4, 60, 11, 42, 69, 24, 68, 56, 1, 32, 56, 71, 37, 2, 36, 91),
    (22, 31, 16, 71, 51, 67, 63, 89, 41, 92, 36, 54, 22, 40, 40, 28, 66, 33, 13, 80),
    (24, 47, 32, 60, 99, 3, 45, 2, 44, 75, 33, 53, 78, 36, 84, 20, 35, 17, 12, 50),
    (32, 98, 81, 28, 64, 23, 67, 10, 26, 38, 40, 67, 59, 54, 70, 66, 18, 38, 64, 70),
    (67, 26, 20, 68, 2, 62, 12, 20, 95, 63, 94, 39, 63, 8, 40, 91, 66, 49, 94, 21),
    (24, 55, 58, 5, 66, 73, 99, 26, 97, 17, 78, 78, 96, 83, 14, 88, 34, 89, 63, 72),
    (21, 36, 23, 9, 75, 0, 76, 44, 20, 45, 35, 14, 0, 61, 33, 97, 34, 31, 33, 95),
    (78, 17, 53, 28, 22, 75, 31, 67, 15, 94, 3, 80, 4, 62, 16, 14, 9, 53, 56, 92),
    (16, 39, 5, 42, 96, 35, 31, 47, 55, 58, 88, 24, 0, 17, 54, 24, 36, 29, 85, 57),
    (86, 56, 0, 48, 35, 71, 89, 7, 5, 44, 44, 37, 44, 60, 21, 58, 51, 54, 17, 58),
    (19, 80, 81, 68, 5, 94, 47, 69, 28, 73, 92, 13, 86, 52, 17, 77, 4, 89, 55, 40),
    (4, 52, 8, 83, 97, 35, 99, 16, 7, 97, 57, 32, 16, 26, 26, 79, 33, 27, 98, 66),
    (88, 36, 68, 87, 57, 62, 20, 72, 3, 46, 33, 67, 46, 55, 12, 32, 63, 93, 53, 69),
    (4, 42, 16, 73, 38, 25, 39, 11, 24, 94, 72, 18, 8, 46, 29, 32, 40, 62, 76, 36),
    (20, 69, 36, 41, 72, 30, 23, 88, 34, 62, 99, 69, 82, 67, 59, 85, 74, 4, 36, 16),
    (20, 73, 35, 29, 78, 31, 90, 1, 74, 31, 49, 71, 48, 86, 81, 16, 23, 57, 5, 54),
    (1, 70, 54, 71, 83, 51, 54, 69, 16, 92, 33, 48, 61, 43, 52, 1, 89, 19, 67, 48),
)

TRIANGLE: tuple[tuple[int, ...], ...] = (
    (75,),
    (95, 64),
    (17, 47, 82),
    (18, 35, 87, 10),
    (20, 4, 82, 47, 65),
    (19, 1, 23, 75, 3, 34),
    (88, 2, 77, 73, 7, 63, 67),
    (99, 65, 4, 28, 6, 16, 70, 92),
    (41, 41, 26, 56, 83, 40, 80, 70, 33),
    (41, 48, 72, 33, 47, 32, 37, 16, 94, 29),
    (53, 71, 44, 65, 25, 43, 91, 52, 97, 51, 14),
    (70, 11, 33, 28, 77, 73, 17, 78, 39, 68, 17, 57),
    (91, 71, 52, 38, 17, 14, 91, 43, 58, 50, 27, 29, 48),
    (63, 66, 4, 68, 89, 53, 67, 30, 73, 16, 69, 87, 40, 31),
    (4, 62, 98, 27, 23, 9, 70, 98, 73, 93, 38, 53, 60, 4, 23),
)

_SINGLE_DIGITS = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "ten", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


def solve_10(limit: int = 2_000_000) -> int:
    """Return the sum of the primes below ``limit``."""
    total = 0
    for p in primes(limit):
        if p >= limit:
            break
        total += p
    return total


def solve_11(grid: Sequence[Sequence[int]] = GRID, run: int = 4) -> int:
    """Return the greatest product of ``run`` adjacent numbers in a line of the grid."""
    if run < 1:
        raise ValueError(f"run must be positive, not {run}")
    best = 0
    rows = len(grid)
    for i, row in enumerate(grid):
        for j in range(len(row)):
            for di, dj in ((0, 1), (1, 0), (1, 1), (-1, 1)):
                end_i, end_j = i + di * (run - 1), j + dj * (run - 1)
                if not (0 <= end_i < rows and 0 <= end_j < len(grid[end_i])):
                    continue
                product = math.prod(grid[i + di * k][j + dj * k] for k in range(run))
                best = max(best, product)
    return best


def solve_12(min_divisors: int = 500) -> int:
    """Return the first triangle number with more than ``min_divisors`` divisors.

    Divisors are counted in pairs up to the square root, so the root of a square
    counts twice, and 1 counts as having none.
    """
    n = 1
    while True:
        triangle = n * (n + 1) // 2
        a, b = (n // 2, n + 1) if n % 2 == 0 else (n, (n + 1) // 2)
        divisors = Factorized(a).num_divisors() * Factorized(b).num_divisors()
        if triangle == 1:
            divisors = 0
        elif fast_is_square(triangle):
            divisors += 1
        if divisors > min_divisors:
            return triangle
        n += 1


_COLLATZ: dict[int, int] = {0: 1, 1: 1}


def collatz_length(x: int) -> int:
    """Return the number of terms in the Collatz chain starting at ``x``."""
    if x < 0:
        raise ValueError(f"no Collatz chain for negative number {x}")
    path = []
    while x not in _COLLATZ:
        path.append(x)
        x = 3 * x + 1 if x % 2 else x // 2
    length = _COLLATZ[x]
    for value in reversed(path):
        length += 1
        _COLLATZ[value] = length
    return length


def solve_14(limit: int = 1_000_000) -> tuple[int, int]:
    """Return ``(start, length)`` of the longest Collatz chain starting below ``limit``."""
    best_start, best_length = 0, 0
    for i in range(limit):
        length = collatz_length(i)
        if length > best_length:
            best_start, best_length = i, length
    return best_start, best_length


def solve_15(size: int = 20) -> int:
    """Return the number of lattice paths through a ``size`` by ``size`` grid."""
    return n_choose_r(2 * size, size)


def solve_16(exponent: int = 1000) -> int:
    """Return the digit sum of ``2 ** exponent``."""
    return sum_digits(2**exponent)


def number_words(n: int) -> str:
    """Spell ``n`` (0..1000) in British English without spaces or hyphens."""
    if not 0 <= n <= 1000:
        raise ValueError(f"cannot spell {n}")
    if n == 1000:
        return "onethousand"
    parts = []
    rest = n % 100
    if n >= 100:
        parts.append(_SINGLE_DIGITS[n // 100] + "hundred")
        if rest:
            parts.append("and")
    if rest >= 20:
        parts.append(_TENS[rest // 10])
    if rest < 10 or rest >= 20:
        parts.append(_SINGLE_DIGITS[rest % 10])
    else:
        parts.append(_TEENS[rest % 10])
    return "".join(parts)


def solve_17(limit: int = 1000) -> int:
    """Return the number of letters used to spell every number from 1 to ``limit``."""
    return sum(len(number_words(i)) for i in range(limit + 1))


def solve_18(triangle: Sequence[Sequence[int]] = TRIANGLE) -> int:
    """Return the largest top-to-bottom path sum through a number triangle."""
    if not triangle:
        raise ValueError("empty triangle")
    best = list(triangle[0])
    for row in triangle[1:]:
        last = len(best)
        best = [
            value + max(best[j] if j < last else best[j - 1], best[j - 1] if j > 0 else best[j])
            for j, value in enumerate(row)
        ]
    return max(best)


def solve_19(first_year: int = 1901, last_year: int = 2000) -> int:
    """Return how many months in the given years begin on a Sunday."""
    return sum(
        1
        for year in range(first_year, last_year + 1)
        for month in range(1, 13)
        if date(year, month, 1).weekday() == 6
    )


def solve_20(n: int = 100) -> int:
    """Return the digit sum of ``n!``."""
    return sum_digits(factorial(n))


def solve_21(limit: int = 10000) -> int:
    """Return the sum of the amicable numbers below ``limit``."""
    if limit < 2:
        return 0
    ds = DivisorSum(limit - 1)
    proper = {i: ds.at_proper(i) for i in range(1, limit)}
    return sum(i for i, s in proper.items() if s != i and proper.get(s, 0) == i)