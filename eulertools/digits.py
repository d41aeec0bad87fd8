"""Helpers for working with the digits of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence


def iter_digits(num: int, base: int = 10) -> Iterator[int]:
    """Yield the digits of ``num`` in ``base``, least significant first; 0 yields nothing."""
    if num < 0:
        raise ValueError(f"cannot take digits of negative number {num}")
    if base < 2:
        raise ValueError(f"invalid base {base}")
    while num != 0:
        num, digit = divmod(num, base)
        yield digit


def get_digits(x: int, base: int = 10) -> list[int]:
    """Return the digits of ``x`` in ``base``, most significant first."""
    digits = list(iter_digits(x, base))
    digits.reverse()
    return digits


def concat(digits: Iterable[int]) -> int:
    """Join single decimal digits into a number."""
    num = 0
    for d in digits:
        if not 0 <= d < 10:
            raise ValueError(f"not a decimal digit: {d}")
        num = num * 10 + d
    return num


def concat_big(digits: Iterable[int]) -> int:
    """Join decimal digits into a number, letting a two-digit entry take two places."""
    num = 0
    for d in digits:
        if d < 0:
            raise ValueError(f"negative digit: {d}")
        if d >= 10:
            num *= 10
        num = num * 10 + d
    return num


def base_10(num: int) -> int:
    """Return the smallest power of ten, starting from 10, that is at least ``num``."""
    base = 10
    while base < num:
        base *= 10
    return base


def concat_num(left: int, right: int) -> int:
    """Return ``left`` shifted by ``base_10(right)`` plus ``right``."""
    return base_10(right) * left + right


def log_10(num: int) -> int:
    """Return how many times 10 must be multiplied by ten to reach at least ``num``."""
    log = 0
    base = 10
    while base < num:
        base *= 10
        log += 1
    return log


def sum_digits(x: int) -> int:
    """Return the sum of the decimal digits of ``x``, negated for negative ``x``."""
    sign = -1 if x < 0 else 1
    return sign * sum(iter_digits(abs(x)))


def is_pandigital(x: int, n: int = 9) -> bool:
    """Return whether ``x`` uses each digit 1..n exactly once."""
    return sorted(get_digits(x)) == list(range(1, n + 1))


def is_palindrome(seq: Sequence) -> bool:
    """Return whether ``seq`` reads the same in both directions."""
    items = list(seq)
    return items == items[::-1]


def is_perm(lhs: int, rhs: int) -> bool:
    """Return whether the decimal digits of ``lhs`` and ``rhs`` are permutations of each other."""
    return Counter(iter_digits(lhs)) == Counter(iter_digits(rhs))