"""Prime numbers, prime factorisations and multiplicative partitions."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterator
from functools import total_ordering
from itertools import compress

_SQUARE_RESIDUES_128 = frozenset(
    {0, 1, 4, 9, 16, 17, 25, 33, 36, 41, 49, 57, 64, 65, 68, 73, 81, 89, 97, 100, 105, 113, 121}
)


class _PrimeTable:
    """Shared, growing table of every prime up to ``limit``."""

    def __init__(self) -> None:
        self.primes: list[int] = [2]
        self.limit = 2

    def extend(self, bound: int) -> None:
        if bound <= self.limit:
            return
        sieve = bytearray([1]) * (bound + 1)
        sieve[0] = sieve[1] = 0
        for p in range(2, math.isqrt(bound) + 1):
            if sieve[p]:
                sieve[p * p :: p] = bytes(len(range(p * p, bound + 1, p)))
        self.primes = list(compress(range(bound + 1), sieve))
        self.limit = bound

    def grow(self) -> None:
        self.extend(max(self.limit * 2, 16))


_TABLE = _PrimeTable()


def is_prime(num: int) -> bool:
    """Return whether ``abs(num)`` is prime."""
    n = abs(num)
    if n < 2:
        return False
    if n <= _TABLE.limit:
        known = _TABLE.primes
        i = bisect_left(known, n)
        return i < len(known) and known[i] == n
    root = math.isqrt(n)
    _TABLE.extend(root)
    for p in _TABLE.primes:
        if p > root:
            break
        if n % p == 0:
            return False
    return True


def fast_is_square(num: int) -> bool:
    """Return whether ``num`` is a perfect square, filtering by residues mod 128 first."""
    if num < 0 or num % 128 not in _SQUARE_RESIDUES_128:
        return False
    root = math.isqrt(num)
    return root * root == num


def primes(sieve_to: int = 0) -> Iterator[int]:
    """Yield the primes in increasing order without end.

    ``sieve_to`` pre-computes every prime up to that bound in one sieve pass.
    """
    _TABLE.extend(sieve_to)
    idx = 0
    while True:
        while idx >= len(_TABLE.primes):
            _TABLE.grow()
        yield _TABLE.primes[idx]
        idx += 1


@total_ordering
class Factorized:
    """A non-negative integer held as a mapping of prime to exponent."""

    def __init__(self, num: int) -> None:
        if num < 0:
            raise ValueError(f"cannot factorise negative number {num}")
        self.factors: dict[int, int] = {}
        remaining = num
        if remaining == 0:
            return
        for p in primes():
            if remaining == 1:
                break
            if p * p > remaining:
                self.factors[remaining] = self.factors.get(remaining, 0) + 1
                break
            while remaining % p == 0:
                self.factors[p] = self.factors.get(p, 0) + 1
                remaining //= p

    def num_divisors(self) -> int:
        """Return the number of positive divisors."""
        return math.prod(exp + 1 for exp in self.factors.values())

    def is_square(self) -> bool:
        """Return whether every exponent is even."""
        return all(exp % 2 == 0 for exp in self.factors.values())

    def square_free(self) -> bool:
        """Return whether no prime appears more than once."""
        return all(exp <= 1 for exp in self.factors.values())

    def power_of(self, num: int) -> None:
        """Raise the represented number to the power ``num`` in place."""
        for prime in self.factors:
            self.factors[prime] *= num

    def _key(self) -> tuple[tuple[int, int], ...]:
        return tuple(sorted(self.factors.items()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Factorized):
            return NotImplemented
        return self._key() < other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Factorized):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Factorized({dict(self._key())!r})"


def factorizations(num: int) -> Iterator[list[int]]:
    """Yield every way of writing ``num`` as a non-decreasing product of factors >= 2."""
    if num < 1:
        raise ValueError(f"cannot list factorisations of {num}")
    stack: list[tuple[tuple[int, ...], int, int]] = [((), 2, num)]
    while stack:
        current, min_factor, number = stack.pop()
        if number == 1:
            yield list(current)
            continue
        for i in range(min_factor, number + 1):
            if number % i == 0:
                stack.append((current + (i,), i, number // i))