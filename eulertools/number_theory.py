"""Number-theoretic tools: gcd, fractions, continued fractions and arithmetic functions."""

from __future__ import annotations

import copy
import math
from collections.abc import Iterator
from functools import total_ordering
from itertools import count

from .primes import Factorized, primes


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``abs(a)`` and ``abs(b)``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _trunc_div(x: int, y: int) -> int:
    """Integer division rounding towards zero."""
    q = abs(x) // abs(y)
    return q if (x >= 0) == (y >= 0) else -q


class ExtendedEuclidean:
    """Bezout coefficients: ``a * x + b * y == g``."""

    def __init__(self, a: int, b: int) -> None:
        old_r, r = a, b
        old_s, s = 1, 0
        old_t, t = 0, 1
        while r != 0:
            q = _trunc_div(old_r, r)
            old_r, r = r, old_r - q * r
            old_s, s = s, old_s - q * s
            old_t, t = t, old_t - q * t
        self.g = old_r
        self.x = old_s
        self.y = old_t

    def __repr__(self) -> str:
        return f"ExtendedEuclidean(g={self.g}, x={self.x}, y={self.y})"


def inverse_mod_p(n: int, p: int) -> int:
    """Return the inverse of ``n`` modulo ``p``."""
    return (ExtendedEuclidean(n, p).x + p) % p


@total_ordering
class Frac:
    """A fraction kept as written; arithmetic results are reduced."""

    __hash__ = None  # mutable through reduce()

    def __init__(self, num: int, denom: int = 1) -> None:
        self.num = num
        self.denom = denom

    @classmethod
    def _reduced(cls, num: int, denom: int) -> Frac:
        f = cls(num, denom)
        f.reduce()
        return f

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frac):
            return NotImplemented
        return self.num * other.denom == self.denom * other.num

    def __lt__(self, other: Frac) -> bool:
        if not isinstance(other, Frac):
            return NotImplemented
        return self.num * other.denom < self.denom * other.num

    def __mul__(self, other: Frac) -> Frac:
        return self._reduced(self.num * other.num, self.denom * other.denom)

    def __truediv__(self, other: Frac) -> Frac:
        return self._reduced(self.num * other.denom, self.denom * other.num)

    def __add__(self, other: Frac) -> Frac:
        return self._reduced(self.num * other.denom + other.num * self.denom, self.denom * other.denom)

    def __sub__(self, other: Frac) -> Frac:
        return self._reduced(self.num * other.denom - other.num * self.denom, self.denom * other.denom)

    def __str__(self) -> str:
        return f"{self.num} / {self.denom}"

    def __repr__(self) -> str:
        return f"Frac({self.num}, {self.denom})"

    def reduce(self) -> None:
        """Divide numerator and denominator by their gcd, in place."""
        g = gcd(self.num, self.denom)
        self.num //= g
        self.denom //= g


def get_coprime(num: int) -> list[int]:
    """Return the integers in ``1..num-1`` that are coprime to ``num``."""
    return [i for i in range(1, num) if gcd(i, num) == 1]


class RadicalRational:
    """The number ``(a + b * sqrt(c)) / d``, starting out as ``sqrt(c)``."""

    def __init__(self, c: int) -> None:
        self.a = 0
        self.b = 1
        self.c = c
        self.sqrt_c = math.sqrt(c)
        self.d = 1

    def invert(self) -> None:
        """Replace the value by its reciprocal, rationalising the denominator."""
        a, b, c, d = self.a, self.b, self.c, self.d
        self.a = d * a
        self.b = -d * b
        self.d = a * a - b * b * c
        self.reduce()

    def reduce(self) -> None:
        """Divide out the common factor and keep the denominator positive."""
        g = gcd(gcd(self.a, self.b), self.d)
        factor = -g if self.d < 0 else g
        self.a //= factor
        self.b //= factor
        self.d //= factor

    def to_float(self) -> float:
        return (self.a + self.b * self.sqrt_c) / self.d

    def sub(self, right: int) -> None:
        """Subtract the integer ``right``."""
        self.a -= right * self.d
        self.reduce()

    def _floor(self) -> int:
        """Exact floor of the value, assuming a positive denominator."""
        root = math.isqrt(self.b * self.b * self.c)
        if self.b >= 0:
            whole = root
        else:
            whole = -root if root * root == self.b * self.b * self.c else -root - 1
        return (self.a + whole) // self.d

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RadicalRational):
            return NotImplemented
        return (self.a, self.b, self.c, self.d) == (other.a, other.b, other.c, other.d)

    __hash__ = None

    def __repr__(self) -> str:
        return f"RadicalRational(a={self.a}, b={self.b}, c={self.c}, d={self.d})"


class ContinuedFrac:
    """A continued fraction: an initial term and a list of further terms."""

    def __init__(self, terms) -> None:
        self.initial = 0
        self.repeated: list[int] = list(terms)

    @classmethod
    def from_sqrt(cls, c: int) -> ContinuedFrac:
        """Return the expansion of ``sqrt(c)`` with one full period in ``repeated``."""
        if c < 1 or math.isqrt(c) ** 2 == c:
            raise ValueError(f"sqrt({c}) has no periodic continued fraction")
        r = RadicalRational(c)
        initial = math.isqrt(c)
        r.sub(initial)
        start = copy.copy(r)
        terms = []
        while True:
            r = copy.copy(r)
            r.invert()
            term = r._floor()
            terms.append(term)
            r.sub(term)
            if r == start:
                break
        cf = cls(terms)
        cf.initial = initial
        return cf

    def convergent(self) -> tuple[int, int]:
        """Fold every term but the last from the back and return ``(num, denom)``.

        For terms ``t0, t1, ..., tk`` this is the convergent of ``[t0; t1, ..., t(k-1)]``
        given as ``(q, p)``, its reciprocal.
        """
        if not self.repeated:
            raise ValueError("continued fraction has no terms")
        num, denom = 0, 1
        for term in reversed(self.repeated[:-1]):
            num += term * denom
            num, denom = denom, num
            g = gcd(num, denom)
            num //= g
            denom //= g
        return num, denom

    def __repr__(self) -> str:
        return f"ContinuedFrac(initial={self.initial}, repeated={self.repeated!r})"


class Mobius:
    """Sieved values of the Moebius function, valid for indices below ``max_value``."""

    def __init__(self, max_value: int) -> None:
        size = max_value + 1
        values = [1] * size
        for p in primes(max_value):
            if p >= max_value:
                break
            for i in range(0, size, p):
                values[i] = -values[i]
            for i in range(0, size, p * p):
                values[i] = 0
        self._values = values

    def at(self, idx: int) -> int:
        if idx < 0:
            raise IndexError(idx)
        return self._values[idx]


def slow_mobius(x: int) -> int:
    """Return the Moebius function of ``x`` by factorisation."""
    if x == 0:
        return 0
    if x == 1:
        return 1
    f = Factorized(x)
    if not f.square_free():
        return 0
    return -1 if len(f.factors) % 2 else 1


class Totient:
    """Sieved values of Euler's totient, valid for indices below ``max_value``."""

    def __init__(self, max_value: int) -> None:
        size = max_value + 1
        values = [0] * size
        values[0] = 1
        for i in range(1, max_value):
            values[i] = i
        for p in primes(max_value):
            if p >= max_value:
                break
            for i in range(p, size, p):
                values[i] -= values[i] // p
        self._values = values

    def at(self, idx: int) -> int:
        if idx < 0:
            raise IndexError(idx)
        return self._values[idx]


def slow_totient(x: int) -> int:
    """Return Euler's totient of ``x`` by counting; 0 and 1 give 1."""
    if x in (0, 1):
        return 1
    return sum(1 for i in range(1, x) if gcd(i, x) == 1)


def generalized_pentagonals() -> Iterator[int]:
    """Yield the generalised pentagonal numbers 1, 2, 5, 7, 12, 15, ..."""
    for k in count(1):
        yield k * (3 * k - 1) // 2
        yield k * (3 * k + 1) // 2


class DivisorSum:
    """Sum-of-divisors values up to ``max_value`` from the pentagonal recurrence."""

    def __init__(self, max_value: int) -> None:
        self._lookup: list[int] = []
        if max_value == 0:
            return
        lookup = [0] * (max_value + 1)
        lookup[0] = 1
        for n in range(1, max_value + 1):
            total = 0
            for i, g in enumerate(generalized_pentagonals()):
                if g > n:
                    break
                term = n if g == n else lookup[n - g]
                total += term if i % 4 < 2 else -term
            lookup[n] = total
        self._lookup = lookup

    def at(self, val: int) -> int:
        """Return the sum of all divisors of ``val``."""
        if val < 0:
            raise IndexError(val)
        return self._lookup[val]

    def at_proper(self, val: int) -> int:
        """Return the sum of the divisors of ``val`` other than ``val``."""
        return self.at(val) - val


_PARTITIONS: list[int] = [1]


def partition(n: int) -> int:
    """Return the number of integer partitions of ``n``."""
    if n < 0:
        raise ValueError(f"no partitions of negative number {n}")
    part = _PARTITIONS
    for i in range(len(part), n + 1):
        total = 0
        sign = 1
        k = 1
        while i - k * (3 * k - 1) // 2 >= 0:
            total += sign * part[i - k * (3 * k - 1) // 2]
            second = i - k * (3 * k + 1) // 2
            if second >= 0:
                total += sign * part[second]
            sign = -sign
            k += 1
        part.append(total)
    return part[n]