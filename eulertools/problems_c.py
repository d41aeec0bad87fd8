"""Solutions to a third batch of number puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterator
from fractions import Fraction
from itertools import combinations, count, islice, permutations

from .combinatorics import n_choose_r
from .digits import concat
from .number_theory import Mobius
from .primes import fast_is_square, is_prime, primes


def _right_triangle_count(p: int) -> int:
    """Return how many integer right triangles with a < b < c have perimeter ``p``."""
    solutions = 0
    for a in range(1, p // 3):
        numerator = p * (p - 2 * a)
        denominator = 2 * (p - a)
        if numerator % denominator:
            continue
        b = numerator // denominator
        c = p - a - b
        if a <= b < 2 * p // 3 + 1 and c <= a + b:
            solutions += 1
    return solutions


def solve_39(limit: int = 1000) -> int:
    """Return the perimeter below ``limit`` with the most integer right triangles."""
    best_p, best_count = 0, 0
    for p in range(limit):
        solutions = _right_triangle_count(p)
        if solutions > best_count:
            best_p, best_count = p, solutions
    return best_p


def solve_40(limit: int = 1_000_000) -> int:
    """Return the product of the digits at positions 1, 10, 100, ... up to ``limit``.

    Positions count into the string ``0123456789101112...``.
    """
    parts = []
    length = 0
    for i in count():
        if length > limit:
            break
        text = str(i)
        parts.append(text)
        length += len(text)
    digits = "".join(parts)
    product = 1
    position = 1
    while position <= limit:
        product *= int(digits[position])
        position *= 10
    return product


def solve_41() -> int:
    """Return the largest n-digit pandigital prime."""
    for n in range(9, 0, -1):
        # Every permutation of 1..n is divisible by 3 when their sum is.
        if n * (n + 1) // 2 % 3 == 0:
            continue
        for perm in permutations(range(n, 0, -1)):
            num = concat(perm)
            if is_prime(num):
                return num
    raise RuntimeError("no pandigital prime exists")


def _substring_divisible_pandigitals() -> Iterator[int]:
    """Yield the 0-9 pandigital numbers whose 3-digit substrings d2d3d4 ... d8d9d10
    are divisible by 2, 3, 5, 7, 11, 13 and 17 respectively."""
    divisors = list(islice(primes(), 7))

    def extend(prefix: list[int], unused: set[int]) -> Iterator[int]:
        if not unused:
            yield concat(prefix)
            return
        pos = len(prefix)
        for d in sorted(unused):
            if pos >= 3:
                value = prefix[pos - 2] * 100 + prefix[pos - 1] * 10 + d
                if value % divisors[pos - 3]:
                    continue
            prefix.append(d)
            unused.remove(d)
            yield from extend(prefix, unused)
            unused.add(d)
            prefix.pop()

    yield from extend([], set(range(10)))


def solve_43() -> int:
    """Return the sum of the substring-divisible 0-9 pandigital numbers."""
    return sum(_substring_divisible_pandigitals())


def solve_44(count: int = 2500) -> int:
    """Return the least difference of two pentagonal numbers whose sum and difference
    are both pentagonal, among the first ``count - 1`` pentagonal numbers."""
    pentagonals = [n * (3 * n - 1) // 2 for n in range(1, count)]
    if not pentagonals:
        raise ValueError(f"no pentagonal numbers for count {count}")
    known = set(pentagonals)
    largest = pentagonals[-1]
    best: int | None = None
    for j, small in enumerate(pentagonals):
        for big in islice(pentagonals, j + 1, None):
            diff = big - small
            if big + small > largest or (best is not None and diff >= best):
                break
            if diff in known and big + small in known:
                best = diff
    if best is None:
        raise ValueError(f"no such pair among the first {count - 1} pentagonal numbers")
    return best


def solve_45() -> int:
    """Return the next triangle number after T285 that is also pentagonal and hexagonal."""
    t_idx, p_idx, h_idx = 285, 165, 143
    while True:
        t_idx += 1
        t_num = t_idx * (t_idx + 1) // 2
        p_num = p_idx * (3 * p_idx - 1) // 2
        h_num = h_idx * (2 * h_idx - 1)
        if t_num == p_num == h_num:
            return t_num
        if p_num < t_num:
            p_idx += 1
        if h_num < t_num:
            h_idx += 1


def solve_46() -> int:
    """Return the smallest odd composite that is not a prime plus twice a square."""
    for i in count(33, 2):
        if is_prime(i):
            continue
        for p in primes():
            if p == 2:
                continue
            if p >= i:
                return i
            if fast_is_square((i - p) // 2):
                break
    raise AssertionError("unreachable")


def _distinct_factor_counts(limit: int) -> list[int]:
    """Return the number of distinct prime factors of every integer up to ``limit``."""
    counts = [0] * (limit + 1)
    for p in range(2, limit + 1):
        if counts[p] == 0:
            for multiple in range(p, limit + 1, p):
                counts[multiple] += 1
    return counts


def solve_47(count: int = 4) -> int:
    """Return the first of ``count`` consecutive integers each with ``count`` distinct prime factors."""
    if count < 1:
        raise ValueError(f"count must be positive, not {count}")
    limit = 1024
    while True:
        counts = _distinct_factor_counts(limit)
        run = 0
        for i in range(2, limit + 1):
            if counts[i] == count:
                run += 1
                if run == count:
                    return i - count + 1
            else:
                run = 0
        limit *= 2


def solve_48(limit: int = 1000, modulus_digits: int = 10) -> int:
    """Return the last ``modulus_digits`` digits of ``1^1 + 2^2 + ... + limit^limit``."""
    modulus = 10**modulus_digits
    return sum(pow(i, i, modulus) for i in range(1, limit + 1)) % modulus


def solve_49() -> list[tuple[int, int, int]]:
    """Return the 4-digit prime arithmetic progressions whose terms are digit permutations."""
    found = []
    for p in primes(10000):
        if p < 1000:
            continue
        if p >= 10000:
            break
        text = str(p)
        later = {"".join(q) for q in permutations(text) if "".join(q) > text}
        differences = {int(q) - p for q in later if is_prime(int(q))}
        if len(differences) < 2:
            continue
        for d in sorted(differences):
            if 2 * d in differences:
                found.append((p, p + d, p + 2 * d))
    return found


def solve_50(limit: int = 1_000_000) -> int:
    """Return the prime below ``limit`` that is the sum of the most consecutive primes."""
    below = []
    for p in primes(limit):
        if p >= limit:
            break
        below.append(p)
    prefix = [0]
    for p in below:
        prefix.append(prefix[-1] + p)
    max_len = sum(1 for total in prefix[1:] if total < limit)
    for length in range(max_len, 0, -1):
        for start in range(len(below) - length + 1):
            total = prefix[start + length] - prefix[start]
            if total >= limit:
                break
            if is_prime(total):
                return total
    raise ValueError(f"no sum of consecutive primes is a prime below {limit}")


def solve_51(family_size: int = 8) -> int:
    """Return the smallest prime that, by replacing some equal digits with one digit,
    belongs to a family of ``family_size`` primes."""
    if not 1 <= family_size <= 10:
        raise ValueError(f"family size must be between 1 and 10, not {family_size}")
    for p in primes(10**6):
        text = str(p)
        for digit in set(text):
            positions = [i for i, c in enumerate(text) if c == digit]
            for size in range(1, len(positions) + 1):
                if size == len(text):
                    continue
                for chosen in combinations(positions, size):
                    members = 0
                    for tried, replacement in enumerate("0123456789"):
                        if members + 10 - tried < family_size:
                            break
                        if replacement == "0" and chosen[0] == 0:
                            continue
                        chars = list(text)
                        for pos in chosen:
                            chars[pos] = replacement
                        if is_prime(int("".join(chars))):
                            members += 1
                    if members >= family_size:
                        return p
    raise AssertionError("unreachable")


def solve_52(max_multiplier: int = 6) -> int:
    """Return the smallest ``x`` such that ``2x, ..., max_multiplier * x`` share its digits."""
    for i in count(1):
        if len(str(i * max_multiplier)) != len(str(i)):
            continue
        digits = sorted(str(i))
        if all(sorted(str(i * m)) == digits for m in range(2, max_multiplier + 1)):
            return i
    raise AssertionError("unreachable")


def solve_53(limit: int = 100, threshold: int = 1_000_000) -> int:
    """Return how many C(n, r) with ``n <= limit`` and ``r < n`` exceed ``threshold``."""
    return sum(
        1 for n in range(limit + 1) for r in range(n) if n_choose_r(n, r) > threshold
    )


def _is_lychrel(num: int, iterations: int) -> bool:
    for _ in range(iterations):
        num += int(str(num)[::-1])
        text = str(num)
        if text == text[::-1]:
            return False
    return True


def solve_55(limit: int = 10000, iterations: int = 50) -> int:
    """Return how many numbers below ``limit`` reach no palindrome in ``iterations`` reverse-and-adds."""
    return sum(1 for i in range(limit) if _is_lychrel(i, iterations))


def solve_56(limit: int = 100) -> int:
    """Return the greatest digit sum of ``a ** b`` for ``a, b`` below ``limit``."""
    return max(
        (sum(map(int, str(a**b))) for a in range(1, limit) for b in range(1, limit)),
        default=0,
    )


def solve_57(expansions: int = 1000) -> int:
    """Return how many of the first expansions of sqrt(2) have a longer numerator."""
    num, den = 1, 1
    hits = 0
    for _ in range(expansions):
        num, den = num + 2 * den, num + den
        if len(str(num)) > len(str(den)):
            hits += 1
    return hits


def solve_58(ratio: Fraction | int = Fraction(1, 10)) -> int:
    """Return the spiral side length at which the share of primes on the diagonals
    first falls below ``ratio``."""
    threshold = Fraction(ratio)
    if threshold <= 0:
        raise ValueError(f"ratio must be positive, not {ratio}")
    total, prime_count, corner = 1, 0, 1
    for ring in count(1):
        for _ in range(4):
            corner += 2 * ring
            if is_prime(corner):
                prime_count += 1
            total += 1
            if prime_count < threshold * total:
                return 2 * ring + 1
    raise AssertionError("unreachable")


def solve_193(exponent: int = 50) -> int:
    """Return how many square-free numbers there are up to ``2 ** exponent``."""
    n = 1 << exponent
    upper = math.isqrt(n)
    mobius = Mobius(upper + 1)
    return sum(mobius.at(d) * (n // (d * d)) for d in range(1, upper + 1))


def solve_206() -> int:
    """Return the positive integer whose square has the form 1_2_3_4_5_6_7_8_9_0."""
    start = 1010101010
    base = start - start % 100
    for hundreds in count(base, 100):
        for x in (hundreds + 30, hundreds + 70):
            if x < start:
                continue
            if str(x * x)[::2] == "1234567890":
                return x
    raise AssertionError("unreachable")


def _sqrt_mod(a: int, p: int) -> int:
    """Return a square root of ``a`` modulo the odd prime ``p``."""
    a %= p
    if a == 0:
        return 0
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    z = next(z for z in count(2) if pow(z, (p - 1) // 2, p) == p - 1)
    m, c, t, r = s, pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
    while t != 1:
        i, t2 = 1, t * t % p
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m, c = i, b * b % p
        t, r = t * c % p, r * b % p
    return r


def solve_216(limit: int = 10000) -> int:
    """Estimate how many ``n`` in ``2..limit`` make ``2n^2 - 1`` prime.

    Values divisible by a prime up to ``1.1 * limit`` are ruled out; composites whose
    prime factors all lie above that bound are counted as prime.
    """
    if limit < 1:
        raise ValueError(f"limit must be positive, not {limit}")
    bound = 1.1 * limit
    top = int(bound)
    seen: set[int] = set()
    for p in primes(top + 1):
        if p >= bound:
            break
        if p % 8 not in (1, 7):
            continue
        root = _sqrt_mod((p + 1) // 2, p)
        b = min(root, p - root)
        for i in range(p, top + 1, p):
            if i + b <= limit:
                seen.add(i + b)
            if i - b <= limit:
                seen.add(i - b)
    return limit - 1 - len(seen)