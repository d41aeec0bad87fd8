import math

import pytest

from eulertools.digits import is_pandigital
from eulertools.primes import Factorized, is_prime
from eulertools.problems_c import (
    _substring_divisible_pandigitals,
    solve_39,
    solve_40,
    solve_41,
    solve_43,
    solve_44,
    solve_45,
    solve_46,
    solve_47,
    solve_48,
    solve_49,
    solve_50,
    solve_51,
    solve_52,
    solve_53,
    solve_55,
    solve_56,
    solve_57,
    solve_58,
    solve_193,
    solve_206,
    solve_216,
)


def _is_square(n):
    return n >= 0 and math.isqrt(n) ** 2 == n


def test_solve_39_default():
    assert solve_39() == 840


def test_solve_39_first_perimeter_with_three_triangles():
    assert solve_39(121) == 120


def test_solve_40():
    assert solve_40() == 210


def test_solve_41_is_pandigital_prime():
    result = solve_41()
    assert is_prime(result)
    assert is_pandigital(result, len(str(result)))


def test_solve_43_includes_example_and_sums():
    found = list(_substring_divisible_pandigitals())
    assert 1406357289 in found
    assert all(len(set(str(n).zfill(10))) == 10 for n in found)
    assert solve_43() == sum(found)


def test_solve_44_difference_is_pentagonal():
    d = solve_44()
    root = math.isqrt(1 + 24 * d)
    assert root * root == 1 + 24 * d
    assert (1 + root) % 6 == 0


def test_solve_44_too_few_numbers():
    with pytest.raises(ValueError):
        solve_44(100)


def test_solve_45_is_triangle_pentagonal_hexagonal():
    t = solve_45()
    assert t > 285 * 286 // 2
    assert _is_square(8 * t + 1)
    assert (1 + math.isqrt(8 * t + 1)) % 4 == 0
    assert _is_square(24 * t + 1)
    assert (1 + math.isqrt(24 * t + 1)) % 6 == 0


def test_solve_46():
    assert solve_46() == 5777


def test_solve_47_run_of_four():
    start = solve_47()
    assert all(len(Factorized(start + k).factors) == 4 for k in range(4))
    assert len(Factorized(start - 1).factors) != 4


def test_solve_47_rejects_zero():
    with pytest.raises(ValueError):
        solve_47(0)


def test_solve_48():
    assert solve_48() == 9110846700


def test_solve_48_fewer_digits_is_suffix():
    assert solve_48(1000, 5) == solve_48(1000, 10) % 10**5


def test_solve_49():
    sequences = solve_49()
    assert {seq[0] for seq in sequences} == {1487, 2969}
    for a, b, c in sequences:
        assert b - a == c - b
        assert sorted(str(a)) == sorted(str(b)) == sorted(str(c))
        assert all(is_prime(x) for x in (a, b, c))


def test_solve_50_default():
    assert solve_50() == 997651


def test_solve_50_small_limit():
    result = solve_50(100)
    assert is_prime(result)
    assert result < 100


def test_solve_50_no_primes():
    with pytest.raises(ValueError):
        solve_50(2)


def test_solve_51():
    assert solve_51() == 121313


def test_solve_51_rejects_large_family():
    with pytest.raises(ValueError):
        solve_51(11)


def test_solve_52():
    assert solve_52() == 142857


def test_solve_53():
    assert solve_53() == 4075


def test_solve_55():
    assert solve_55() == 249


def test_solve_56():
    assert solve_56() == 972


def test_solve_57():
    assert solve_57() == 153


def test_solve_58():
    assert solve_58() == 26241


def test_solve_58_rejects_nonpositive_ratio():
    with pytest.raises(ValueError):
        solve_58(0)


@pytest.mark.parametrize("exponent", [4, 10, 12])
def test_solve_193_matches_counting(exponent):
    n = 1 << exponent
    expected = sum(1 for k in range(1, n + 1) if Factorized(k).square_free())
    assert solve_193(exponent) == expected


def test_solve_206_square_has_pattern():
    x = solve_206()
    assert str(x * x)[::2] == "1234567890"
    assert x % 10 == 0


def test_solve_216_small_is_exact():
    expected = sum(1 for n in range(2, 11) if is_prime(2 * n * n - 1))
    assert solve_216(10) == expected


def test_solve_216_never_undercounts():
    expected = sum(1 for n in range(2, 1001) if is_prime(2 * n * n - 1))
    assert solve_216(1000) >= expected


def test_solve_216_rejects_zero():
    with pytest.raises(ValueError):
        solve_216(0)