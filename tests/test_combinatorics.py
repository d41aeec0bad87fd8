import pytest

from eulertools.combinatorics import catalan, factorial, n_choose_r


def test_lattice_paths_value():
    assert n_choose_r(40, 20) == 137846528820


def test_symmetry_and_pascal_rule():
    for n in range(1, 60):
        for r in range(1, n):
            assert n_choose_r(n, r) == n_choose_r(n, n - r)
            assert n_choose_r(n, r) == n_choose_r(n - 1, r - 1) + n_choose_r(n - 1, r)


def test_row_sums_are_powers_of_two():
    for n in range(0, 40):
        assert sum(n_choose_r(n, r) for r in range(n + 1)) == 2**n


def test_r_greater_than_n_raises():
    with pytest.raises(ValueError):
        n_choose_r(3, 4)


def test_factorial_recurrence():
    for n in range(1, 50):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_small_inputs():
    assert factorial(0) == factorial(1) == factorial(-3)


def test_factorial_digit_sum_of_hundred():
    assert sum(int(c) for c in str(factorial(100))) == 648


def test_catalan_zero_raises():
    with pytest.raises(ZeroDivisionError):
        catalan(0)


def test_catalan_one():
    assert catalan(1) == 3