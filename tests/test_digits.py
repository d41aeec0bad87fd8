import pytest

from eulertools.digits import (
    base_10,
    concat,
    concat_big,
    concat_num,
    get_digits,
    is_palindrome,
    is_pandigital,
    is_perm,
    iter_digits,
    log_10,
    sum_digits,
)


def test_get_digits_decimal():
    assert get_digits(12345) == [1, 2, 3, 4, 5]
    assert get_digits(0) == []


def test_get_digits_binary():
    assert get_digits(6, 2) == [1, 1, 0]


def test_get_digits_matches_format():
    for n in range(1, 3000, 7):
        assert get_digits(n, 2) == [int(c) for c in format(n, "b")]
        assert get_digits(n, 8) == [int(c) for c in format(n, "o")]


def test_iter_digits_least_significant_first():
    assert list(iter_digits(123)) == [3, 2, 1]


def test_iter_digits_rejects_negative_and_bad_base():
    with pytest.raises(ValueError):
        list(iter_digits(-5))
    with pytest.raises(ValueError):
        list(iter_digits(5, 1))


def test_concat_round_trip():
    for n in range(1, 5000, 13):
        assert concat(get_digits(n)) == n


def test_concat_rejects_non_digit():
    with pytest.raises(ValueError):
        concat([1, 10])


def test_concat_big_round_trip_and_wide_entries():
    n = 98765432109876543210
    assert concat_big(get_digits(n)) == n
    assert concat_big([1, 12]) == 112
    with pytest.raises(ValueError):
        concat_big([1, -1])


def test_base_10_is_smallest_power_at_least_num():
    for n in range(11, 5000, 3):
        b = base_10(n)
        assert str(b).lstrip("1") == "0" * (len(str(b)) - 1)
        assert b >= n
        assert b // 10 < n


def test_concat_num_joins_text():
    for a in (1, 7, 12, 345):
        for b in (2, 34, 567, 999):
            assert concat_num(a, b) == int(f"{a}{b}")


def test_log_10_bounds():
    for n in range(11, 100000, 97):
        k = log_10(n)
        assert 10 ** k < n <= 10 ** (k + 1)


def test_sum_digits_matches_text():
    for x in (0, 7, 2**1000, 10**50 + 12345):
        assert sum_digits(x) == sum(int(c) for c in str(x))


def test_sum_digits_negative():
    assert sum_digits(-12) == -3


def test_is_pandigital():
    assert is_pandigital(932718654)
    assert is_pandigital(123456789)
    assert not is_pandigital(1234)
    assert not is_pandigital(112345678)
    assert is_pandigital(4321, 4)


def test_is_palindrome():
    assert is_palindrome([1, 2, 1])
    assert not is_palindrome([1, 2])
    assert is_palindrome([])
    for n in (585, 1234321, 12):
        assert is_palindrome(get_digits(n)) == (str(n) == str(n)[::-1])


def test_is_perm():
    assert is_perm(1487, 4817)
    assert not is_perm(12, 13)
    assert not is_perm(11, 1)