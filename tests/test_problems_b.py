import pytest

from eulertools.number_theory import Frac
from eulertools.problems_b import (
    NUMBERS,
    solve_13,
    solve_23,
    solve_25,
    solve_26,
    solve_27,
    solve_28,
    solve_29,
    solve_30,
    solve_31,
    solve_32,
    solve_33,
    solve_34,
    solve_35,
    solve_36,
    solve_37,
    solve_38,
)


def test_solve_13_prefix_of_single_number():
    assert solve_13(["123456"], 3) == "123"


def test_solve_13_default_shape():
    result = solve_13()
    assert len(result) == 10
    assert result.isdigit()
    assert solve_13(NUMBERS, 12)[:10] == result


def test_solve_23_nothing_expressible_below_24():
    assert solve_23(23) == sum(range(24))
    assert solve_23(24) == solve_23(23)


def test_solve_25_small():
    assert solve_25(3) == 12
    assert solve_25(50) > solve_25(49)


def test_solve_26():
    assert solve_26() == 983


def test_solve_27():
    assert solve_27() == -59231


def test_solve_28():
    assert solve_28(5) == 101
    assert solve_28(7) > solve_28(5)


def test_solve_29():
    assert solve_29() == 9183


def test_solve_30():
    assert solve_30() == 443839


def test_solve_31_small_cases():
    assert solve_31(5, (1, 2, 5)) == 4
    assert solve_31(0) == 1
    assert solve_31(7, (2,)) == solve_31(7, (2, 4))


def test_solve_31_grows_with_target():
    assert solve_31() > solve_31(100)


def test_solve_32():
    assert solve_32() == 45228


def test_solve_33():
    result = solve_33()
    assert result == Frac(1, 100)
    assert str(result) == "1 / 100"


def test_solve_34():
    assert solve_34() == 40730


def test_solve_35():
    assert solve_35() == 55
    assert solve_35(100) == 13


def test_solve_36():
    assert solve_36() == 872187


def test_solve_37():
    assert solve_37() == 748317


def test_solve_38():
    assert solve_38() == 932718654


@pytest.mark.parametrize("limit", [10, 100])
def test_solve_26_result_below_limit(limit):
    assert 0 < solve_26(limit) < limit