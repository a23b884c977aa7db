import pytest

from algos.arithmetic import (
    IntegerOverflowError,
    NegativeExponentError,
    gcd_iterative,
    gcd_recursive,
    iterative_power,
    lcm,
    modular_exponentiation,
    multiply_int64,
    recursive_power,
    recursive_power_linear,
)

GCD_CASES = [(10, 0, 10), (98, 56, 14), (0, 10, 10)]


@pytest.mark.parametrize("func", [gcd_recursive, gcd_iterative])
@pytest.mark.parametrize("a, b, expected", GCD_CASES)
def test_gcd(func, a, b, expected):
    assert func(a, b) == expected


@pytest.mark.parametrize("func", [gcd_recursive, gcd_iterative])
def test_gcd_negative_dividend(func):
    assert func(-4, 6) == 2


@pytest.mark.parametrize("a, b, expected", [(1, 5, 5), (2, 5, 10), (10, 5, 10), (5, 5, 5)])
def test_lcm(a, b, expected):
    assert lcm(a, b) == expected


@pytest.mark.parametrize(
    "base, exponent, mod, expected",
    [(3, 6, 3, 0), (33, 60, 25, 1), (17, 60, 23, 2), (17, 60, 1, 0)],
)
def test_modular_exponentiation(base, exponent, mod, expected):
    assert modular_exponentiation(base, exponent, mod) == expected


def test_modular_exponentiation_negative_exponent():
    with pytest.raises(NegativeExponentError):
        modular_exponentiation(50, -1, 2)


def test_modular_exponentiation_overflowing_modulus():
    with pytest.raises(IntegerOverflowError):
        modular_exponentiation(2, 3, 2**62)


def test_multiply_int64_within_range():
    assert multiply_int64(3, 4) == 12
    assert multiply_int64(7, 0) == 0


def test_multiply_int64_overflow():
    with pytest.raises(IntegerOverflowError):
        multiply_int64(2**62, 4)


POWER_CASES = [(0, 2, 0), (2, 0, 1), (2, 3, 8), (8, 3, 512), (10, 5, 100000)]


@pytest.mark.parametrize("func", [iterative_power, recursive_power, recursive_power_linear])
@pytest.mark.parametrize("base, power, expected", POWER_CASES)
def test_powers(func, base, power, expected):
    assert func(base, power) == expected


@pytest.mark.parametrize("func", [iterative_power, recursive_power, recursive_power_linear])
def test_powers_wrap_at_64_bits(func):
    assert func(2, 64) == 0
    assert func(2, 63) == 2**63


@pytest.mark.parametrize("func", [iterative_power, recursive_power, recursive_power_linear])
def test_powers_reject_negative(func):
    with pytest.raises(ValueError):
        func(-2, 3)