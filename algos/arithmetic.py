"""Integer arithmetic: gcd, lcm, fast powers and modular exponentiation.

Remainders follow truncated division, where the result takes the sign of the
dividend, the way fixed-width machine integers behave. Unsigned powers wrap
around modulo 2**64.
"""

from __future__ import annotations

__all__ = [
    "IntegerOverflowError",
    "NegativeExponentError",
    "gcd_recursive",
    "gcd_iterative",
    "lcm",
    "modular_exponentiation",
    "multiply_int64",
    "iterative_power",
    "recursive_power",
    "recursive_power_linear",
]

_INT64_MAX = 2**63 - 1
_UINT64_MASK = 2**64 - 1


class IntegerOverflowError(ArithmeticError):
    """A product does not fit in a signed 64-bit integer."""

    def __init__(self, message: str = "Integer Overflow") -> None:
        super().__init__(message)


class NegativeExponentError(ValueError):
    """An exponent below zero was given where only non-negative ones work."""

    def __init__(self, message: str = "Negative Exponent Provided") -> None:
        super().__init__(message)


def _trunc_mod(a: int, b: int) -> int:
    """Remainder of truncated division: the sign follows ``a``."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd_recursive(a: int, b: int) -> int:
    """Greatest common divisor by recursive Euclid."""
    if b == 0:
        return a
    return gcd_recursive(b, _trunc_mod(a, b))


def gcd_iterative(a: int, b: int) -> int:
    """Greatest common divisor by iterative Euclid."""
    while b != 0:
        a, b = b, _trunc_mod(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, using lcm(a, b) * gcd(a, b) == |a * b|."""
    return abs(a * b) // gcd_iterative(a, b)


def multiply_int64(left: int, right: int) -> int:
    """Return ``left * right``, raising if it would overflow a signed 64-bit int."""
    if right != 0 and abs(left) > _INT64_MAX / abs(right):
        raise IntegerOverflowError()
    return left * right


def modular_exponentiation(base: int, exponent: int, mod: int) -> int:
    """Return ``base ** exponent % mod`` by square-and-multiply.

    Raises NegativeExponentError for a negative exponent and
    IntegerOverflowError when ``(mod - 1) ** 2`` does not fit in 64 bits.
    """
    if mod == 1:
        return 0
    if exponent < 0:
        raise NegativeExponentError()
    multiply_int64(mod - 1, mod - 1)

    result = 1
    base = _trunc_mod(base, mod)
    while exponent > 0:
        if exponent % 2 == 1:
            result = _trunc_mod(result * base, mod)
        exponent >>= 1
        base = _trunc_mod(base * base, mod)
    return result


def _check_unsigned(n: int, power: int) -> None:
    if n < 0 or power < 0:
        raise ValueError("base and power must be non-negative")


def iterative_power(n: int, power: int) -> int:
    """Compute ``n ** power`` modulo 2**64 in O(log power) steps."""
    _check_unsigned(n, power)
    result = 1
    while power > 0:
        if power & 1:
            result = (result * n) & _UINT64_MASK
        power >>= 1
        n = (n * n) & _UINT64_MASK
    return result


def recursive_power(n: int, power: int) -> int:
    """Compute ``n ** power`` modulo 2**64 recursively in O(log power) steps."""
    _check_unsigned(n, power)
    if power == 0:
        return 1
    half = recursive_power(n, power // 2)
    if power % 2 == 0:
        return (half * half) & _UINT64_MASK
    return (n * half * half) & _UINT64_MASK


def recursive_power_linear(n: int, power: int) -> int:
    """Compute ``n ** power`` modulo 2**64, recomputing both halves (O(power) calls)."""
    _check_unsigned(n, power)
    if power == 0:
        return 1
    product = recursive_power_linear(n, power // 2) * recursive_power_linear(n, power // 2)
    if power % 2 == 0:
        return product & _UINT64_MASK
    return (n * product) & _UINT64_MASK