"""Primality tests and an incremental prime sieve built from generators."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

from algos.arithmetic import modular_exponentiation

__all__ = [
    "miller_test",
    "miller_rabin_test",
    "naive_approach",
    "pair_approach",
    "generate",
    "sieve",
    "primes",
]


def _find_rd(num: int) -> tuple[int, int]:
    """Return odd ``d`` and ``r`` such that ``num - 1 == 2**r * d``."""
    r = 0
    d = num - 1
    while d % 2 == 0:
        d //= 2
        r += 1
    return d, r


def miller_test(d: int, num: int) -> bool:
    """One Miller-Rabin round with a random witness; ``num - 1 == 2**r * d``.

    Returns False when ``num`` is certainly composite. Raises
    IntegerOverflowError when ``num`` is too large for 64-bit squaring.
    """
    witness = random.randint(2, num - 2)
    res = modular_exponentiation(witness, d, num)
    if res in (1, num - 1):
        return True
    while d != num - 1:
        res = (res * res) % num
        d *= 2
        if res == 1:
            return False
        if res == num - 1:
            return True
    return False


def miller_rabin_test(num: int, rounds: int) -> bool:
    """Probabilistic primality test running ``rounds`` Miller-Rabin rounds."""
    if num <= 4:
        return num in (2, 3)
    if num % 2 == 0:
        return False
    d, _ = _find_rd(num)
    return all(miller_test(d, num) for _ in range(rounds))


def naive_approach(n: int) -> bool:
    """Primality by trial division by every integer below ``n``."""
    if n < 2:
        return False
    return all(n % i != 0 for i in range(2, n))


def pair_approach(n: int) -> bool:
    """Primality by trial division up to the square root of ``n``."""
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def generate() -> Iterator[int]:
    """Yield 2, 3, 4, ... without end."""
    i = 2
    while True:
        yield i
        i += 1


def sieve(numbers: Iterable[int], prime: int) -> Iterator[int]:
    """Yield the values of ``numbers`` not divisible by ``prime``."""
    for number in numbers:
        if number % prime != 0:
            yield number


def primes() -> Iterator[int]:
    """Yield primes in order by chaining one sieve per prime found."""
    numbers: Iterator[int] = generate()
    while True:
        prime = next(numbers)
        yield prime
        numbers = sieve(numbers, prime)