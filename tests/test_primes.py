from itertools import islice

import pytest

from algos.arithmetic import IntegerOverflowError
from algos.primes import (
    generate,
    miller_rabin_test,
    miller_test,
    naive_approach,
    pair_approach,
    primes,
    sieve,
)

PRIME_CASES = [(2, True), (3, True), (1, False), (10, False), (23, True)]


@pytest.mark.parametrize("n, expected", PRIME_CASES)
def test_naive_approach(n, expected):
    assert naive_approach(n) is expected


@pytest.mark.parametrize("n, expected", PRIME_CASES)
def test_pair_approach(n, expected):
    assert pair_approach(n) is expected


@pytest.mark.parametrize("n, expected", PRIME_CASES)
def test_miller_rabin(n, expected):
    assert miller_rabin_test(n, 5) is expected


def test_trial_division_agrees_on_small_numbers():
    assert [n for n in range(50) if naive_approach(n)] == [
        n for n in range(50) if pair_approach(n)
    ]


def test_miller_rabin_large_prime():
    assert miller_rabin_test(1_000_003, 10) is True


def test_miller_rabin_carmichael_number():
    assert miller_rabin_test(561, 30) is False


def test_miller_rabin_even_number():
    assert miller_rabin_test(1_000_000, 5) is False


def test_miller_test_on_prime_always_passes():
    assert all(miller_test(11, 23) for _ in range(20))


def test_miller_rabin_overflow():
    with pytest.raises(IntegerOverflowError):
        miller_rabin_test(2**62 + 1, 1)


def test_first_ten_primes():
    assert list(islice(primes(), 10)) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_generate_counts_from_two():
    assert list(islice(generate(), 4)) == [2, 3, 4, 5]


def test_sieve_filters_multiples():
    assert list(sieve([2, 3, 4, 5, 6, 7, 9], 3)) == [2, 4, 5, 7]