import re
from math import prod

import pytest

from katabox.primes import (
    even_primes,
    first_primes,
    prime_factors,
    prime_gap,
    sum_of_divided,
)


def _is_prime(n):
    return n >= 2 and prime_factors(n) == f"({n})"


def _parse_factors(text):
    return [
        (int(p), int(e) if e else 1)
        for p, e in re.findall(r"\((\d+)(?:\*\*(\d+))?\)", text)
    ]


def test_even_primes_thousand():
    assert even_primes(1000) == 887


def test_even_primes_no_candidates():
    assert even_primes(0) == 0
    assert even_primes(10) == 0


@pytest.mark.parametrize("n", [50, 500, 5000])
def test_even_primes_invariants(n):
    result = even_primes(n)
    assert result < n
    assert _is_prime(result)
    assert any(d in "02468" for d in str(result))


def test_prime_factors_example():
    assert prime_factors(86240) == "(2**5)(5)(7**2)(11)"


@pytest.mark.parametrize("n", [2, 97, 194, 49, 1024, 9991, 123456])
def test_prime_factors_round_trip(n):
    factors = _parse_factors(prime_factors(n))
    assert prod(p ** e for p, e in factors) == n
    primes = [p for p, _ in factors]
    assert primes == sorted(set(primes))
    assert all(_is_prime(p) for p in primes)


def test_prime_factors_of_a_prime():
    assert prime_factors(97) == "(97)"


@pytest.mark.parametrize("n", [1, 0, -5])
def test_prime_factors_rejects_small(n):
    with pytest.raises(ValueError):
        prime_factors(n)


def test_prime_gap_example():
    assert prime_gap(6, 350, 450) == (353, 359)


@pytest.mark.parametrize("gap,start,end", [(2, 100, 110), (4, 100, 200), (8, 300, 400)])
def test_prime_gap_invariants(gap, start, end):
    low, high = prime_gap(gap, start, end)
    assert high - low == gap
    assert start <= low and high <= end
    assert _is_prime(low) and _is_prime(high)
    assert not any(_is_prime(k) for k in range(low + 1, high))


def test_prime_gap_odd_gap():
    assert prime_gap(3, 100, 200) == (0, 0)


def test_sum_of_divided_example():
    assert sum_of_divided([12, 15]) == "(2 12)(3 27)(5 15)"


def test_sum_of_divided_single_prime():
    assert sum_of_divided([7]) == "(7 7)"


def test_sum_of_divided_cancelling_and_empty():
    assert sum_of_divided([6, -6]) == ""
    assert sum_of_divided([]) == ""


def test_first_primes_start():
    assert first_primes(5) == [1, 2, 3, 5, 7]


def test_first_primes_invariants():
    values = first_primes(50)
    assert len(values) == 50
    assert values[0] == 1
    assert all(_is_prime(v) for v in values[1:])
    assert values == sorted(set(values))


def test_first_primes_empty():
    assert first_primes(0) == []