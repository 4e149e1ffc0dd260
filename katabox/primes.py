"""Prime number puzzles: even-digit primes, factorisation, gaps and divisor sums."""

import itertools
import math

_EVEN_DIGITS = frozenset("02468")


def _is_prime(n):
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


def _primes_below(limit):
    """Return the primes smaller than ``limit`` in ascending order."""
    if limit <= 2:
        return []
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit - 1) + 1):
        if flags[p]:
            flags[p * p::p] = bytes(len(range(p * p, limit, p)))
    return [n for n, flag in enumerate(flags) if flag]


def even_primes(n):
    """Largest odd prime below ``n`` with the most even digits, or 0 if none has any."""
    best = 0
    best_count = 0
    for prime in reversed(_primes_below(n)):
        if prime == 2:
            continue
        evens = sum(digit in _EVEN_DIGITS for digit in str(prime))
        if evens > best_count:
            best, best_count = prime, evens
    return best


def prime_factors(n):
    """Factorise ``n`` as a string such as ``"(2**5)(5)(7**2)(11)"``."""
    if n < 2:
        raise ValueError(f"cannot factorise {n}")
    factors = {}
    remaining = n
    divisor = 2
    while divisor * divisor <= remaining:
        while remaining % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            remaining //= divisor
        divisor += 1 if divisor == 2 else 2
    if remaining > 1:
        factors[remaining] = factors.get(remaining, 0) + 1
    return "".join(
        f"({prime}**{power})" if power > 1 else f"({prime})"
        for prime, power in sorted(factors.items())
    )


def prime_gap(gap, start, end):
    """First pair of successive primes in ``[start, end]`` that are ``gap`` apart.

    Returns ``(0, 0)`` when there is none, and at once for an odd gap above 2.
    """
    if start > 2 and gap % 2 != 0:
        return (0, 0)
    previous = None
    for candidate in range(start, end + 1):
        if not _is_prime(candidate):
            continue
        if previous is not None and candidate - previous == gap:
            return (previous, candidate)
        previous = candidate
    return (0, 0)


def sum_of_divided(values):
    """List ``(p sum)`` for each prime ``p`` dividing some value, with a non-zero sum."""
    limit = max((abs(value) for value in values), default=0)
    parts = []
    for prime in _primes_below(limit + 1):
        total = sum(value for value in values if value % prime == 0)
        if total:
            parts.append(f"({prime} {total})")
    return "".join(parts)


def first_primes(count):
    """The first ``count`` numbers with at most two divisors: 1, then the primes."""
    if count <= 0:
        return []
    primes = (n for n in itertools.count(2) if _is_prime(n))
    return list(itertools.islice(itertools.chain([1], primes), count))