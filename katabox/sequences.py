"""Number sequence puzzles: palindromes, Fibonacci products, divisors and spirals."""

import math
from itertools import pairwise


def next_palindrome(n):
    """Next palindrome after the palindrome ``n`` (with the quirks of its shortcuts)."""
    if n < 9:
        return n + 1
    if n % 10 == 9:
        return n + 2
    digits = str(n)
    length = len(digits)

    def mirror(half):
        return int(half + half[::-1][length % 2:])

    left = digits[:(length + 1) // 2]
    candidate = mirror(left)
    if candidate > n:
        return candidate
    return mirror(str(int(left) + 1))


def is_palindrome(n):
    """True when the decimal digits of ``n`` read the same backwards."""
    digits = str(n)
    return digits == digits[::-1]


def is_consecutive_square_sum(n):
    """Search a sliding window of consecutive squares summing to ``n``."""
    if n < 1:
        return False
    limit = math.isqrt(n)
    start = 1
    total = 0
    i = 1
    while i <= limit:
        if total == n:
            return True
        if total < n:
            total += i * i
            i += 1
        else:
            while total > n:
                total -= start * start
                start += 1
            if i == limit and total < n:
                i += 1
    return False


def palindromic_square_sums(limit):
    """One plus the count of palindromes below ``limit`` that are square sums."""
    results = 1
    palindrome = 1
    while palindrome < limit:
        if is_palindrome(palindrome) and is_consecutive_square_sum(palindrome):
            results += 1
        palindrome = next_palindrome(palindrome)
    return results


def _fibonacci_up_to(product):
    fib = [0, 1]
    i = 1
    while i < product:
        fib.append(fib[i - 1] + fib[i])
        if fib[i] * fib[i - 1] > product:
            break
        i += 1
    return fib


def product_fib(product):
    """``[a, b, 1]`` for successive Fibonacci numbers with ``a * b == product``.

    Otherwise ``[a, b, 0]`` for the first pair whose product exceeds it, or
    ``[]`` when no such pair was generated.
    """
    fib = _fibonacci_up_to(product)
    for a, b in pairwise(fib):
        if a and product % a == 0 and product % b == 0 and a * b == product:
            return [a, b, 1]
    for a, b in pairwise(fib[1:]):
        if a * b > product:
            return [a, b, 0]
    return []


def sum_dig_pow(low, high):
    """Numbers in ``[low, high]`` equal to the sum of their digits raised to their positions."""
    return [
        n for n in range(low, high + 1)
        if n < 10
        or sum(int(d) ** k for k, d in enumerate(str(n), start=1)) == n
    ]


def list_squared(low, high):
    """Pairs ``(n, s)`` where ``s``, the sum of squared divisors of ``n``, is a square."""
    result = []
    for n in range(low, high + 1):
        divisors = [d for d in range(1, n // 2 + 1) if n % d == 0]
        divisors.append(n)
        total = sum(d * d for d in divisors)
        if math.isqrt(total) ** 2 == total:
            result.append((n, total))
    return result


def squares_in_rectangle(length, width):
    """Sides of the squares cut greedily from a rectangle; ``[]`` for a square."""
    if length == width:
        return []
    small, large = sorted((length, width))
    sides = []
    while small > 0:
        sides.append(small)
        small, large = sorted((small, large - small))
    return sides


def smallest_sum(values):
    """Smallest sum reachable by repeatedly replacing ``x`` with ``x - y`` for ``x > y``."""
    values = list(values)
    if not values:
        return 0
    if len(values) == 1:
        return values[0]
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    return math.gcd(*values) * len(values)


def create_spiral(n):
    """An ``n`` by ``n`` grid filled with 1 to ``n * n`` in a clockwise spiral."""
    if n < 1:
        return []
    grid = [[0] * n for _ in range(n)]
    row = col = 0
    d_row, d_col = 0, 1
    for value in range(1, n * n + 1):
        grid[row][col] = value
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < n and 0 <= next_col < n) or grid[next_row][next_col]:
            d_row, d_col = d_col, -d_row
        row += d_row
        col += d_col
    return grid