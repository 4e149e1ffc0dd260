"""Roman numerals, the factorial number system and big factorials."""

import math

_ROMAN = {
    1: "I", 2: "II", 3: "III", 4: "IV", 5: "V",
    6: "VI", 7: "VII", 8: "VIII", 9: "IX", 10: "X",
    20: "XX", 30: "XXX", 40: "XL", 50: "L", 60: "LX",
    70: "LXX", 80: "LXXX", 90: "XC", 100: "C", 200: "CC",
    300: "CCC", 400: "CD", 500: "D", 600: "DC", 700: "DCC",
    800: "DCCC", 900: "CM", 1000: "M", 2000: "MM", 3000: "MMM",
}


def _is_digits(text):
    return bool(text) and text.isascii() and text.isdigit()


def to_roman(number):
    """Write ``number`` in Roman numerals; values with no numeral give ``""``."""
    if number <= 10:
        return _ROMAN.get(number, "")
    digits = str(number)
    powers = range(len(digits) - 1, -1, -1)
    return "".join(_ROMAN.get(int(d) * 10 ** p, "") for p, d in zip(powers, digits))


def factorial(n):
    """Return ``n!``."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    return math.factorial(n)


def _digit_char(value):
    return chr(ord("0") + value) if value <= 9 else chr(ord("A") + value - 10)


def _digit_value(char):
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    raise ValueError(f"invalid factorial digit: {char!r}")


def dec_to_fact_string(number):
    """Write a non-negative integer in the factorial number system."""
    if number < 0:
        raise ValueError(f"negative number: {number}")
    digits = []
    divisor = 1
    while number:
        number, remainder = divmod(number, divisor)
        digits.append(_digit_char(remainder))
        divisor += 1
    return "".join(reversed(digits))


def fact_string_to_dec(text):
    """Read a number written in the factorial number system."""
    last = len(text) - 1
    return sum(_digit_value(char) * factorial(last - k) for k, char in enumerate(text))


def multiply_strings(a, b):
    """Multiply two numbers given as decimal digit strings."""
    if not a or not b:
        return "0"
    if not (_is_digits(a) and _is_digits(b)):
        raise ValueError(f"not digit strings: {a!r}, {b!r}")
    return str(int(a) * int(b))


def big_factorial(n):
    """Return ``n!`` as a decimal string."""
    return str(factorial(n))


def last_digit(base, exponent):
    """Last decimal digit of ``base ** exponent``, both given as digit strings."""
    if not (_is_digits(base) and _is_digits(exponent)):
        raise ValueError(f"not digit strings: {base!r}, {exponent!r}")
    digit = int(base[-1])
    if exponent == "0":
        return 1
    if digit in (0, 1, 5, 6):
        return digit
    if len(exponent) == 1:
        return digit ** int(exponent) % 10
    cycle = []
    value = digit
    while value not in cycle:
        cycle.append(value)
        value = value * digit % 10
    position = int(exponent[-2:]) % len(cycle)
    return cycle[position - 1]