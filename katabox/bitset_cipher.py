"""A six-bit scrambling cipher over a 64-character alphabet."""

import string

BITS = 6
_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + " ."
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_MASK = (1 << BITS) - 1


def find_int(char):
    """Return the six-bit code of ``char``."""
    try:
        return _INDEX[char]
    except KeyError:
        raise ValueError(f"Invalid character: {char!r}") from None


def find_char(value):
    """Return the character whose six-bit code is ``value``."""
    if not 0 <= value <= _MASK:
        raise ValueError(f"Invalid integer: {value}")
    return _ALPHABET[value]


def _pos(x):
    return BITS - x


def _bit(value, index):
    return (value >> index) & 1


def _swap_bits(value, a, b):
    if _bit(value, a) != _bit(value, b):
        value ^= (1 << a) | (1 << b)
    return value


def _swap_across(values, first, first_bit, second, second_bit):
    if _bit(values[first], first_bit) != _bit(values[second], second_bit):
        values[first] ^= 1 << first_bit
        values[second] ^= 1 << second_bit


def _reverse(value):
    return int(format(value, f"0{BITS}b")[::-1], 2)


def _swap_halves(value):
    half = BITS // 2
    low = (1 << half) - 1
    return ((value & low) << half) | (value >> half)


def _swap_pairs(value):
    odd_mask = 0b010101
    return ((value & odd_mask) << 1) | ((value >> 1) & odd_mask)


def _flip(value):
    return value ^ ((1 << _pos(2)) | (1 << _pos(4)))


def _scramble(value):
    value = _flip(value)
    value = _swap_halves(value)
    value = _swap_pairs(value)
    value = _reverse(value)
    return _swap_bits(value, _pos(1), _pos(3))


def _unscramble(value):
    value = _swap_bits(value, _pos(1), _pos(3))
    value = _reverse(value)
    value = _swap_pairs(value)
    value = _swap_halves(value)
    return _flip(value)


def encrypt(text):
    """Encrypt ``text``; every character must belong to the alphabet."""
    values = [find_int(char) for char in text]
    for i in range(len(values)):
        if i + 1 < len(values):
            _swap_across(values, i, _pos(5), i + 1, _pos(1))
        values[i] = _scramble(values[i])
    return "".join(find_char(value) for value in values)


def decrypt(text):
    """Invert :func:`encrypt`."""
    values = [find_int(char) for char in text]
    for i in range(len(values)):
        values[i] = _unscramble(values[i])
        if i > 0:
            _swap_across(values, i, _pos(1), i - 1, _pos(5))
    return "".join(find_char(value) for value in values)