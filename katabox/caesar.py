"""Caesar-style ciphers: a prefixed split cipher, a moving shift and ROT13."""

import string

_ROT13 = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_lowercase[13:] + string.ascii_lowercase[:13]
    + string.ascii_uppercase[13:] + string.ascii_uppercase[:13],
)


def _ascii_lower(char):
    return char.lower() if char.isascii() else char


def caesar_shift(char, shift):
    """Shift an ASCII letter by ``shift`` places; other characters pass through."""
    if shift > 26:
        shift %= 26
    code = ord(char)
    for first, last in (("a", "z"), ("A", "Z")):
        low, high = ord(first), ord(last)
        if low <= code <= high:
            if shift > high - code:
                return chr(low - (high - code + 1) + shift)
            code += shift
            if code < low:
                code = high - (low - code - 1)
            return chr(code)
    return char


def caesar_encode(text, shift):
    """Encode ``text`` into four or five parts, led by a two-letter key prefix."""
    if not text:
        raise ValueError("cannot encode an empty text")
    total = len(text) + 2
    size = -(-total // 5)
    count = 4 if size * 4 == total else 5
    first = text[0]
    encoded = (
        _ascii_lower(first)
        + _ascii_lower(caesar_shift(first, shift))
        + "".join(caesar_shift(char, shift) for char in text)
    )
    return [encoded[k * size:(k + 1) * size] for k in range(count)]


def caesar_decode(parts):
    """Decode the parts produced by :func:`caesar_encode`."""
    if not parts or len(parts[0]) < 2:
        raise ValueError("the first part must hold the two-letter prefix")
    head = parts[0]
    original, shifted = ord(head[0]), ord(head[1])
    if shifted > original:
        shift = -(shifted - original)
    else:
        shift = -((ord("z") - original) + (shifted - ord("a")) + 1)
    body = head[2:] + "".join(parts[1:])
    return "".join(caesar_shift(char, shift) for char in body)


def _rotate(char, shift):
    if char in string.ascii_lowercase:
        base = ord("a")
    elif char in string.ascii_uppercase:
        base = ord("A")
    else:
        return char
    return chr(base + (ord(char) - base + shift) % 26)


def moving_shift(text, shift):
    """Shift each letter by a growing amount and split the result in five parts."""
    size = -(-len(text) // 5)
    shifted = "".join(_rotate(char, shift + k) for k, char in enumerate(text))
    return [shifted[k * size:(k + 1) * size] for k in range(5)]


def demoving_shift(parts, shift):
    """Invert :func:`moving_shift`."""
    joined = "".join(parts)
    return "".join(_rotate(char, -(shift + k)) for k, char in enumerate(joined))


def rot13(text):
    """Rotate ASCII letters by thirteen places."""
    return text.translate(_ROT13)