"""Transposition ciphers and string transforms."""

import re
from itertools import zip_longest

_SPACE_RUN = re.compile(r"[^\S\n\t]+")
_WORD_OR_GAP = re.compile(r"""[_!@#$%^&()\[\]{}+\-*/="'<>,.?:;A-Za-z0-9\n\t]+|[^\S\n\t]+""")
_COUNT_PREFIX = re.compile(r"^[0-9]+\s")
_LEADING_NUMBER = re.compile(r"\s*[+-]?\d+")


def alternate_encrypt(text, n):
    """Move odd-indexed characters in front of even-indexed ones, ``n`` times."""
    for _ in range(n):
        text = text[1::2] + text[::2]
    return text


def alternate_decrypt(text, n):
    """Invert :func:`alternate_encrypt`."""
    for _ in range(n):
        half = len(text) // 2
        odds, evens = text[:half], text[half:]
        text = "".join(e + o for e, o in zip_longest(evens, odds, fillvalue=""))
    return text


def _rotate_left(text, n):
    length = len(text)
    if length % n == 0:
        return text
    k = n % length
    return text[k:] + text[:k]


def _rotate_right(text, n):
    length = len(text)
    if length % n == 0:
        return text
    k = n % length
    return text[length - k:] + text[:length - k]


def _space_positions(text):
    return [i for i, char in enumerate(text) if char == " "]


def _restore_spaces(text, positions):
    chars = list(text)
    for position in positions:
        chars.insert(position, " ")
    return "".join(chars)


def _rotate_pieces(text, rotate, n):
    return "".join(rotate(match.group(), n) for match in _WORD_OR_GAP.finditer(text))


def rotation_encode(n, text):
    """Encode ``text`` with ``n`` rounds of rotation, prefixed with ``n``."""
    for _ in range(n):
        spaces = _space_positions(text)
        text = _rotate_right(_SPACE_RUN.sub("", text), n)
        text = _restore_spaces(text, spaces)
        text = _rotate_pieces(text, _rotate_right, n)
    return f"{n} {text}"


def rotation_decode(text):
    """Invert :func:`rotation_encode`."""
    head = text.split(" ", 1)[0]
    match = _LEADING_NUMBER.match(head)
    if match is None:
        raise ValueError(f"missing round count in {text!r}")
    n = int(match.group())
    text = _COUNT_PREFIX.sub("", text, count=1)
    for _ in range(n):
        spaces = _space_positions(text)
        text = _rotate_pieces(text, _rotate_left, n)
        text = _rotate_left(_SPACE_RUN.sub("", text), n)
        text = _restore_spaces(text, spaces)
    return text


def bwt_encode(text):
    """Burrows-Wheeler transform: last column and row of the original text."""
    if not text:
        raise ValueError("cannot transform an empty text")
    size = len(text)
    rotations = sorted(text[size - k:] + text[:size - k] for k in range(size))
    encoded = "".join(rotation[-1] for rotation in rotations)
    index = max(i for i, rotation in enumerate(rotations) if rotation == text)
    return encoded, index


def bwt_decode(text, index):
    """Invert :func:`bwt_encode`."""
    if not 0 <= index < len(text):
        raise IndexError(f"row {index} out of range for length {len(text)}")
    table = [""] * len(text)
    for _ in text:
        table = sorted(char + row for char, row in zip(text, table))
    return table[index]


def _transform_block(block):
    if sum(ord(char) - ord("0") for char in block) % 2 == 0:
        return block[::-1]
    return block[1:] + block[:1]


def rev_rot(text, size):
    """Reverse or rotate each full chunk of ``size`` digits; drop the remainder."""
    if not text or size <= 0 or len(text) < size:
        return ""
    usable = len(text) - len(text) % size
    return "".join(
        _transform_block(text[start:start + size]) for start in range(0, usable, size)
    )