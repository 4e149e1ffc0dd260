"""Small string puzzles."""

import re
from collections import Counter
from itertools import cycle

_SMILE = re.compile(r"[:;][-~]?[)D\]]")
_TRAILING_DIGITS = re.compile(r"[0-9]*\Z")
_INNER_PART = re.compile(r"\s|\w+", re.ASCII)
_BRACKET_PART = re.compile(r"[0-9]|[a-z]+")


def _is_alpha(char):
    return char.isascii() and char.isalpha()


def _lower(char):
    return char.lower() if char.isascii() else char


def _swap_case(char):
    return char.swapcase() if _is_alpha(char) else char


def count_letters(text):
    """Count ASCII letters in ``text``, keyed in sorted order."""
    return dict(sorted(Counter(char for char in text if _is_alpha(char)).items()))


def count_smileys(faces):
    """Count the strings that contain a valid smiley such as ``:)`` or ``;~D``."""
    return sum(1 for face in faces if _SMILE.search(face))


def duplicate_encode(word):
    """Map each character to ``(`` if it occurs once (ignoring case), else ``)``."""
    lowered = [_lower(char) for char in word]
    counts = Counter(lowered)
    return "".join("(" if counts[char] == 1 else ")" for char in lowered)


def increment_string(text):
    """Increment the trailing number of ``text``, keeping its zero padding."""
    digits = _TRAILING_DIGITS.search(text).group()
    if not digits:
        return text + "1"
    prefix = text[:len(text) - len(digits)]
    return prefix + str(int(digits) + 1).zfill(len(digits))


def initials(names):
    """Turn each ``"First Last"`` name into ``"F. L."``."""
    result = []
    for name in names:
        words = [word for word in name.split(" ") if word]
        if len(words) < 2:
            raise ValueError(f"expected at least two words in {name!r}")
        result.append(f"{words[0][0]}. {words[1][0]}.")
    return result


def _sort_inner(word):
    if len(word) <= 3:
        return word
    return word[0] + "".join(sorted(word[1:-1], reverse=True)) + word[-1]


def sort_inner_content(words):
    """Sort the inner letters of each word in descending order.

    Only word characters and whitespace are kept.
    """
    return "".join(_sort_inner(match.group()) for match in _INNER_PART.finditer(words))


def likes(names):
    """Describe who likes an item."""
    count = len(names)
    if count == 0:
        return "no one likes this"
    if count == 1:
        return f"{names[0]} likes this"
    if count == 2:
        return f"{names[0]} and {names[1]} like this"
    if count == 3:
        return f"{names[0]}, {names[1]} and {names[2]} like this"
    return f"{names[0]}, {names[1]} and {count - 2} others like this"


def wave(text):
    """Return copies of ``text`` with one letter upper-cased, for every letter."""
    return [
        text[:i] + char.upper() + text[i + 1:]
        for i, char in enumerate(text)
        if _is_alpha(char)
    ]


def work_on_strings(a, b):
    """Swap the case of letters occurring an odd number of times in the other string."""
    counts_a = Counter(_lower(char) for char in a)
    counts_b = Counter(_lower(char) for char in b)
    new_a = "".join(_swap_case(c) if counts_b[_lower(c)] % 2 else c for c in a)
    new_b = "".join(_swap_case(c) if counts_a[_lower(c)] % 2 else c for c in b)
    return new_a + new_b


def split_pairs(text):
    """Split ``text`` into pairs of characters, padding the last one with ``_``."""
    padded = text + "_" * (len(text) % 2)
    return [padded[start:start + 2] for start in range(0, len(padded), 2)]


def expand_brackets(text):
    """Expand expressions such as ``3(b(2(c)))`` into ``bccbccbcc``."""
    result = ""
    for piece in reversed(_BRACKET_PART.findall(text)):
        if piece.isdigit():
            result *= max(int(piece), 1)
        else:
            result += piece[::-1]
    return result[::-1]


def can_build(source, target):
    """Check that no non-space character occurs more often in ``source`` than in ``target``.

    Characters of ``source`` that never occur in ``target`` are not checked.
    """
    needed = Counter(char for char in source if char != " ")
    available = Counter(char for char in target if char != " ")
    return all(
        count <= available[char] for char, count in needed.items() if char in available
    )


def majority_vote(items):
    """Return the first character that leads the vote alone, or ``"None"``."""
    counts = Counter(item[:1] for item in items if item[:1] != " ")
    if not counts:
        return "None"
    top = max(counts.values())
    winners = [letter for letter, count in counts.items() if count == top]
    return winners[0] if len(winners) == 1 else "None"


def max_length_difference(a1, a2):
    """Largest length difference between a string of ``a1`` and one of ``a2``, or -1."""
    if not a1 or not a2:
        return -1
    if (len(a1) == 1 and a1[0] == "") or (len(a2) == 1 and a2[0] == ""):
        return -1
    lengths1 = [len(s) for s in a1]
    lengths2 = [len(s) for s in a2]
    return max(abs(max(lengths1) - min(lengths2)), abs(max(lengths2) - min(lengths1)))


class Looper:
    """Callable that returns the characters of a string in turn, forever."""

    __slots__ = ("_chars",)

    def __init__(self, text):
        if not text:
            raise ValueError("cannot loop over an empty string")
        self._chars = cycle(text)

    def __call__(self):
        return next(self._chars)