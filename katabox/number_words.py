"""Conversion between integers and their English names."""

import re

_ADDITIVE = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "thirteen": 13, "fourteen": 14,
    "fifteen": 15, "sixteen": 16, "seventeen": 17, "eighteen": 18,
    "nineteen": 19, "twenty": 20, "thirty": 30, "forty": 40, "fifty": 50,
    "sixty": 60, "seventy": 70, "eighty": 80, "ninety": 90,
}
_MULTIPLIERS = {"hundred": 100, "thousand": 1000, "million": 1000000}
_NAMES = {value: name for name, value in _ADDITIVE.items()}
_SEPARATORS = re.compile(r"[ \-]+")


def parse_int(text):
    """Parse an English number such as ``"three hundred seventy seven"``.

    Words are separated by spaces or hyphens; unknown words are ignored.
    """
    groups = []
    pending = 0
    scale = 0
    for word in _SEPARATORS.split(text):
        if word in _ADDITIVE:
            pending += _ADDITIVE[word]
        elif word in _MULTIPLIERS:
            multiplier = _MULTIPLIERS[word]
            if scale and multiplier > scale:
                groups[-1] = (groups[-1] + pending) * multiplier
            else:
                groups.append(pending * multiplier)
            pending = 0
            scale = multiplier
    return pending + sum(groups)


def int_to_words(number):
    """Name a number from 0 to 999 in English words."""
    if not 0 <= number <= 999:
        raise ValueError(f"number out of range 0..999: {number}")
    hundreds, rest = divmod(number, 100)
    words = []
    if hundreds:
        words.append(f"{_NAMES[hundreds]} hundred")
    if rest or not hundreds:
        if rest in _NAMES:
            words.append(_NAMES[rest])
        else:
            tens, units = divmod(rest, 10)
            words.append(f"{_NAMES[tens * 10]} {_NAMES[units]}")
    return " ".join(words)


def sort_by_name(numbers):
    """Sort numbers from 0 to 999 by the alphabetical order of their names."""
    return sorted(numbers, key=int_to_words)