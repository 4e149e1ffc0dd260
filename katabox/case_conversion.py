"""Conversions between camel, snake and kebab case identifiers."""

import re

_DELIMITERS = re.compile(r"[_\- ]+")


def _is_upper(char):
    return "A" <= char <= "Z"


def _ascii_upper(text):
    return text.upper() if "a" <= text <= "z" else text


def _ascii_lower(text):
    return text.lower() if "A" <= text <= "Z" else text


def to_camel_case(text):
    """Join words separated by ``_``, ``-`` or spaces, capitalising all but the first."""
    words = [word for word in _DELIMITERS.split(text) if word]
    if not words:
        return ""
    first, *rest = words
    return first + "".join(_ascii_upper(word[:1]) + word[1:] for word in rest)


def _split_identifier(identifier):
    """Return ``(key, words)`` or ``None`` when the identifier mixes styles.

    ``key`` is ``None`` for a plain lower-case word, ``""`` for camel case,
    and the separator character otherwise.
    """
    key = None
    words = []
    chars = list(identifier)
    start = 0
    last = len(identifier) - 1
    for i, char in enumerate(identifier):
        if key is None:
            if char in "-_":
                key = char
            elif _is_upper(char):
                key = ""
            else:
                continue
        if key == "":
            if _is_upper(char):
                chars[i] = char.lower()
                words.append("".join(chars[start:i]))
                start = i
            if i == last and words:
                words.append("".join(chars[start:]))
            if char in "-_":
                return None
        else:
            if char == key and i != start:
                words.append(identifier[start:i])
                if i < last:
                    start = i + 1
            if i == last and words:
                words.append(identifier[start:])
            if (char in "-_" and char != key) or _is_upper(char):
                return None
    return key, words


def change_case(identifier, target_case):
    """Convert ``identifier`` to ``"snake"``, ``"kebab"`` or ``"camel"`` case.

    Returns an empty string for identifiers that mix styles or for an
    unknown target case.
    """
    parsed = _split_identifier(identifier)
    if parsed is None:
        return ""
    key, words = parsed
    if key is None:
        return identifier
    if target_case == "snake":
        return identifier if key == "_" else "_".join(words)
    if target_case == "kebab":
        return identifier if key == "-" else "-".join(words)
    if target_case == "camel":
        if key == "":
            return identifier
        return "".join(
            (_ascii_lower(word[:1]) if k == 0 else _ascii_upper(word[:1])) + word[1:]
            for k, word in enumerate(words)
        )
    return ""