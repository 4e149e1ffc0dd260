"""Decoding of Morse code."""

import re

_CODES = {
    ".-": "A", "-...": "B", "-.-.": "C", "-..": "D",
    ".": "E", "..-.": "F", "--.": "G", "....": "H",
    "..": "I", ".---": "J", "-.-": "K", ".-..": "L",
    "--": "M", "-.": "N", "---": "O", ".--.": "P",
    "--.-": "Q", ".-.": "R", "...": "S", "-": "T",
    "..-": "U", "...-": "V", ".--": "W", "-..-": "X",
    "-.--": "Y", "--..": "Z", "X": " ", "-.-.--": "!",
    ".-.-.-": ".", "...---...": "SOS",
}

_WORD_GAP = re.compile(r"(?<= ) (?= )")


def decode_morse(code):
    """Decode Morse ``code``; three spaces separate words, unknown symbols vanish."""
    marked = _WORD_GAP.sub("X", code.lstrip(" "))
    return "".join(_CODES.get(token, "") for token in marked.split(" ") if token)