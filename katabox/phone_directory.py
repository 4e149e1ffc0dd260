"""Look-up of entries in a loosely formatted phone directory."""

import re

_NAME = re.compile(r"<.*?>")
_PHONE = re.compile(r"\+.*?[0-9].*?-.*?[0-9].*?-.*?[0-9].*?-.*?[0-9]*")
_ADDRESS_SEPARATORS = re.compile(r"[ */_;$?,:]+")


def phone(directory, number):
    """Describe the single directory line holding ``+number``.

    Returns an error message when no line or several lines match; raises
    ``ValueError`` when the matching line holds no ``<name>``.
    """
    pattern = re.compile(r"\+" + re.escape(number))
    matches = [line for line in directory.split("\n") if line and pattern.search(line)]
    if not matches:
        return f"Error => Not found: {number}"
    if len(matches) > 1:
        return f"Error => Too many people: {number}"
    entry = matches[0]
    name = _NAME.search(entry)
    if name is None:
        raise ValueError(f"no name in directory entry {entry!r}")
    rest = _PHONE.sub("", _NAME.sub("", entry))
    address = [token for token in _ADDRESS_SEPARATORS.split(rest) if token]
    result = f"Phone => {number}, Name => {name.group()[1:-1]}, Address => "
    result += "".join(f"{token} " for token in address)
    return result[:-1]