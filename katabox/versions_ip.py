"""Version comparison and IPv4 address arithmetic."""


def _version_numbers(version):
    parts = version.split(".")
    if parts[-1] == "":
        parts.pop()
    return [int(part) for part in parts]


def compare_versions(version1, version2):
    """Return True when ``version1`` is the same as or newer than ``version2``."""
    if not version1 or not version2:
        return False
    return _version_numbers(version1) >= _version_numbers(version2)


def _ip_value(address):
    octets = [part for part in address.split(".") if part]
    if len(octets) != 4:
        raise ValueError(f"not an IPv4 address: {address!r}")
    value = 0
    for octet in octets:
        value = value * 256 + int(octet)
    return value


def ips_between(start, end):
    """Count the addresses from ``start`` up to, not including, ``end``."""
    difference = _ip_value(end) - _ip_value(start)
    if difference < 0:
        raise ValueError(f"{end} comes before {start}")
    return difference


def uint32_to_ip(ip):
    """Format a 32-bit unsigned integer as a dotted IPv4 address."""
    if not 0 <= ip < 1 << 32:
        raise ValueError(f"not a 32-bit unsigned integer: {ip}")
    return ".".join(str(octet) for octet in ip.to_bytes(4, "big"))