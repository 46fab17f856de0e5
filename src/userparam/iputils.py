"""IP address and range syntax helpers.

Addresses are accepted in the forms user names can take: dotted-quad IPv4
(octets may carry leading zeros) and colon-separated IPv6 without embedded
IPv4 tails or zone ids. Ranges are ``address/prefix``.

``sanitize_ip`` produces the canonical text form used as the name of an
anonymous identity:

    >>> sanitize_ip("010.001.002.003")
    '10.1.2.3'
    >>> sanitize_ip("2001:db8::1")
    '2001:DB8:0:0:0:0:0:1'
"""

import ipaddress
import re

RE_IP_BYTE = r"(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|0?[0-9]?[0-9])"
RE_IP_ADD = rf"{RE_IP_BYTE}\.{RE_IP_BYTE}\.{RE_IP_BYTE}\.{RE_IP_BYTE}"
RE_IP_PREFIX = r"(?:3[0-2]|[12]?[0-9])"
RE_IPV6_PREFIX = r"(?:12[0-8]|1[01][0-9]|[1-9]?[0-9])"

_IPV4_ADDRESS = re.compile(RE_IP_ADD)
_IPV4_RANGE = re.compile(rf"{RE_IP_ADD}/{RE_IP_PREFIX}")
_IPV4_MASKED = re.compile(rf"{RE_IP_BYTE}\.{RE_IP_BYTE}\.{RE_IP_BYTE}\.xxx")
_IPV6_RANGE = re.compile(rf"([0-9A-Fa-f:]+)/({RE_IPV6_PREFIX})")
_IPV4_LEADING_ZEROS = re.compile(r"(?:^|(?<=\.))0+(?=[1-9]|0[./]|0$)")


def is_ipv4(value: str) -> bool:
    """Whether ``value`` is an IPv4 address or range."""
    return bool(_IPV4_ADDRESS.fullmatch(value) or _IPV4_RANGE.fullmatch(value))


def _is_ipv6_address(value: str) -> bool:
    if not value or "." in value or "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_ipv6(value: str) -> bool:
    """Whether ``value`` is an IPv6 address or range."""
    match = _IPV6_RANGE.fullmatch(value)
    if match:
        return _is_ipv6_address(match.group(1))
    return _is_ipv6_address(value)


def is_ip_address(value: str) -> bool:
    """Whether ``value`` is an address or a range of either family."""
    return is_ipv4(value) or is_ipv6(value)


def is_valid(value: str) -> bool:
    """Whether ``value`` is a single IPv4 or IPv6 address (not a range)."""
    return bool(_IPV4_ADDRESS.fullmatch(value)) or _is_ipv6_address(value)


def is_valid_range(value: str) -> bool:
    """Whether ``value`` is an ``address/prefix`` range of either family."""
    if _IPV4_RANGE.fullmatch(value):
        return True
    match = _IPV6_RANGE.fullmatch(value)
    return bool(match) and _is_ipv6_address(match.group(1))


def is_ipv4_masked(value: str) -> bool:
    """Whether ``value`` is a legacy masked address such as ``1.2.3.xxx``."""
    return bool(_IPV4_MASKED.fullmatch(value))


def sanitize_ip(value: str | None) -> str | None:
    """Convert an address or range to its canonical text form.

    Input that is not an IP address is returned trimmed, since callers pass
    arbitrary user names through here. Empty input yields None.
    """
    if value is None:
        return None
    value = value.strip()
    if value == "":
        return None
    if not is_ip_address(value):
        return value
    if is_ipv4(value):
        return _IPV4_LEADING_ZEROS.sub("", value)

    address, sep, prefix = value.partition("/")
    groups = ipaddress.IPv6Address(address).exploded.split(":")
    canonical = ":".join(group.lstrip("0") or "0" for group in groups).upper()
    return f"{canonical}{sep}{prefix}"
