"""
IPv4 and MAC address conversion helpers.
"""

import ipaddress
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_VALID_IPADDRESS = re.compile(
    r"^((([01]?\d{1,2}|2([0-4]\d|5[0-5]))\.){3}([01]?\d{1,2}|2([0-4]\d|5[0-5])))$"
)
_MAC_DIGITS = re.compile(r"^[0-9a-fA-F]{12}$")

_OCTET_BITS = {
    0: 0,
    128: 1, 192: 2, 224: 3, 240: 4,
    248: 5, 252: 6, 254: 7, 255: 8,
}


def convert_bits_to_mask(bits: int) -> Optional[str]:
    """Return the dotted decimal mask for a prefix length (0-32)."""
    try:
        bits = int(bits)
    except (TypeError, ValueError):
        return None
    if bits == 0:
        return "0"
    if not 0 < bits <= 32:
        return None
    return str(ipaddress.IPv4Network(f"0.0.0.0/{bits}").netmask)


def convert_mask_to_bits(mask: str) -> Optional[int]:
    """Return the prefix length of a dotted decimal mask."""
    bits = 0
    for octet in mask.split("."):
        try:
            bits += _OCTET_BITS[int(octet)]
        except (KeyError, ValueError):
            return None
    return bits


def convert_ip_to_number(ip_addr: str) -> Optional[int]:
    """Return the integer value of a dotted IPv4 address."""
    if not _VALID_IPADDRESS.match(ip_addr or ""):
        logger.debug(f"convert_ip_to_number: IP address does not match a valid format - {ip_addr}")
        return None

    value = 0
    for octet in ip_addr.split("."):
        value = value * 256 + int(octet)
    return value


def convert_number_to_ip(ip_value: int) -> str:
    """Return the dotted IPv4 form of an integer; negatives wrap as unsigned 32-bit."""
    return str(ipaddress.IPv4Address(int(ip_value) % (2 ** 32)))


def decimal_to_mac(mac_address: str) -> Optional[str]:
    """Convert 12 hex digits into a colon delimited MAC address."""
    if not mac_address or not _MAC_DIGITS.match(mac_address):
        return None
    return ":".join(mac_address[i:i + 2] for i in range(0, 12, 2))
