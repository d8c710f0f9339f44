"""MAC address parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from wolgate.exceptions import InvalidAddressError

MAC_LENGTH = 6

_MAC_RE = re.compile(r"^[0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5}$")


@dataclass(frozen=True)
class MacAddress:
    """Six raw octets of a hardware address."""

    octets: bytes

    def __post_init__(self):
        if not isinstance(self.octets, (bytes, bytearray)) or len(self.octets) != MAC_LENGTH:
            raise InvalidAddressError(self.octets, "MAC address must be exactly 6 bytes")
        object.__setattr__(self, "octets", bytes(self.octets))

    def __str__(self) -> str:
        return ":".join(f"{b:02X}" for b in self.octets)

    def __bytes__(self) -> bytes:
        return self.octets


def parse_mac(text: str) -> MacAddress:
    """Parse ``"AA:BB:CC:DD:EE:FF"`` (any case) into a :class:`MacAddress`.

    Only colon separators and two-digit groups are accepted.
    """
    if not isinstance(text, str) or not _MAC_RE.match(text.strip()):
        raise InvalidAddressError(text)
    return MacAddress(bytes.fromhex(text.strip().replace(":", "")))


def normalize_mac(text: str) -> str:
    """Zero-pad octets such as ``a:b:c:d:e:f`` (macOS ``arp`` output) and upper-case them."""
    parts = text.replace("-", ":").split(":")
    if len(parts) != MAC_LENGTH or not all(1 <= len(p) <= 2 for p in parts):
        raise InvalidAddressError(text)
    return ":".join(p.zfill(2).upper() for p in parts)
