"""Wake-on-LAN (WOL) implementation: magic packet construction and UDP broadcast."""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Union

from wolgate.exceptions import BindError, BroadcastEnableError, InvalidAddressError, SendError
from wolgate.utils.mac import MAC_LENGTH, MacAddress, parse_mac

logger = logging.getLogger(__name__)

HEADER = b"\xff" * 6
MAC_REPETITIONS = 16
PACKET_SIZE = len(HEADER) + MAC_LENGTH * MAC_REPETITIONS  # 102

DEFAULT_DESTINATION = ("255.255.255.255", 9)
DEFAULT_SOURCE = ("0.0.0.0", 0)

Endpoint = tuple[str, int]
MacLike = Union[MacAddress, bytes, bytearray]


def build_magic_packet(mac: MacLike) -> bytes:
    """
    Build the 102-byte magic packet for ``mac``.

    Layout: 6x 0xFF followed by the MAC address repeated 16 times.

    Args:
        mac: 6 raw bytes or a :class:`MacAddress`
    """
    if not isinstance(mac, (MacAddress, bytes, bytearray)):
        raise InvalidAddressError(mac, "MAC address must be 6 raw bytes")
    octets = bytes(mac)
    if len(octets) != MAC_LENGTH:
        raise InvalidAddressError(octets, "MAC address must be exactly 6 bytes")

    buf = bytearray(PACKET_SIZE)
    start = len(HEADER)
    buf[:start] = HEADER
    buf[start:start + MAC_LENGTH] = octets

    # Double the already written MAC run: 6 -> 12 -> 24 -> 48 -> 96
    written = MAC_LENGTH
    while written < MAC_LENGTH * MAC_REPETITIONS:
        buf[start + written:start + 2 * written] = buf[start:start + written]
        written *= 2

    return bytes(buf)


@dataclass(frozen=True)
class MagicPacket:
    """A magic packet for one target MAC (built but not sent yet)."""

    mac: MacAddress
    magic_bytes: bytes

    @classmethod
    def from_mac(cls, mac: MacLike) -> "MagicPacket":
        if not isinstance(mac, MacAddress):
            mac = MacAddress(mac)
        return cls(mac=mac, magic_bytes=build_magic_packet(mac))

    @classmethod
    def from_string(cls, text: str) -> "MagicPacket":
        return cls.from_mac(parse_mac(text))

    def send(self) -> None:
        send(self.magic_bytes)

    def send_to(self, destination: Endpoint, source: Endpoint = DEFAULT_SOURCE) -> None:
        send_to(self.magic_bytes, destination, source)


def send(payload: bytes) -> None:
    """Send ``payload`` to 255.255.255.255:9, letting the OS pick interface and port."""
    send_to(payload, DEFAULT_DESTINATION, DEFAULT_SOURCE)


def send_to(payload: bytes, destination: Endpoint, source: Endpoint = DEFAULT_SOURCE) -> None:
    """
    Send ``payload`` as a single UDP datagram from ``source`` to ``destination``.

    Raises:
        BindError: the socket could not be bound to ``source``
        BroadcastEnableError: SO_BROADCAST could not be set
        SendError: sending failed or only part of the payload was written
    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            sock.bind(source)
        except OSError as e:
            raise BindError(f"Cannot bind socket: {e}", source) from e

        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as e:
            raise BroadcastEnableError(f"Cannot enable broadcast: {e}", source) from e

        try:
            sent = sock.sendto(payload, destination)
        except OSError as e:
            raise SendError(f"Cannot send magic packet: {e}", destination) from e

    if sent != len(payload):
        raise SendError(f"Short write: {sent} of {len(payload)} bytes sent", destination)


def send_wol(
    mac_address: str,
    broadcast: str = DEFAULT_DESTINATION[0],
    port: int = DEFAULT_DESTINATION[1],
    source: Endpoint = DEFAULT_SOURCE,
) -> MagicPacket:
    """
    Send a Wake-on-LAN magic packet.

    Args:
        mac_address: MAC address in format "AA:BB:CC:DD:EE:FF"
        broadcast: Broadcast address (default: 255.255.255.255)
        port: UDP port (default: 9)
        source: (address, port) to bind the sending socket to
    """
    packet = MagicPacket.from_string(mac_address)
    packet.send_to((broadcast, port), source)
    logger.info("WoL magic packet sent to %s via %s:%d", packet.mac, broadcast, port)
    return packet
