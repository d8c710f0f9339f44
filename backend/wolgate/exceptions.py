"""Exceptions raised while parsing, resolving and sending Wake-on-LAN packets."""

from __future__ import annotations

from typing import Sequence


class WolError(Exception):
    """Base class for every wolgate error."""


class InvalidAddressError(WolError, ValueError):
    """A MAC address is malformed or does not have exactly 6 octets."""

    def __init__(self, address: object, reason: str = "invalid MAC address"):
        super().__init__(f"{reason}: {address!r}")
        self.address = address


class TransportError(WolError):
    """Socket level failure. The original ``OSError`` is chained as ``__cause__``."""

    def __init__(self, message: str, endpoint: tuple[str, int]):
        super().__init__(f"{message} ({endpoint[0]}:{endpoint[1]})")
        self.endpoint = endpoint


class BindError(TransportError):
    """The sending socket could not be bound to the source endpoint."""


class BroadcastEnableError(TransportError):
    """SO_BROADCAST could not be enabled on the sending socket."""


class SendError(TransportError):
    """The datagram could not be handed to the OS in full."""


class ResolutionError(WolError, LookupError):
    """A hostname could not be mapped to a single MAC address."""

    def __init__(self, message: str, hostname: str = "", candidates: Sequence[str] = ()):
        super().__init__(message)
        self.hostname = hostname
        self.candidates = list(candidates)


class HostNotFoundError(ResolutionError):
    def __init__(self, hostname: str, candidates: Sequence[str] = ()):
        known = ", ".join(candidates) if candidates else "none"
        super().__init__(
            f"No host matching {hostname!r} found in ARP table (known hosts: {known})",
            hostname,
            candidates,
        )


class AmbiguousHostError(ResolutionError):
    def __init__(self, hostname: str, candidates: Sequence[str] = ()):
        super().__init__(
            f"Host {hostname!r} is ambiguous, matches: {', '.join(candidates)}",
            hostname,
            candidates,
        )
