"""Hostname → MAC resolution by scraping the system ARP table (``arp -a``)."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass

from wolgate.config import MatchPolicy
from wolgate.exceptions import (
    AmbiguousHostError,
    HostNotFoundError,
    InvalidAddressError,
    ResolutionError,
)
from wolgate.utils.mac import MacAddress, normalize_mac, parse_mac

logger = logging.getLogger(__name__)

# "nas.fritz.box (192.168.178.20) at aa:bb:cc:dd:ee:ff [ether] on eth0"
# "? (10.0.0.7) at <incomplete> on eth0"
_ARP_LINE_RE = re.compile(
    r"^(?P<hostname>\S+)\s+\((?P<ip>[0-9.]+)\)\s+at\s+(?P<mac>[0-9A-Fa-f]{1,2}(?:[:-][0-9A-Fa-f]{1,2}){5})\b"
)

ARP_TIMEOUT = 5  # seconds


@dataclass(frozen=True)
class ArpEntry:
    hostname: str
    ip_address: str
    mac: MacAddress


def parse_arp_output(text: str) -> list[ArpEntry]:
    """Parse ``arp -a`` output into entries, skipping incomplete or unparseable lines."""
    entries: list[ArpEntry] = []
    for line in text.splitlines():
        match = _ARP_LINE_RE.match(line.strip())
        if not match:
            continue
        try:
            mac = parse_mac(normalize_mac(match.group("mac")))
        except InvalidAddressError:
            logger.debug("Skipping ARP line with bad MAC: %s", line)
            continue
        entries.append(ArpEntry(match.group("hostname"), match.group("ip"), mac))
    return entries


def match_entry(entries: list[ArpEntry], hostname: str, policy: MatchPolicy) -> ArpEntry:
    """Pick the entry for ``hostname`` according to ``policy``."""
    needle = hostname.lower()
    if policy == MatchPolicy.EXACT:
        matches = [e for e in entries if e.hostname.lower() == needle]
    else:
        matches = [e for e in entries if needle in e.hostname.lower()]

    if not matches:
        raise HostNotFoundError(hostname, [e.hostname for e in entries])

    if policy == MatchPolicy.UNIQUE and len({e.mac for e in matches}) > 1:
        raise AmbiguousHostError(hostname, [e.hostname for e in matches])

    return matches[0]


class ArpService:
    """Reads the ARP table via an external command and resolves hostnames."""

    def __init__(self, command: list[str] | None = None, policy: MatchPolicy = MatchPolicy.UNIQUE):
        self._command = list(command or ["arp", "-a"])
        self._policy = policy

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    async def _dump(self) -> str:
        """Run the ARP command and return its stdout."""
        try:
            proc = await asyncio.create_subprocess_exec(
                *self._command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ResolutionError(f"Cannot run {self._command[0]!r}: {e}") from e

        try:
            out, err = await asyncio.wait_for(proc.communicate(), timeout=ARP_TIMEOUT)
        except asyncio.TimeoutError as e:
            proc.kill()
            await proc.wait()
            raise ResolutionError(f"{self._command[0]!r} timed out") from e

        if proc.returncode != 0:
            raise ResolutionError(
                f"{self._command[0]!r} exited with {proc.returncode}: {err.decode(errors='replace').strip()}"
            )
        return out.decode(errors="replace")

    async def entries(self) -> list[ArpEntry]:
        return parse_arp_output(await self._dump())

    async def lookup(self, hostname: str) -> ArpEntry:
        """Resolve ``hostname`` to a single ARP entry."""
        if not hostname:
            raise ResolutionError("No target hostname configured")
        entries = await self.entries()
        entry = match_entry(entries, hostname, self._policy)
        logger.info("Resolved %s -> %s (%s) [%s]", hostname, entry.mac, entry.ip_address, self._policy.value)
        return entry
