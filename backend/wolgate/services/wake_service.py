"""Wake a configured host: ARP lookup, then build + send on a worker thread."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from wolgate.services.arp_service import ArpService
from wolgate.utils.mac import MacAddress
from wolgate.utils.wol import Endpoint, MagicPacket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WakeResult:
    hostname: str
    mac: MacAddress
    destination: Endpoint


class WakeService:
    """Resolves the target hostname and broadcasts its magic packet."""

    def __init__(
        self,
        arp_service: ArpService,
        target_hostname: str,
        destination: Endpoint,
        source: Endpoint,
        dry_run: bool = False,
    ):
        self._arp = arp_service
        self._target = target_hostname
        self._destination = destination
        self._source = source
        self._dry_run = dry_run

    def _send(self, mac: MacAddress) -> bool:
        """Build and send the packet. Returns False when nothing was sent (dry run)."""
        packet = MagicPacket.from_mac(mac)
        if self._dry_run:
            logger.info("[DRY RUN] WoL packet (not sent): %s", mac)
            return False
        packet.send_to(self._destination, self._source)
        return True

    async def wake_mac(self, mac: MacAddress, hostname: str = "") -> WakeResult:
        """Send the magic packet for ``mac`` without blocking the event loop."""
        if await asyncio.to_thread(self._send, mac):
            logger.info(
                "WoL magic packet sent to %s via %s:%d",
                mac, self._destination[0], self._destination[1],
            )
        return WakeResult(hostname=hostname, mac=mac, destination=self._destination)

    async def wake(self) -> WakeResult:
        """Resolve the configured target hostname and wake it."""
        entry = await self._arp.lookup(self._target)
        return await self.wake_mac(entry.mac, entry.hostname)
