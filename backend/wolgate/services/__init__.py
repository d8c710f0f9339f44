"""Business logic services, wired per application instance from explicit settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wolgate.config import Settings
    from wolgate.services.wake_service import WakeService

logger = logging.getLogger(__name__)


def init_services(settings: Settings) -> WakeService:
    """Create the ARP resolver and the wake service for ``settings``."""
    from wolgate.services.arp_service import ArpService
    from wolgate.services.wake_service import WakeService

    arp_service = ArpService(command=settings.arp_command, policy=settings.match_policy)
    wake_service = WakeService(
        arp_service=arp_service,
        target_hostname=settings.target_hostname,
        destination=settings.destination,
        source=settings.source,
        dry_run=settings.dry_run,
    )

    if not settings.target_hostname:
        logger.warning(
            "Target hostname not configured (WOLGATE_TARGET_HOSTNAME) — "
            "POST /wake will fail"
        )
    logger.info(
        "Wake service initialized (target=%r, policy=%s, destination=%s:%d)",
        settings.target_hostname, settings.match_policy.value, *settings.destination,
    )
    return wake_service
