"""Wake route — resolve the configured target via ARP and send one magic packet."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from wolgate.api.deps import get_wake_service
from wolgate.exceptions import AmbiguousHostError, HostNotFoundError, ResolutionError, WolError
from wolgate.schemas.wake import WakeResponse
from wolgate.services.wake_service import WakeService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/wake", status_code=status.HTTP_202_ACCEPTED, response_model=WakeResponse)
async def wake(wake_service: WakeService = Depends(get_wake_service)):
    """Send a Wake-on-LAN packet to the configured target host."""
    try:
        result = await wake_service.wake()
    except (HostNotFoundError, AmbiguousHostError) as e:
        logger.error("WoL lookup failed: %s", e)
        raise HTTPException(500, str(e))
    except ResolutionError as e:
        logger.error("WoL lookup failed: %s", e)
        raise HTTPException(500, "Host lookup failed")
    except WolError as e:
        logger.error("WoL send failed: %s", e)
        raise HTTPException(500, "Failed to send magic packet")
    except Exception:
        logger.exception("WoL task failed")
        raise HTTPException(500, "Wake task failed")

    return WakeResponse(
        hostname=result.hostname,
        mac_address=str(result.mac),
        destination=f"{result.destination[0]}:{result.destination[1]}",
    )
