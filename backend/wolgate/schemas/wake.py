"""Wake request/response schemas."""

from pydantic import BaseModel


class WakeResponse(BaseModel):
    """Returned with 202 once the magic packet has been handed to the OS."""
    status: str = "accepted"
    hostname: str
    mac_address: str
    destination: str
