"""Test fixtures — explicit settings, ARP table fixture and FastAPI test client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wolgate.config import Settings
from wolgate.main import create_app

ARP_TABLE = """\
router.fritz.box (192.168.178.1) at 3c:a6:2f:11:22:33 [ether] on eth0
nas.fritz.box (192.168.178.20) at aa:bb:cc:dd:ee:ff [ether] on eth0
? (192.168.178.99) at <incomplete> on eth0
printer (192.168.178.30) at 0:1b:a9:4:5:6 on en0 ifscope [ethernet]
"""


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        target_hostname="nas",
        broadcast_address="255.255.255.255",
        wol_port=9,
        source_address="0.0.0.0",
        source_port=0,
    )


@pytest_asyncio.fixture
async def client(settings: Settings):
    """Provide an async test client bound to an app built from ``settings``."""
    app = create_app(settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def arp_table():
    """``arp -a`` output with three resolvable hosts and one incomplete entry."""
    return ARP_TABLE
