"""Tests for the HTTP surface — index page, health and POST /wake."""

import sys
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from wolgate.exceptions import SendError
from wolgate.main import create_app
from wolgate.services.arp_service import ArpService
from wolgate.utils.wol import MagicPacket


@pytest.mark.asyncio
async def test_index_page(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'action="/wake"' in resp.text


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "wolgate"
    assert "version" in data


@pytest.mark.asyncio
async def test_ping(client: AsyncClient):
    resp = await client.get("/ping")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_wake_success(client: AsyncClient, arp_table):
    """One matching ARP entry → packet sent, 202."""
    with (
        patch.object(ArpService, "_dump", AsyncMock(return_value=arp_table)),
        patch.object(MagicPacket, "send_to") as mock_send_to,
    ):
        resp = await client.post("/wake")

    assert resp.status_code == 202
    data = resp.json()
    assert data["status"] == "accepted"
    assert data["hostname"] == "nas.fritz.box"
    assert data["mac_address"] == "AA:BB:CC:DD:EE:FF"
    assert data["destination"] == "255.255.255.255:9"
    mock_send_to.assert_called_once_with(("255.255.255.255", 9), ("0.0.0.0", 0))


@pytest.mark.asyncio
async def test_wake_no_match(client: AsyncClient):
    """Zero matches → 500 naming the known hostnames."""
    table = "router.fritz.box (192.168.178.1) at 3c:a6:2f:11:22:33 [ether] on eth0\n"
    with (
        patch.object(ArpService, "_dump", AsyncMock(return_value=table)),
        patch.object(MagicPacket, "send_to") as mock_send_to,
    ):
        resp = await client.post("/wake")

    assert resp.status_code == 500
    detail = resp.json()["detail"]
    assert "No host matching 'nas'" in detail
    assert "router.fritz.box" in detail
    mock_send_to.assert_not_called()


@pytest.mark.asyncio
async def test_wake_send_failure_hides_internals(client: AsyncClient, arp_table):
    with (
        patch.object(ArpService, "_dump", AsyncMock(return_value=arp_table)),
        patch.object(
            MagicPacket, "send_to",
            side_effect=SendError("Cannot send magic packet: [Errno 101]", ("255.255.255.255", 9)),
        ),
    ):
        resp = await client.post("/wake")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to send magic packet"


@pytest.mark.asyncio
async def test_wake_internal_failure(client: AsyncClient, arp_table):
    with (
        patch.object(ArpService, "_dump", AsyncMock(return_value=arp_table)),
        patch.object(MagicPacket, "send_to", side_effect=RuntimeError("boom")),
    ):
        resp = await client.post("/wake")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Wake task failed"


@pytest.mark.asyncio
async def test_wake_dry_run(settings, arp_table):
    app = create_app(settings.model_copy(update={"dry_run": True}))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        with (
            patch.object(ArpService, "_dump", AsyncMock(return_value=arp_table)),
            patch.object(MagicPacket, "send_to") as mock_send_to,
        ):
            resp = await c.post("/wake")

    assert resp.status_code == 202
    mock_send_to.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "arp_command",
    [
        [sys.executable, "-c", "import sys; sys.stderr.write('/etc/internal path'); sys.exit(2)"],
        ["/nonexistent/bin/arp"],
    ],
)
async def test_wake_lookup_failure_hides_internals(settings, arp_command):
    """Command failures map to a fixed detail; only the log sees the reason."""
    app = create_app(settings.model_copy(update={"arp_command": arp_command}))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        with patch.object(MagicPacket, "send_to") as mock_send_to:
            resp = await c.post("/wake")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Host lookup failed"
    mock_send_to.assert_not_called()


@pytest.mark.asyncio
async def test_wake_ambiguous_host(client: AsyncClient):
    table = (
        "nas.fritz.box (192.168.178.20) at aa:bb:cc:dd:ee:ff [ether] on eth0\n"
        "nas-backup.fritz.box (192.168.178.21) at 11:22:33:44:55:66 [ether] on eth0\n"
    )
    with (
        patch.object(ArpService, "_dump", AsyncMock(return_value=table)),
        patch.object(MagicPacket, "send_to") as mock_send_to,
    ):
        resp = await client.post("/wake")

    assert resp.status_code == 500
    assert "nas-backup.fritz.box" in resp.json()["detail"]
    mock_send_to.assert_not_called()
