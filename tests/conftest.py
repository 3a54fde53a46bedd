"""Shared fixtures for the netinventory test suite."""

from __future__ import annotations

import pytest
from loguru import logger

from netinventory.generate_subnets.models import RawSubnet, RawVlan

# ── generate_subnets fixtures ─────────────────────────────────────────


class FakeTransport:
    """Stand-in for SoftLayerRESTTransport returning canned VLANs."""

    def __init__(self, vlans: list[RawVlan] | None = None, error: Exception | None = None) -> None:
        self.vlans = vlans or []
        self.error = error
        self.entered = False
        self.exited = False

    def __enter__(self) -> "FakeTransport":
        self.entered = True
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.exited = True

    def get_network_vlans(self) -> list[RawVlan]:
        if self.error is not None:
            raise self.error
        return self.vlans


@pytest.fixture()
def log_records():
    """Capture loguru records emitted by the netinventory package."""
    records: list[dict] = []
    logger.enable("netinventory")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)
    logger.disable("netinventory")


@pytest.fixture()
def raw_subnet():
    """Factory fixture returning a RawSubnet parsed from API-style camelCase data."""

    def _make(**overrides):
        data = {
            "id": 1001,
            "ipAddressCount": 1,
            "gateway": "10.0.0.1",
            "cidr": 24,
            "netmask": "255.255.255.0",
            "networkIdentifier": "10.0.0.0",
            "subnetType": "PRIMARY",
            "ipAddresses": [
                {"ipAddress": "10.0.0.2", "isNetwork": False, "isBroadcast": False, "isGateway": False},
            ],
        }
        data.update(overrides)
        return RawSubnet.model_validate(data)

    return _make


@pytest.fixture()
def raw_vlan(raw_subnet):
    """Factory fixture returning a RawVlan with one subnet by default."""

    def _make(subnets=None, **overrides):
        data = {
            "id": 501,
            "name": "ci-test",
            "vlanNumber": 42,
            "fullyQualifiedName": "dal10.bcr01.42",
            "primaryRouter": {"hostname": "router-a"},
        }
        data.update(overrides)
        vlan = RawVlan.model_validate(data)
        vlan.subnets = [raw_subnet()] if subnets is None else subnets
        return vlan

    return _make


@pytest.fixture()
def endpoint_map():
    """Owner -> router -> vCenter association used across tests."""
    return {
        "owner1": {
            "router-a": ["vc1", "vc2"],
            "router-b": ["vc-b0", "vc-b1", "vc-b2"],
        },
    }


@pytest.fixture()
def fake_transport():
    """The FakeTransport class, for building canned per-account transports."""
    return FakeTransport


@pytest.fixture()
def fake_transport_factory():
    """Factory fixture building a transport_factory from username -> FakeTransport."""

    def _make(transports: dict[str, FakeTransport]):
        def factory(credential):
            return transports[credential.username]

        return factory

    return _make


@pytest.fixture()
def expected_vlan42_subnet():
    """Serialized inventory entry for the VLAN 42 / 10.0.0.0/24 scenario."""
    return {
        "cidr": 24,
        "dnsServer": "10.0.0.1",
        "machineNetworkCidr": "10.0.0.0/24",
        "gateway": "10.0.0.1",
        "mask": "255.255.255.0",
        "network": "10.0.0.0",
        "ipAddresses": ["10.0.0.2"],
        "virtualcenter": "vc1",
        "ipv6prefix": "fd65:a1a8:60ad:42::/64",
        "StartIPv6Address": "fd65:a1a8:60ad:42::4",
        "StopIPv6Address": "fd65:a1a8:60ad:42::64",
        "LinkLocalIPv6": "fe80::2a/64",
        "CidrIPv6": 64,
        "gatewayipv6": "fd65:a1a8:60ad:42::2",
    }
