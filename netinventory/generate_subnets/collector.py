"""Subnet inventory collector: drives fetch, filter, build and aggregation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Protocol

from loguru import logger

from netinventory.generate_subnets._util import is_ci_vlan
from netinventory.generate_subnets.aggregator import SubnetVlanMap
from netinventory.generate_subnets.builder import build_subnet, vlan_key
from netinventory.generate_subnets.models import AccountCredential, EndpointMap, RawVlan
from netinventory.generate_subnets.softlayer import SoftLayerRESTTransport

DEFAULT_OUTPUT = "subnets.json"


class VlanSource(Protocol):
    def __enter__(self) -> "VlanSource": ...

    def __exit__(self, *exc_info: object) -> None: ...

    def get_network_vlans(self) -> list[RawVlan]: ...


TransportFactory = Callable[[AccountCredential], VlanSource]


def _softlayer_transport(credential: AccountCredential) -> VlanSource:
    return SoftLayerRESTTransport(credential.username, credential.api_token)


class SubnetInventoryCollector:
    """Collect CI VLAN subnets for every account into a SubnetVlanMap.

    Accounts are processed one after another in the given order. Any error
    aborts the whole collection.
    """

    def __init__(
        self,
        credentials: list[AccountCredential],
        endpoint_map: EndpointMap,
        transport_factory: TransportFactory = _softlayer_transport,
    ) -> None:
        self.credentials = credentials
        self.endpoint_map = endpoint_map
        self.transport_factory = transport_factory

    def collect(self) -> SubnetVlanMap:
        subnet_map = SubnetVlanMap()
        for credential in self.credentials:
            logger.info(credential.username)
            with self.transport_factory(credential) as transport:
                vlans = transport.get_network_vlans()
            self._collect_account(credential.username, vlans, subnet_map)
        return subnet_map

    def _collect_account(self, owner: str, vlans: list[RawVlan], subnet_map: SubnetVlanMap) -> None:
        # position counts every VLAN, including the ones filtered out below
        for position, vlan in enumerate(vlans):
            if not is_ci_vlan(vlan):
                continue
            for subnet in vlan.subnets:
                entry = build_subnet(subnet, vlan, self.endpoint_map, owner, position)
                router_hostname, vlan_number = vlan_key(vlan)
                subnet_map.insert(router_hostname, vlan_number, entry)


def write_subnets(subnet_map: SubnetVlanMap, path: str | Path = DEFAULT_OUTPUT) -> Path:
    """Write the inventory as JSON to ``path`` with mode 0644, replacing any existing file."""
    path = Path(path)
    path.write_text(subnet_map.to_json())
    os.chmod(path, 0o644)
    logger.info(f"Wrote {len(subnet_map)} subnets to {path}")
    return path
