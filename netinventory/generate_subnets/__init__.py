"""SoftLayer subnet inventory: CI VLAN subnets with IPv6 addressing and vCenter assignment."""

from netinventory.generate_subnets._util import assign_endpoint, derive_ipv6, is_ci_vlan
from netinventory.generate_subnets.aggregator import SubnetVlanMap
from netinventory.generate_subnets.builder import build_subnet
from netinventory.generate_subnets.collector import SubnetInventoryCollector, write_subnets
from netinventory.generate_subnets.models import (
    AccountCredential,
    EndpointMap,
    EnrichedSubnet,
    IPv6Fields,
    RawSubnet,
    RawVlan,
)

__all__ = [
    "assign_endpoint",
    "derive_ipv6",
    "is_ci_vlan",
    "build_subnet",
    "SubnetVlanMap",
    "SubnetInventoryCollector",
    "write_subnets",
    "AccountCredential",
    "EndpointMap",
    "EnrichedSubnet",
    "IPv6Fields",
    "RawSubnet",
    "RawVlan",
]
