"""Subnet record builder: turns one raw SoftLayer subnet into an inventory entry."""

from __future__ import annotations

from loguru import logger

from netinventory.generate_subnets._util import assign_endpoint, derive_ipv6, require
from netinventory.generate_subnets.models import EndpointMap, EnrichedSubnet, RawSubnet, RawVlan


def _vlan_label(vlan: RawVlan) -> str:
    return f"VLAN {vlan.id if vlan.id is not None else '?'}"


def _subnet_label(subnet: RawSubnet, vlan: RawVlan) -> str:
    return f"subnet {subnet.id if subnet.id is not None else '?'} of {_vlan_label(vlan)}"


def vlan_key(vlan: RawVlan) -> tuple[str, int]:
    """Return the validated ``(router hostname, VLAN number)`` a VLAN is stored under.

    Raises:
        MissingFieldError: If the primary router, its hostname or the VLAN number is absent.
    """
    vlan_label = _vlan_label(vlan)
    router = require(vlan.primary_router, vlan_label, "primaryRouter")
    hostname: str = require(router.hostname, vlan_label, "primaryRouter.hostname")
    vlan_number: int = require(vlan.vlan_number, vlan_label, "vlanNumber")
    return hostname, vlan_number


def build_subnet(
    subnet: RawSubnet,
    vlan: RawVlan,
    endpoint_map: EndpointMap,
    owner: str,
    position: int,
) -> EnrichedSubnet:
    """Build the enriched inventory entry for ``subnet`` on ``vlan``.

    Args:
        subnet: Raw subnet record.
        vlan: Parent VLAN of the subnet.
        endpoint_map: Owner -> router hostname -> vCenter list.
        owner: Username of the account the VLAN was fetched with.
        position: Index of the VLAN in the account's unfiltered VLAN list.

    Raises:
        MissingFieldError: If a required VLAN or subnet field is absent.
    """
    require(vlan.name, _vlan_label(vlan), "name")
    hostname, vlan_number = vlan_key(vlan)

    subnet_label = _subnet_label(subnet, vlan)
    cidr: int = require(subnet.cidr, subnet_label, "cidr")
    gateway: str = require(subnet.gateway, subnet_label, "gateway")
    netmask: str = require(subnet.netmask, subnet_label, "netmask")
    network: str = require(subnet.network_identifier, subnet_label, "networkIdentifier")

    ip_addresses = [require(ip.ip_address, subnet_label, "ipAddresses.ipAddress") for ip in subnet.ip_addresses]

    logger.info(f"router {hostname}, vlan {vlan_number}, stype {subnet.subnet_type}, network {network}")

    ipv6 = derive_ipv6(vlan_number)

    return EnrichedSubnet(
        cidr=cidr,
        # DNS is served by the gateway appliance, which is also the subnet gateway
        dns_server=gateway,
        machine_network_cidr=f"{network}/{cidr}",
        gateway=gateway,
        mask=netmask,
        network=network,
        ip_addresses=ip_addresses,
        virtual_center=assign_endpoint(owner, hostname, endpoint_map, position),
        ipv6_prefix=ipv6.prefix,
        start_ipv6_address=ipv6.start,
        stop_ipv6_address=ipv6.stop,
        link_local_ipv6=ipv6.link_local,
        cidr_ipv6=ipv6.prefix_length,
        gateway_ipv6=ipv6.gateway,
    )
