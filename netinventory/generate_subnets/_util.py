"""Private helper functions for subnet inventory generation."""

from __future__ import annotations

import ipaddress
from typing import Any, Optional

from netinventory.generate_subnets.exceptions import (
    EmptyEndpointListError,
    InvalidVlanNumberError,
    MissingFieldError,
)
from netinventory.generate_subnets.models import EndpointMap, IPv6Fields, RawVlan

# Unique-local prefix; the VLAN number is written into the fourth hextet as-is
ULA_PREFIX_TEMPLATE = "fd65:a1a8:60ad:{vlan_number}::/64"
LINK_LOCAL_NETWORK = ipaddress.IPv6Network("fe80::/64")

# Host offsets from the network address (index 0)
IPV6_GATEWAY_OFFSET = 2
IPV6_START_OFFSET = 4
IPV6_STOP_OFFSET = 100

CI_VLAN_MARKER = "ci"


def derive_ipv6(vlan_number: int) -> IPv6Fields:
    """Derive the IPv6 prefix and reserved addresses for a VLAN.

    Valid VLAN numbers are 0..9999: the number is written into the hextet as
    decimal digits, so at most four fit.

    VLAN 42 maps to ``fd65:a1a8:60ad:42::/64`` with gateway ``::2``, a usable
    window ``::4`` .. ``::64`` and link-local address ``fe80::2a/64``.

    Raises:
        InvalidVlanNumberError: If the number does not fit a single hextet
            (negative, or more than four decimal digits).
    """
    if vlan_number < 0:
        raise InvalidVlanNumberError(f"VLAN number must not be negative: {vlan_number}")
    try:
        network = ipaddress.IPv6Network(ULA_PREFIX_TEMPLATE.format(vlan_number=vlan_number))
    except ValueError as e:
        raise InvalidVlanNumberError(f"VLAN number {vlan_number} does not fit the IPv6 prefix template") from e

    base = network.network_address
    link_local = LINK_LOCAL_NETWORK.network_address + vlan_number

    return IPv6Fields(
        prefix=str(network),
        gateway=str(base + IPV6_GATEWAY_OFFSET),
        start=str(base + IPV6_START_OFFSET),
        stop=str(base + IPV6_STOP_OFFSET),
        link_local=f"{link_local}/{LINK_LOCAL_NETWORK.prefixlen}",
        link_local_prefix_length=LINK_LOCAL_NETWORK.prefixlen,
        prefix_length=network.prefixlen,
    )


def assign_endpoint(owner: str, router_hostname: str, endpoint_map: EndpointMap, position: int) -> str:
    """Pick a vCenter for a VLAN round-robin by its position in the account's VLAN list.

    Returns an empty string when there is no mapping for the owner/router pair.
    """
    routers = endpoint_map.get(owner)
    if routers is None:
        return ""
    endpoints = routers.get(router_hostname)
    if endpoints is None:
        return ""
    if not endpoints:
        raise EmptyEndpointListError(f"Endpoint list for owner '{owner}' and router '{router_hostname}' is empty")
    return endpoints[position % len(endpoints)]


def is_ci_vlan(vlan: RawVlan) -> bool:
    """Return True if the VLAN carries a name containing the CI marker."""
    return vlan.name is not None and CI_VLAN_MARKER in vlan.name


def require(value: Optional[Any], record: str, field: str) -> Any:
    """Return ``value`` or raise MissingFieldError if it is absent."""
    if value is None:
        raise MissingFieldError(record, field)
    return value
