"""Result aggregation keyed by router hostname and VLAN number."""

from __future__ import annotations

import json
from typing import Any, Iterator

from loguru import logger

from netinventory.generate_subnets.models import EnrichedSubnet


class SubnetVlanMap:
    """Nested ``router hostname -> VLAN number -> EnrichedSubnet`` mapping.

    Holds at most one subnet per (router, VLAN number). A later insert for the
    same pair replaces the earlier one; VLANs that carry several subnets, or
    accounts sharing a router, therefore keep only the last subnet seen.
    """

    def __init__(self) -> None:
        self._routers: dict[str, dict[int, EnrichedSubnet]] = {}

    def insert(self, router_hostname: str, vlan_number: int, subnet: EnrichedSubnet) -> None:
        """Store ``subnet`` under (router, VLAN number), replacing any prior entry."""
        vlans = self._routers.setdefault(router_hostname, {})
        previous = vlans.get(vlan_number)
        if previous is not None:
            logger.warning(
                f"router {router_hostname}, vlan {vlan_number}: replacing network "
                f"{previous.machine_network_cidr} with {subnet.machine_network_cidr}"
            )
        vlans[vlan_number] = subnet

    def get(self, router_hostname: str, vlan_number: int) -> EnrichedSubnet | None:
        return self._routers.get(router_hostname, {}).get(vlan_number)

    def routers(self) -> list[str]:
        return list(self._routers)

    def items(self) -> Iterator[tuple[str, int, EnrichedSubnet]]:
        """Yield ``(router, vlan_number, subnet)`` in insertion order."""
        for router, vlans in self._routers.items():
            for vlan_number, subnet in vlans.items():
                yield router, vlan_number, subnet

    def __len__(self) -> int:
        return sum(len(vlans) for vlans in self._routers.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        router, vlan_number = key
        return vlan_number in self._routers.get(router, {})

    def to_dict(self) -> dict[str, dict[int, dict[str, Any]]]:
        """Return the mapping with subnets serialized under their output keys.

        Routers and VLAN numbers are ordered by their text form ("100" before
        "42"), the order the provisioning tooling has always received.
        """
        return {
            router: {
                vlan_number: self._routers[router][vlan_number].model_dump(by_alias=True)
                for vlan_number in sorted(self._routers[router], key=str)
            }
            for router in sorted(self._routers)
        }

    def to_json(self) -> str:
        """Render the mapping as 4-space indented JSON."""
        return json.dumps(self.to_dict(), indent=4)
