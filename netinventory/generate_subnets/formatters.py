"""Terminal summary formatter for the generated subnet inventory."""

from __future__ import annotations

from tabulate import tabulate

from netinventory.generate_subnets.aggregator import SubnetVlanMap

SUMMARY_HEADERS = ["Router", "VLAN", "Network", "Gateway", "IPs", "vCenter", "IPv6 Prefix"]


class SummaryFormatter:
    """Format a SubnetVlanMap as a terminal table, one row per subnet."""

    def __init__(self, subnet_map: SubnetVlanMap, tablefmt: str = "simple") -> None:
        self.subnet_map = subnet_map
        self.tablefmt = tablefmt

    def rows(self) -> list[list[str | int]]:
        rows: list[list[str | int]] = []
        for router, vlan_number, subnet in sorted(self.subnet_map.items(), key=lambda item: (item[0], item[1])):
            rows.append(
                [
                    router,
                    vlan_number,
                    subnet.machine_network_cidr,
                    subnet.gateway,
                    len(subnet.ip_addresses),
                    subnet.virtual_center or "-",
                    subnet.ipv6_prefix,
                ]
            )
        return rows

    def format(self) -> str:
        """Return the table followed by a total line."""
        table = tabulate(self.rows(), headers=SUMMARY_HEADERS, tablefmt=self.tablefmt)
        routers = len(self.subnet_map.routers())
        return f"{table}\n\n{len(self.subnet_map)} subnets on {routers} routers"
